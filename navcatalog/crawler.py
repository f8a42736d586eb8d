# crawler.py
import argparse
import logging
import sys
import time
from .catalog_store import save_catalog
from .config import Config, configure_logging
from .document_source import fetch_markup, parse_markup
from .errors import FetchError, ParseError
from .extractor import CatalogExtractor

logger = logging.getLogger(__name__)


def crawl(url=None, output_file=None, delay=None, config=Config):
    """
    Run one extraction: wait, fetch the page, rebuild the catalog and save it.

    Args:
        url (str, optional): Page to crawl. Defaults to config.TARGET_URL.
        output_file (str, optional): Artifact path. Defaults to config.CATALOG_PATH.
        delay (float, optional): Seconds to wait before fetching. Defaults to config.CRAWL_START_DELAY.

    Returns:
        NavigationCatalog: The catalog that was written.

    Raises:
        FetchError: If the page cannot be downloaded.
        ParseError: If the page cannot be parsed.
    """
    url = url or config.TARGET_URL
    output_file = output_file or config.CATALOG_PATH
    delay = config.CRAWL_START_DELAY if delay is None else delay

    logger.info(f"Waiting {delay:g} seconds before starting...")
    time.sleep(delay)

    logger.info(f"Starting crawler for {url}...")
    markup = fetch_markup(url, config.USER_AGENT, timeout=config.REQUEST_TIMEOUT)
    tree = parse_markup(markup)
    catalog = CatalogExtractor.from_config(config).extract(tree)

    save_catalog(catalog, output_file)
    logger.info(f"Successfully crawled {len(catalog.categories)} categories "
                f"with {catalog.site_count()} sites.")
    return catalog


def build_parser():
    parser = argparse.ArgumentParser(description="Crawl the navigation page once and save its catalog.")
    parser.add_argument("--url", help=f"Page to crawl (default: {Config.TARGET_URL})")
    parser.add_argument("--output", help=f"Catalog JSON path (default: {Config.CATALOG_PATH})")
    parser.add_argument("--delay", type=float, help="Seconds to wait before fetching")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        crawl(url=args.url, output_file=args.output, delay=args.delay)
    except (FetchError, ParseError) as e:
        logger.error(f"Error during crawl: {str(e)}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
