# document_source.py
import logging
import requests
from bs4 import BeautifulSoup, Tag
from .errors import FetchError, ParseError

logger = logging.getLogger(__name__)


def fetch_markup(url, user_agent, timeout=30):
    """
    Download the raw markup of the source page.

    Args:
        url (str): Page to download.
        user_agent (str): Value sent as the User-Agent header.
        timeout (float): Seconds to wait for the server.

    Returns:
        str: Decoded response body.

    Raises:
        FetchError: If the server is unreachable, times out or answers with a non-success status.
    """
    logger.info(f"Fetching {url}")
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Error fetching {url}: {e}") from e

    # requests falls back to ISO-8859-1 for text/html without a charset
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = response.apparent_encoding
    return response.text


def parse_markup(markup):
    """
    Parse markup into a BeautifulSoup tree.

    Raises:
        ParseError: If the markup is empty or the parser fails.
    """
    if not markup or not markup.strip():
        raise ParseError("Empty document")
    try:
        return BeautifulSoup(markup, "html.parser")
    except Exception as e:
        raise ParseError(f"Error parsing markup: {e}") from e


def iter_elements(tree):
    """Yield every tag of the tree in document order."""
    for element in tree.descendants:
        if isinstance(element, Tag):
            yield element
