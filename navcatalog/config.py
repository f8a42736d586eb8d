# config.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Config:
    TARGET_URL = os.getenv("NAVCATALOG_TARGET_URL", "https://alans.site/")
    CATALOG_PATH = os.getenv("NAVCATALOG_CATALOG_PATH", os.path.join("data", "navigation.json"))
    USER_AGENT = os.getenv(
        "NAVCATALOG_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    REQUEST_TIMEOUT = float(os.getenv("NAVCATALOG_REQUEST_TIMEOUT", "30"))
    # Politeness wait before the source page is contacted
    CRAWL_START_DELAY = float(os.getenv("NAVCATALOG_START_DELAY", "1.0"))

    CATEGORY_TAG = "h1"
    SITE_TAG = "h4"
    CONTAINER_TAG = "div"
    # The page reuses the category heading level for its banner and contact link
    EXCLUDED_TITLES = frozenset({"Alans的导航站", "联系我"})
    ALWAYS_ADMITTED_TITLES = frozenset({"常用推荐"})

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level=None):
    logging.basicConfig(level=level or Config.LOG_LEVEL, format=LOG_FORMAT)
