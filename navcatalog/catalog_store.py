# catalog_store.py
import json
import logging
import os
import tempfile
from .errors import LoadError
from .models import NavigationCatalog

logger = logging.getLogger(__name__)

CATEGORY_KEYS = ("id", "name", "sites")
SITE_KEYS = ("name", "url", "icon", "description")


def dump_catalog(catalog):
    return json.dumps(catalog.to_dict(), ensure_ascii=False, indent=2) + "\n"


def save_catalog(catalog, file_path):
    """
    Write the catalog as JSON, replacing any previous file in one step.

    Parameters:
    - catalog: NavigationCatalog to persist.
    - file_path: Destination of the JSON artifact. Missing directories are created.
    """
    directory = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(directory, exist_ok=True)

    content = dump_catalog(catalog)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".navigation-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as file:
            file.write(content)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise
    logger.info(f"Catalog saved: {file_path}")


def validate_catalog_data(data):
    if not isinstance(data, dict) or not isinstance(data.get("categories"), list):
        raise LoadError("Catalog should be an object with a 'categories' list.")

    for i, category in enumerate(data["categories"]):
        if not isinstance(category, dict):
            raise LoadError(f"Category {i} is not an object.")
        for key in CATEGORY_KEYS:
            if key not in category:
                raise LoadError(f"Category {i} is missing '{key}'.")
        if not isinstance(category["id"], str) or not isinstance(category["name"], str):
            raise LoadError(f"Category {i} has a non-string id or name.")
        if not isinstance(category["sites"], list):
            raise LoadError(f"Category {i} sites should be a list.")

        for j, site in enumerate(category["sites"]):
            if not isinstance(site, dict):
                raise LoadError(f"Site {j} of category {i} is not an object.")
            for key in SITE_KEYS:
                if not isinstance(site.get(key), str):
                    raise LoadError(f"Site {j} of category {i} is missing string '{key}'.")


def load_catalog(file_path):
    """
    Read a persisted catalog.

    Raises:
        LoadError: If the file is missing, unreadable, not JSON or not a catalog.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except FileNotFoundError as e:
        raise LoadError(f"Catalog not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Catalog unreadable: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Catalog is not valid JSON: {e}") from e

    validate_catalog_data(data)
    return NavigationCatalog.from_dict(data)
