# search.py
from typing import List
from .models import NavigationCatalog, Site
from .text_processing import normalize_keyword


def site_matches(site: Site, keyword: str) -> bool:
    if keyword in site.name.lower():
        return True
    return bool(site.description) and keyword in site.description.lower()


def filter_sites(sites: List[Site], keyword: str) -> List[Site]:
    """Sites whose name or description contains the keyword, case-insensitively."""
    keyword = normalize_keyword(keyword)
    if not keyword:
        return list(sites)
    return [site for site in sites if site_matches(site, keyword)]


def visible_sites(catalog: NavigationCatalog, active_index: int, keyword: str = "") -> List[Site]:
    category = catalog.category_at(active_index)
    if category is None:
        return []
    return filter_sites(category.sites, keyword)


class CatalogView:
    def __init__(self, catalog: NavigationCatalog, active_index: int = 0, keyword: str = ""):
        self.catalog = catalog
        self.active_index = active_index
        self.keyword = normalize_keyword(keyword)

    @property
    def active_category(self):
        return self.catalog.category_at(self.active_index)

    def switch_category(self, index: int) -> bool:
        if index == self.active_index:
            return False
        self.active_index = index
        return True

    def set_keyword(self, text: str):
        self.keyword = normalize_keyword(text)

    def visible_sites(self) -> List[Site]:
        return visible_sites(self.catalog, self.active_index, self.keyword)
