# extractor.py
import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Optional
from bs4 import Tag
from .config import Config
from .document_source import iter_elements
from .models import Category, NavigationCatalog, Site

logger = logging.getLogger(__name__)


def link_inside(marker: Tag) -> Optional[Tag]:
    return marker.find("a")


def link_around(marker: Tag) -> Optional[Tag]:
    return marker.find_parent("a")


def link_beside(marker: Tag) -> Optional[Tag]:
    if marker.parent is None:
        return None
    return marker.parent.find("a")


# Tried in order, the first resolver returning a link wins
LINK_RESOLVERS = [link_inside, link_around, link_beside]


def resolve_link(marker: Tag, resolvers=LINK_RESOLVERS) -> Optional[Tag]:
    for resolver in resolvers:
        link = resolver(marker)
        if link is not None:
            return link
    return None


def element_text(element: Optional[Tag]) -> str:
    if element is None:
        return ""
    return element.get_text().strip()


@dataclass
class _Accumulator:
    catalog: NavigationCatalog = field(default_factory=NavigationCatalog)
    current: Optional[Category] = None


class CatalogExtractor:
    """
    Rebuilds the category -> site hierarchy of a heading based link page.

    Category headings open a new category, site headings nested below them
    become entries of the most recently opened category. Description and icon
    of a site are looked up in the closest container around its heading.
    """

    def __init__(self, category_tag=None, site_tag=None, container_tag=None,
                 excluded_titles=None, always_admitted_titles=None):
        self.category_tag = category_tag or Config.CATEGORY_TAG
        self.site_tag = site_tag or Config.SITE_TAG
        self.container_tag = container_tag or Config.CONTAINER_TAG
        self.excluded_titles = frozenset(
            Config.EXCLUDED_TITLES if excluded_titles is None else excluded_titles)
        self.always_admitted_titles = frozenset(
            Config.ALWAYS_ADMITTED_TITLES if always_admitted_titles is None else always_admitted_titles)

    @classmethod
    def from_config(cls, config=Config):
        return cls(
            category_tag=config.CATEGORY_TAG,
            site_tag=config.SITE_TAG,
            container_tag=config.CONTAINER_TAG,
            excluded_titles=config.EXCLUDED_TITLES,
            always_admitted_titles=config.ALWAYS_ADMITTED_TITLES
        )

    def is_category_title(self, title: str) -> bool:
        if not title:
            return False
        if title in self.always_admitted_titles:
            return True
        return title not in self.excluded_titles

    def extract(self, tree) -> NavigationCatalog:
        return self.extract_elements(iter_elements(tree))

    def extract_elements(self, elements: Iterable[Tag]) -> NavigationCatalog:
        state = reduce(self._step, elements, _Accumulator())
        categories = [category for category in state.catalog.categories if category.sites]
        logger.info(f"Extracted {len(categories)} categories "
                    f"({len(state.catalog.categories) - len(categories)} empty dropped)")
        return NavigationCatalog(categories=categories)

    def _step(self, state: _Accumulator, element: Tag) -> _Accumulator:
        if element.name == self.category_tag:
            category = self._open_category(element, len(state.catalog.categories))
            if category is not None:
                state.catalog.categories.append(category)
                state.current = category
        elif element.name == self.site_tag and state.current is not None:
            site = self._read_site(element)
            if site is not None and not state.current.has_url(site.url):
                state.current.sites.append(site)
        return state

    def _open_category(self, marker: Tag, position: int) -> Optional[Category]:
        title = element_text(marker)
        if not self.is_category_title(title):
            logger.debug(f"Skipping heading '{title}'")
            return None
        return Category(id=marker.get("id") or f"category-{position + 1}", name=title)

    def _read_site(self, marker: Tag) -> Optional[Site]:
        name = element_text(marker)
        link = resolve_link(marker)
        url = link.get("href") if link is not None else None
        if not url or not url.startswith("http"):
            logger.debug(f"Discarding site '{name}': no absolute link")
            return None

        container = marker.find_parent(self.container_tag)
        description = ""
        icon = ""
        if container is not None:
            description = element_text(container.find("p"))
            image = container.find("img")
            if image is not None:
                icon = image.get("src") or ""
        return Site(name=name, url=url, icon=icon, description=description)


def extract_catalog(tree, extractor: CatalogExtractor = None) -> NavigationCatalog:
    return (extractor or CatalogExtractor()).extract(tree)
