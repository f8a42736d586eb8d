# models.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Site:
    name: str
    url: str
    icon: str = ""
    description: str = ""

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "url": self.url,
            "icon": self.icon,
            "description": self.description
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Site":
        return cls(
            name=data["name"],
            url=data["url"],
            icon=data["icon"],
            description=data["description"]
        )


@dataclass
class Category:
    id: str
    name: str
    sites: List[Site] = field(default_factory=list)

    def has_url(self, url: str) -> bool:
        return any(site.url == url for site in self.sites)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "sites": [site.to_dict() for site in self.sites]
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Category":
        return cls(
            id=data["id"],
            name=data["name"],
            sites=[Site.from_dict(site) for site in data["sites"]]
        )


@dataclass
class NavigationCatalog:
    categories: List[Category] = field(default_factory=list)

    def category_at(self, index: int) -> Optional[Category]:
        if 0 <= index < len(self.categories):
            return self.categories[index]
        return None

    def site_count(self) -> int:
        return sum(len(category.sites) for category in self.categories)

    def to_dict(self) -> Dict:
        return {"categories": [category.to_dict() for category in self.categories]}

    @classmethod
    def from_dict(cls, data: Dict) -> "NavigationCatalog":
        return cls(categories=[Category.from_dict(category) for category in data["categories"]])
