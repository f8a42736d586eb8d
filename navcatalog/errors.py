class CatalogError(Exception):
    """Base class for navigation catalog failures."""


class FetchError(CatalogError):
    """The source page could not be downloaded."""


class ParseError(CatalogError):
    """The downloaded markup could not be turned into a tree."""


class LoadError(CatalogError):
    """The persisted catalog is missing, unreadable or malformed."""
