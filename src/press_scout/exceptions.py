class PressScoutError(Exception):
    """Base exception for the press scout service."""


class ConfigurationError(PressScoutError):
    """Raised when configuration is missing or invalid."""


class CatalogueError(PressScoutError):
    """Raised when the book catalogue cannot be read."""


class RetrieverNotInitializedError(PressScoutError):
    """Raised when search is used before initialization."""
