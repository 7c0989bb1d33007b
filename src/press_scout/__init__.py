"""
Fine Press Scout: natural-language search over fine press book listings.
"""
from .app import PressScoutApp
from .config import PressScoutConfig
from .query import QueryResolver, assemble_filters

__all__ = [
    "PressScoutApp",
    "PressScoutConfig",
    "QueryResolver",
    "assemble_filters",
]
