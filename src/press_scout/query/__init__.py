"""
Query understanding and filter resolution.

Turns free-text collector queries into structured filter conditions for the
similarity-search backend and decides what text drives the embedding.

Key components:
- vocabulary: immutable alias and synonym tables
- extractors: one pure function per filter dimension
- assemble_filters: conditions plus a QueryAnalysis for one query
- QueryResolver: explicit-parameters path vs. inferred path
"""
from .types import (
    FILTER_DIMENSION_COUNT,
    Availability,
    EditionCategory,
    ExtractedFilters,
    FilterCondition,
    FilterField,
    FilterOperator,
    NumericRange,
    QueryAnalysis,
)
from .extractors import (
    extract_author,
    extract_availability,
    extract_edition_type,
    extract_genre_tags,
    extract_price,
    extract_publisher,
)
from .filter_assembler import AssembledFilters, assemble_filters, build_conditions, extract_filters
from .query_resolver import (
    ExplicitResolution,
    InferredResolution,
    QueryResolver,
    ResolutionPath,
    ResolvedQuery,
    resolve_edition_keyword,
)

__all__ = [
    "FILTER_DIMENSION_COUNT",
    "Availability",
    "EditionCategory",
    "ExtractedFilters",
    "FilterCondition",
    "FilterField",
    "FilterOperator",
    "NumericRange",
    "QueryAnalysis",
    "extract_author",
    "extract_availability",
    "extract_edition_type",
    "extract_genre_tags",
    "extract_price",
    "extract_publisher",
    "AssembledFilters",
    "assemble_filters",
    "build_conditions",
    "extract_filters",
    "ExplicitResolution",
    "InferredResolution",
    "QueryResolver",
    "ResolutionPath",
    "ResolvedQuery",
    "resolve_edition_keyword",
]
