"""
Filter assembly.

Runs every extractor over one query and turns the results into ordered
filter conditions plus a QueryAnalysis.
"""
from dataclasses import dataclass
from typing import List, Tuple

from .extractors import (
    extract_author,
    extract_availability,
    extract_edition_type,
    extract_genre_tags,
    extract_price,
    extract_publisher,
)
from .types import ExtractedFilters, FilterCondition, FilterField, QueryAnalysis


@dataclass(frozen=True)
class AssembledFilters:
    """
    Output of assemble_filters().

    Attributes:
        conditions: One condition per recognised dimension, in the order
            publisher, author, edition_type, price, availability, genre_tags
        analysis: The matching QueryAnalysis
    """
    conditions: Tuple[FilterCondition, ...]
    analysis: QueryAnalysis

    @property
    def has_availability(self) -> bool:
        return self.analysis.extracted_filters.availability is not None


def build_conditions(filters: ExtractedFilters) -> List[FilterCondition]:
    """Map populated ExtractedFilters slots onto backend conditions, in canonical order."""
    conditions: List[FilterCondition] = []

    if filters.publisher is not None:
        conditions.append(FilterCondition.equals(FilterField.PUBLISHER, filters.publisher))
    if filters.author is not None:
        # author is text-indexed on the backend
        conditions.append(FilterCondition.text_match(FilterField.AUTHOR, filters.author))
    if filters.edition_type is not None:
        conditions.append(
            FilterCondition.equals(FilterField.EDITION_TYPE, filters.edition_type.value)
        )
    if filters.max_price is not None:
        conditions.append(FilterCondition.at_most(FilterField.PRICE, filters.max_price))
    if filters.availability is not None:
        conditions.append(
            FilterCondition.equals(FilterField.AVAILABILITY, filters.availability.value)
        )
    if filters.genre_tags is not None:
        conditions.append(FilterCondition.any_of(FilterField.GENRE_TAGS, filters.genre_tags))

    return conditions


def extract_filters(query: str) -> ExtractedFilters:
    """Run all six extractors against the query."""
    genre_tags = extract_genre_tags(query)
    return ExtractedFilters(
        publisher=extract_publisher(query),
        author=extract_author(query),
        edition_type=extract_edition_type(query),
        max_price=extract_price(query),
        availability=extract_availability(query),
        genre_tags=tuple(genre_tags) if genre_tags else None,
    )


def assemble_filters(query: str) -> AssembledFilters:
    """
    Parse a free-text query into filter conditions and an analysis report.

    Total for any input string, including "". Does not add a default
    availability condition; QueryResolver owns that decision.

    :param query: Raw user query
    :return: AssembledFilters with conditions and analysis
    """
    filters = extract_filters(query)
    return AssembledFilters(
        conditions=tuple(build_conditions(filters)),
        analysis=QueryAnalysis.from_filters(query, filters),
    )
