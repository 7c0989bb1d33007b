"""
Query resolution: the entry point used by the retrieval layer.

Picks one of two paths per request:
- explicit: the caller passed a budget and/or an edition keyword directly
- inferred: every dimension is extracted from the query text

The paths never blend. A caller who wants to control any dimension directly
uses the explicit path for everything it needs.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from .filter_assembler import assemble_filters
from .types import (
    Availability,
    EditionCategory,
    ExtractedFilters,
    FilterCondition,
    FilterField,
    QueryAnalysis,
)
from .vocabulary import DEFAULT_AVAILABILITY, EDITION_SYNONYMS

logger = logging.getLogger(__name__)


class ResolutionPath(str, Enum):
    EXPLICIT = "explicit"
    INFERRED = "inferred"


@dataclass(frozen=True)
class ResolvedQuery:
    """
    Filters and embedding text decided for one request.

    Attributes:
        conditions: Conjunctive conditions for the search backend
        embedding_text: Text to send to the embedding service
        analysis: What was understood, for display
    """
    conditions: Tuple[FilterCondition, ...]
    embedding_text: str
    analysis: QueryAnalysis

    path: ClassVar[ResolutionPath]


@dataclass(frozen=True)
class ExplicitResolution(ResolvedQuery):
    budget: Optional[float] = None
    keyword: Optional[str] = None

    path: ClassVar[ResolutionPath] = ResolutionPath.EXPLICIT

    @property
    def keyword_resolved(self) -> bool:
        return self.analysis.extracted_filters.edition_type is not None


@dataclass(frozen=True)
class InferredResolution(ResolvedQuery):
    default_availability_applied: bool = False

    path: ClassVar[ResolutionPath] = ResolutionPath.INFERRED


def resolve_edition_keyword(keyword: str) -> Optional[EditionCategory]:
    """Whole-keyword lookup in the edition synonym table (no substring scan)."""
    return EDITION_SYNONYMS.get(keyword.lower().strip())


class QueryResolver:
    """
    Resolves a query plus optional explicit parameters into search filters.

    Stateless; one instance can serve concurrent requests.
    """

    def __init__(self, default_availability: Availability = DEFAULT_AVAILABILITY):
        """
        :param default_availability: Availability enforced when a request does not state one
        """
        self.default_availability = default_availability

    def resolve(
        self,
        query: str,
        budget: Optional[float] = None,
        keyword: Optional[str] = None,
    ) -> ResolvedQuery:
        """
        Resolve a request.

        The explicit path is taken when a budget or a non-blank keyword is
        supplied; otherwise the query text is parsed.

        :param query: Free-text user query
        :param budget: Inclusive price ceiling (applied when positive)
        :param keyword: Edition keyword such as "lettered" or "signed"
        :return: ExplicitResolution or InferredResolution
        """
        if keyword is not None and not keyword.strip():
            keyword = None

        if budget is not None or keyword is not None:
            return self._resolve_explicit(query, budget, keyword)
        return self._resolve_inferred(query)

    def _default_availability_condition(self) -> FilterCondition:
        return FilterCondition.equals(FilterField.AVAILABILITY, self.default_availability.value)

    def _resolve_explicit(
        self,
        query: str,
        budget: Optional[float],
        keyword: Optional[str],
    ) -> ExplicitResolution:
        conditions: List[FilterCondition] = [self._default_availability_condition()]

        max_price = budget if budget is not None and budget > 0 else None
        if max_price is not None:
            conditions.append(FilterCondition.at_most(FilterField.PRICE, max_price))

        edition = None
        embedding_text = query
        if keyword is not None:
            keyword = keyword.strip()
            edition = resolve_edition_keyword(keyword)
            if edition is not None:
                conditions.append(FilterCondition.equals(FilterField.EDITION_TYPE, edition.value))
            else:
                logger.debug(f"Keyword '{keyword}' matched no edition; ranking by similarity only")
            # Raw keyword always reinforces the embedding, resolved or not
            embedding_text = f"{query} {keyword}"

        filters = ExtractedFilters(max_price=max_price, edition_type=edition)
        logger.debug(
            f"Explicit resolution: budget={budget}, keyword={keyword!r}, "
            f"{len(conditions)} conditions"
        )
        return ExplicitResolution(
            conditions=tuple(conditions),
            embedding_text=embedding_text,
            analysis=QueryAnalysis.from_filters(query, filters),
            budget=budget,
            keyword=keyword,
        )

    def _resolve_inferred(self, query: str) -> InferredResolution:
        assembled = assemble_filters(query)
        conditions = list(assembled.conditions)

        default_applied = not assembled.has_availability
        if default_applied:
            conditions.append(self._default_availability_condition())

        extracted = assembled.analysis.extracted_filters
        embedding_parts = [query]
        if extracted.edition_type is not None:
            embedding_parts.append(extracted.edition_type.value)
        if extracted.genre_tags:
            embedding_parts.extend(extracted.genre_tags)

        logger.debug(
            f"Inferred resolution: {extracted.to_dict()} "
            f"(confidence {assembled.analysis.confidence:.2f}, "
            f"default availability {'applied' if default_applied else 'not needed'})"
        )
        return InferredResolution(
            conditions=tuple(conditions),
            embedding_text=" ".join(embedding_parts),
            analysis=assembled.analysis,
            default_availability_applied=default_applied,
        )
