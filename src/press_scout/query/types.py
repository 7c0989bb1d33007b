"""
Core value types for query understanding.

Everything here is immutable and created fresh per query.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


# publisher, author, edition type, max price, availability, genre tags
FILTER_DIMENSION_COUNT = 6


class EditionCategory(str, Enum):
    """Canonical collecting-trade edition categories."""
    STANDARD = "Standard"
    TRADE = "Trade"
    COLLECTOR = "Collector"
    DELUXE = "Deluxe"
    LETTERED = "Lettered"
    LIMITED = "Limited"
    ARTIST = "Artist"
    TRAYCASED = "Traycased"
    HAND_NUMBERED = "Hand-numbered"
    REMARQUED = "Remarqued"


class Availability(str, Enum):
    """Availability states stored on catalogue records."""
    IN_PRINT = "in_print"
    SOLD_OUT = "sold_out"
    PREORDER = "preorder"


class FilterField(str, Enum):
    """Record fields a filter condition can target."""
    PUBLISHER = "publisher"
    AUTHOR = "author"
    EDITION_TYPE = "edition_type"
    PRICE = "price"
    AVAILABILITY = "availability"
    GENRE_TAGS = "genre_tags"


class FilterOperator(str, Enum):
    """Comparison operators understood by the search backend."""
    EQUALS = "equals"
    TEXT_MATCH = "text_match"
    ANY_OF = "any_of"
    RANGE = "range"


@dataclass(frozen=True)
class NumericRange:
    """Inclusive numeric bounds. At least one bound must be set."""
    lte: Optional[float] = None
    gte: Optional[float] = None

    def __post_init__(self):
        if self.lte is None and self.gte is None:
            raise ValueError("NumericRange needs at least one bound")

    def contains(self, value: float) -> bool:
        if self.lte is not None and value > self.lte:
            return False
        if self.gte is not None and value < self.gte:
            return False
        return True

    def to_dict(self) -> Dict[str, float]:
        result = {}
        if self.gte is not None:
            result["gte"] = self.gte
        if self.lte is not None:
            result["lte"] = self.lte
        return result


Operand = Union[str, Tuple[str, ...], NumericRange]


@dataclass(frozen=True)
class FilterCondition:
    """
    A single constraint on one field of a catalogue record.

    The operand shape is tied to the operator:
    - equals: a scalar string
    - text_match: a text string
    - any_of: a non-empty tuple of strings
    - range: a NumericRange

    Use the classmethod constructors rather than building one by hand.
    """
    field: FilterField
    operator: FilterOperator
    operand: Operand

    def __post_init__(self):
        if self.operator in (FilterOperator.EQUALS, FilterOperator.TEXT_MATCH):
            if not isinstance(self.operand, str):
                raise ValueError(
                    f"{self.operator.value} condition on '{self.field.value}' needs a string operand"
                )
        elif self.operator == FilterOperator.ANY_OF:
            if not isinstance(self.operand, tuple) or not self.operand:
                raise ValueError(
                    f"any_of condition on '{self.field.value}' needs a non-empty tuple operand"
                )
        elif self.operator == FilterOperator.RANGE:
            if not isinstance(self.operand, NumericRange):
                raise ValueError(
                    f"range condition on '{self.field.value}' needs a NumericRange operand"
                )

    @classmethod
    def equals(cls, field: FilterField, value: str) -> "FilterCondition":
        return cls(field=field, operator=FilterOperator.EQUALS, operand=value)

    @classmethod
    def text_match(cls, field: FilterField, text: str) -> "FilterCondition":
        return cls(field=field, operator=FilterOperator.TEXT_MATCH, operand=text)

    @classmethod
    def any_of(cls, field: FilterField, values) -> "FilterCondition":
        return cls(field=field, operator=FilterOperator.ANY_OF, operand=tuple(values))

    @classmethod
    def at_most(cls, field: FilterField, ceiling: float) -> "FilterCondition":
        return cls(field=field, operator=FilterOperator.RANGE, operand=NumericRange(lte=ceiling))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display and logging."""
        if isinstance(self.operand, NumericRange):
            operand = self.operand.to_dict()
        elif isinstance(self.operand, tuple):
            operand = list(self.operand)
        else:
            operand = self.operand
        return {
            "field": self.field.value,
            "operator": self.operator.value,
            "operand": operand,
        }


@dataclass(frozen=True)
class ExtractedFilters:
    """
    What was understood from a query, one optional slot per dimension.

    No slot implies any other.
    """
    publisher: Optional[str] = None
    author: Optional[str] = None
    edition_type: Optional[EditionCategory] = None
    max_price: Optional[float] = None
    availability: Optional[Availability] = None
    genre_tags: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.max_price is not None and self.max_price < 0:
            raise ValueError(f"max_price must be non-negative, got {self.max_price}")
        if self.genre_tags is not None and not self.genre_tags:
            raise ValueError("genre_tags must be None or non-empty")

    @property
    def populated_count(self) -> int:
        slots = (
            self.publisher,
            self.author,
            self.edition_type,
            self.max_price,
            self.availability,
            self.genre_tags,
        )
        return sum(1 for slot in slots if slot is not None)

    def is_empty(self) -> bool:
        return self.populated_count == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting empty slots."""
        result: Dict[str, Any] = {}
        if self.publisher is not None:
            result["publisher"] = self.publisher
        if self.author is not None:
            result["author"] = self.author
        if self.edition_type is not None:
            result["edition_type"] = self.edition_type.value
        if self.max_price is not None:
            result["max_price"] = self.max_price
        if self.availability is not None:
            result["availability"] = self.availability.value
        if self.genre_tags is not None:
            result["genre_tags"] = list(self.genre_tags)
        return result


@dataclass(frozen=True)
class QueryAnalysis:
    """
    Report of how a query was understood, for display and debugging.

    Attributes:
        original_query: The query exactly as received
        extracted_filters: The per-dimension values that were recognised
        confidence: Share of dimensions populated (coverage, not a probability)
    """
    original_query: str
    extracted_filters: ExtractedFilters
    confidence: float

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")

    @classmethod
    def from_filters(cls, query: str, filters: ExtractedFilters) -> "QueryAnalysis":
        return cls(
            original_query=query,
            extracted_filters=filters,
            confidence=filters.populated_count / FILTER_DIMENSION_COUNT,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_query": self.original_query,
            "extracted_filters": self.extracted_filters.to_dict(),
            "confidence": self.confidence,
        }
