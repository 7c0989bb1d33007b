"""
Record normalisation at the catalogue boundary.

normalize_book_document() parses and raises on invalid input.
validate_book_document() is a soft quality check that only logs.
"""
import logging
from typing import Any

from .models import BookDocument

logger = logging.getLogger(__name__)

OPTIONAL_ENRICHMENT_FIELDS = (
    "currency",
    "limitation",
    "genre_tags",
    "illustrator",
    "binding",
    "page_count",
    "publication_year",
    "raw_text",
    "description",
)

MAX_MISSING_ENRICHMENT = 3


def normalize_book_document(raw: Any) -> BookDocument:
    """
    Parse raw input into a BookDocument.

    :param raw: Mapping (e.g. one decoded JSON record)
    :return: Validated BookDocument
    :raises pydantic.ValidationError: If the record does not conform
    """
    return BookDocument.model_validate(raw)


def count_missing_enrichment(doc: BookDocument) -> int:
    missing = 0
    for field_name in OPTIONAL_ENRICHMENT_FIELDS:
        value = getattr(doc, field_name)
        if value is None or value == "":
            missing += 1
    return missing


def validate_book_document(doc: BookDocument) -> bool:
    """
    Warn when a record is missing too many enrichment fields.

    :return: True if the record is rich enough, False if a warning was logged
    """
    missing = count_missing_enrichment(doc)
    if missing > MAX_MISSING_ENRICHMENT:
        logger.warning(
            f"'{doc.title}' ({doc.publisher}) is missing {missing}/"
            f"{len(OPTIONAL_ENRICHMENT_FIELDS)} enrichment fields"
        )
        return False
    return True
