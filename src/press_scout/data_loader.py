import json
import logging
from typing import List

from pydantic import ValidationError

from .exceptions import CatalogueError
from .models import BookDocument
from .normalizer import normalize_book_document, validate_book_document

logger = logging.getLogger(__name__)


class BookDataLoader:
    """
    Loads normalised book records from a JSON catalogue file.

    The file holds a JSON array of records. Records that fail validation are
    skipped and logged.
    """
    def __init__(self, json_path: str):
        self.json_path = json_path

    def load_books(self) -> List[BookDocument]:
        try:
            with open(self.json_path, encoding="utf-8") as f:
                raw_records = json.load(f)
        except FileNotFoundError:
            raise CatalogueError(f"Catalogue not found at {self.json_path}")
        except json.JSONDecodeError as e:
            raise CatalogueError(f"Catalogue at {self.json_path} is not valid JSON: {e}")

        if not isinstance(raw_records, list):
            raise CatalogueError(
                f"Catalogue at {self.json_path} must contain a JSON array of records"
            )

        books: List[BookDocument] = []
        for index, raw in enumerate(raw_records):
            book = self._parse_record(index, raw)
            if book:
                validate_book_document(book)
                books.append(book)

        logger.info(f"Loaded {len(books)}/{len(raw_records)} books from {self.json_path}")
        return books

    def _parse_record(self, index: int, raw) -> BookDocument | None:
        try:
            return normalize_book_document(raw)
        except ValidationError as e:
            logger.warning(
                f"Skipping catalogue record {index}: {e.error_count()} validation error(s)"
            )
            return None
