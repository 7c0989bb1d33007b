import pytest


def _record(**overrides):
    record = {
        "id": "cp-001",
        "title": "Songs of a Dead Dreamer",
        "author": "Thomas Ligotti",
        "price": 450.0,
        "availability": "in_print",
        "edition_type": "Lettered",
        "description": "Lettered state bound in goatskin.",
        "url": "https://example.com/books/songs-of-a-dead-dreamer",
        "imageUrl": "https://example.com/img/songs.jpg",
        "publisher": "Centipede Press",
        "reviews": 3,
        "scraped_at": "2024-05-01T12:00:00Z",
        "currency": "USD",
        "limitation": 26,
        "genre_tags": ["weird fiction", "horror"],
        "illustrator": "Harry O. Morris",
        "binding": "goatskin",
        "page_count": 320,
        "publication_year": 2024,
        "raw_text": "Songs of a Dead Dreamer lettered",
    }
    record.update(overrides)
    return record


@pytest.fixture
def book_record():
    """Factory for raw catalogue records with sensible defaults."""
    return _record
