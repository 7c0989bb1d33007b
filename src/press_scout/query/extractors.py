"""
Dimension extractors.

One pure function per filter dimension. Each takes the raw query string and
returns a canonical value, or None when nothing is recognised. None of them
raise.
"""
import re
from typing import List, Optional

from .types import Availability, EditionCategory
from .vocabulary import (
    AUTHOR_ALIASES,
    AVAILABILITY_PHRASES,
    CURRENCY_SYMBOLS,
    CURRENCY_WORDS,
    EDITION_PHRASES_BY_LENGTH,
    EDITION_SYNONYMS,
    GENRE_VOCABULARY,
    PRICE_TRAILING_QUALIFIERS,
    PRICE_TRIGGERS,
    PUBLISHER_ALIASES,
)


_CAPITALIZED_NAME = r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+"
_BY_AUTHOR_PATTERN = re.compile(rf"\bby\s+({_CAPITALIZED_NAME})")
_AUTHOR_TITLES_PATTERN = re.compile(rf"\b({_CAPITALIZED_NAME})\s+titles?\b")
_NON_NAME_CHARS = re.compile(r"[^a-z\u00c0-\u024f]")

# "1,200" or "1200" or "99.50"
_NUMBER = r"(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)"
# Word triggers must start a word ("thunder 5" is not "under 5")
_TRIGGER = "|".join(rf"\b{t}" if t[0].isalpha() else t for t in PRICE_TRIGGERS)
_CURRENCY_SYMBOL = f"[{re.escape(CURRENCY_SYMBOLS)}]"
_CURRENCY_WORD = f"(?:{'|'.join(CURRENCY_WORDS)})"

# "under $200", "budget of 75 dollars"
_TRIGGER_FIRST_PRICE = re.compile(
    rf"(?:{_TRIGGER})\s*{_CURRENCY_SYMBOL}?\s*{_NUMBER}\s*{_CURRENCY_WORD}?",
    re.IGNORECASE,
)
# "$125 or less", "£80 max"
_QUALIFIER_LAST_PRICE = re.compile(
    rf"{_CURRENCY_SYMBOL}\s*{_NUMBER}\s*{_CURRENCY_WORD}?\s+(?:{'|'.join(PRICE_TRAILING_QUALIFIERS)})",
    re.IGNORECASE,
)


def extract_publisher(query: str) -> Optional[str]:
    """Return the canonical publisher whose alias first appears in the query."""
    q = query.lower()
    for aliases, canonical in PUBLISHER_ALIASES:
        for alias in aliases:
            if alias in q:
                return canonical
    return None


def extract_author(query: str) -> Optional[str]:
    """
    Extract an author name.

    Tried in order, first hit wins:
    1. "by Firstname Lastname" (at least two capitalised words)
    2. "Firstname Lastname titles"
    3. A single word found in the surname alias table ("ligotti" -> "Thomas Ligotti")

    The phrase patterns are case-sensitive; the surname lookup is not.
    """
    by_match = _BY_AUTHOR_PATTERN.search(query)
    if by_match:
        return by_match.group(1)

    titles_match = _AUTHOR_TITLES_PATTERN.search(query)
    if titles_match:
        return titles_match.group(1)

    for word in query.lower().split():
        full_name = AUTHOR_ALIASES.get(_NON_NAME_CHARS.sub("", word))
        if full_name:
            return full_name

    return None


def extract_edition_type(query: str) -> Optional[EditionCategory]:
    """
    Return the edition category of the longest synonym found in the query.

    "lettered edition" is tested before "lettered", so a generic synonym
    never masks a more specific one.
    """
    q = query.lower()
    for phrase in EDITION_PHRASES_BY_LENGTH:
        if phrase in q:
            return EDITION_SYNONYMS[phrase]
    return None


def extract_price(query: str) -> Optional[float]:
    """
    Extract an inclusive price ceiling.

    Two passes:
    1. Trigger first: "under $200", "less than €150", "budget of 75 dollars"
    2. Qualifier last: "$125 or less", "£80 max"

    Vague words such as "cheap" carry no number and yield None. No currency
    conversion is done.
    """
    for pattern in (_TRIGGER_FIRST_PRICE, _QUALIFIER_LAST_PRICE):
        match = pattern.search(query)
        if match:
            return float(match.group(1).replace(",", ""))
    return None


def extract_availability(query: str) -> Optional[Availability]:
    """Return the state of the first (most specific) phrase group that matches."""
    q = query.lower()
    for phrases, state in AVAILABILITY_PHRASES:
        if any(phrase in q for phrase in phrases):
            return state
    return None


def extract_genre_tags(query: str) -> Optional[List[str]]:
    """
    Collect every vocabulary genre mentioned in the query.

    A candidate that contains, or is contained in, an accepted tag is skipped,
    so "cosmic horror" never comes back alongside "horror".
    """
    q = query.lower()
    matched: List[str] = []
    for genre in GENRE_VOCABULARY:
        if genre not in q:
            continue
        if any(genre in accepted or accepted in genre for accepted in matched):
            continue
        matched.append(genre)
    return matched or None
