"""
Alias and vocabulary tables for query understanding.

Read-only data built once at import time. Keys and trigger phrases are
lowercase. Ordering is significant wherever a table is a tuple.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from .types import Availability, EditionCategory


# (aliases, canonical publisher). First entry with a matching alias wins,
# so longer aliases sit before shorter ones that could collide.
PUBLISHER_ALIASES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("conversation tree press", "conversation tree"), "Conversation Tree Press"),
    (("subterranean press", "sub press", "subterranean"), "Subterranean Press"),
    (("centipede press", "centipede"), "Centipede Press"),
    (("curious king",), "Curious King"),
    (("suntup press", "suntup"), "Suntup Press"),
    (("midworld press", "midworld"), "Midworld Press"),
    (("zagava",), "Zagava"),
)

# Single surname -> full name, for well-known fine press authors.
AUTHOR_ALIASES: Mapping[str, str] = MappingProxyType({
    "ligotti": "Thomas Ligotti",
    "barron": "Laird Barron",
    "gaiman": "Neil Gaiman",
    "king": "Stephen King",
    "straub": "Peter Straub",
    "watts": "Peter Watts",
    "mieville": "China Miéville",
    "miéville": "China Miéville",
    "vandermeer": "Jeff VanderMeer",
    "lansdale": "Joe R. Lansdale",
    "james": "M.R. James",
    "machen": "Arthur Machen",
    "blackwood": "Algernon Blackwood",
    "lovecraft": "H.P. Lovecraft",
})

# Many phrases -> one category. Scanned longest phrase first, see
# EDITION_PHRASES_BY_LENGTH.
EDITION_SYNONYMS: Mapping[str, EditionCategory] = MappingProxyType({
    # Lettered
    "lettered edition": EditionCategory.LETTERED,
    "lettered copy": EditionCategory.LETTERED,
    "lettered copies": EditionCategory.LETTERED,
    "lettered": EditionCategory.LETTERED,
    "remarqued": EditionCategory.REMARQUED,

    # Artist
    "artist edition": EditionCategory.ARTIST,
    "artist": EditionCategory.ARTIST,

    # Traycase
    "traycase edition": EditionCategory.TRAYCASED,
    "traycased": EditionCategory.TRAYCASED,
    "traycase": EditionCategory.TRAYCASED,

    # Hand-numbered
    "hand-numbered": EditionCategory.HAND_NUMBERED,
    "hand numbered": EditionCategory.HAND_NUMBERED,

    # Limited / numbered
    "limited edition": EditionCategory.LIMITED,
    "limited numbered": EditionCategory.LIMITED,
    "limited run": EditionCategory.LIMITED,
    "numbered": EditionCategory.LIMITED,
    "limited": EditionCategory.LIMITED,

    # Collector / signed
    "collector's edition": EditionCategory.COLLECTOR,
    "hand-signed": EditionCategory.COLLECTOR,
    "signed edition": EditionCategory.COLLECTOR,
    "collector's": EditionCategory.COLLECTOR,
    "collector": EditionCategory.COLLECTOR,
    "signed": EditionCategory.COLLECTOR,

    # Deluxe
    "deluxe edition": EditionCategory.DELUXE,
    "deluxe": EditionCategory.DELUXE,

    # Trade / standard
    "trade edition": EditionCategory.TRADE,
    "trade": EditionCategory.TRADE,
    "standard": EditionCategory.STANDARD,
})

# sorted() is stable, so equal-length phrases keep table order.
EDITION_PHRASES_BY_LENGTH: Tuple[str, ...] = tuple(
    sorted(EDITION_SYNONYMS, key=len, reverse=True)
)

# Multi-word phrases precede their component words.
GENRE_VOCABULARY: Tuple[str, ...] = (
    "cosmic horror",
    "weird fiction",
    "dark fantasy",
    "literary horror",
    "science fiction",
    "lovecraftian",
    "sci-fi",
    "horror",
    "fantasy",
    "occult",
    "gothic",
    "supernatural",
    "thriller",
    "dark fiction",
)

# Most specific state first: "pre-order available" must resolve to preorder.
AVAILABILITY_PHRASES: Tuple[Tuple[Tuple[str, ...], Availability], ...] = (
    (("pre-order", "preorder", "pre order", "coming soon", "on order"), Availability.PREORDER),
    (("sold out", "sold-out", "out of print", "out of stock", "unavailable"), Availability.SOLD_OUT),
    (("in print", "in-print", "available now", "available", "in stock"), Availability.IN_PRINT),
)

# Price phrase configuration. These are the recognised phrasings, not a
# general-purpose price grammar.
PRICE_TRIGGERS: Tuple[str, ...] = (
    r"under",
    r"less\s+than",
    r"below",
    r"cheaper\s+than",
    r"up\s+to",
    r"no\s+more\s+than",
    r"at\s+most",
    r"max(?:imum)?",
    r"budget\s+(?:of|is|:)",
    r"<",
)
CURRENCY_SYMBOLS: str = "£$€"
CURRENCY_WORDS: Tuple[str, ...] = (r"dollars?", r"usd", r"eur", r"gbp", r"pounds?")
PRICE_TRAILING_QUALIFIERS: Tuple[str, ...] = (r"or\s+(?:less|under)", r"max")

# Availability applied when a request does not state one.
DEFAULT_AVAILABILITY = Availability.IN_PRINT
