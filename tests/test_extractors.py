"""
Tests for the per-dimension extractors.
"""
import pytest
from press_scout.query import (
    Availability,
    EditionCategory,
    extract_author,
    extract_availability,
    extract_edition_type,
    extract_genre_tags,
    extract_price,
    extract_publisher,
)


class TestExtractPublisher:
    """Tests for extract_publisher."""

    def test_short_alias_maps_to_canonical(self):
        assert extract_publisher("centipede books") == "Centipede Press"

    def test_abbreviation(self):
        assert extract_publisher("sub press titles") == "Subterranean Press"

    def test_case_insensitive(self):
        assert extract_publisher("Conversation Tree Press") == "Conversation Tree Press"

    def test_partial_name(self):
        assert extract_publisher("Subterranean signed copies") == "Subterranean Press"

    def test_first_table_entry_wins(self):
        """Table order is priority when two publishers are mentioned."""
        assert extract_publisher("zagava or centipede") == "Centipede Press"

    def test_unknown_publisher(self):
        assert extract_publisher("horror books") is None


class TestExtractAuthor:
    """Tests for extract_author."""

    def test_by_pattern(self):
        assert extract_author("anything by Neil Gaiman") == "Neil Gaiman"

    def test_titles_pattern(self):
        assert extract_author("Peter Straub titles") == "Peter Straub"

    def test_singular_title_pattern(self):
        assert extract_author("any Laird Barron title") == "Laird Barron"

    def test_surname_alias(self):
        assert extract_author("barron signed") == "Laird Barron"

    def test_surname_alias_strips_punctuation(self):
        assert extract_author("anything from Ligotti?") == "Thomas Ligotti"

    def test_accented_surname(self):
        assert extract_author("miéville lettered") == "China Miéville"

    def test_by_pattern_needs_two_capitalized_words(self):
        """A lowercase name does not satisfy the phrase pattern."""
        assert extract_author("written by someone") is None

    def test_by_pattern_wins_over_alias(self):
        """The phrase pattern is tried before the surname table."""
        assert extract_author("Ligotti fans want books by Jeff Vandermeer") == "Jeff Vandermeer"

    def test_no_author(self):
        assert extract_author("cosmic horror books") is None


class TestExtractEditionType:
    """Tests for extract_edition_type."""

    def test_longer_phrase_takes_precedence(self):
        assert extract_edition_type("lettered edition of the book") == EditionCategory.LETTERED

    def test_limited_run(self):
        assert extract_edition_type("limited run copies") == EditionCategory.LIMITED

    def test_hand_numbered(self):
        assert extract_edition_type("hand-numbered copy") == EditionCategory.HAND_NUMBERED

    def test_signed_maps_to_collector(self):
        assert extract_edition_type("signed copies") == EditionCategory.COLLECTOR

    def test_hand_signed_beats_signed(self):
        assert extract_edition_type("a hand-signed book") == EditionCategory.COLLECTOR

    def test_traycased(self):
        assert extract_edition_type("pre-order traycased edition") == EditionCategory.TRAYCASED

    def test_longest_phrase_wins_across_categories(self):
        """'limited edition' (15 chars) outranks 'signed' even though both match."""
        assert extract_edition_type("signed limited edition") == EditionCategory.LIMITED

    def test_unrelated_text(self):
        assert extract_edition_type("classic novel") is None


class TestExtractPrice:
    """Tests for extract_price."""

    @pytest.mark.parametrize("query, expected", [
        ("under $200", 200),
        ("less than €150", 150),
        ("below 300 dollars", 300),
        ("under £500", 500),
        ("I have a budget of $75", 75),
        ("my budget is $100", 100),
        ("up to $150", 150),
        ("no more than $200", 200),
        ("max $250", 250),
        ("maximum $300", 300),
        ("at most $50", 50),
        ("cheaper than 99.50", 99.5),
        ("$125 or less", 125),
        ("$80 or under", 80),
        ("£60 max", 60),
    ])
    def test_recognised_phrasings(self, query, expected):
        assert extract_price(query) == expected

    def test_trigger_first_pass_wins(self):
        """The trigger-first shape is tried before the trailing-qualifier shape."""
        assert extract_price("$90 or less, definitely under $120") == 120

    def test_vague_word_yields_nothing(self):
        assert extract_price("cheap books") is None

    def test_bare_number_yields_nothing(self):
        assert extract_price("top 10 horror books") is None

    def test_returns_float(self):
        assert isinstance(extract_price("under 40"), float)

    @pytest.mark.parametrize("query, expected", [
        ("lettered under $1,200", 1200),
        ("no more than £2,500.50", 2500.5),
        ("$1,750 or less", 1750),
        ("under 1200", 1200),
    ])
    def test_thousands_separators(self, query, expected):
        assert extract_price(query) == expected

    @pytest.mark.parametrize("query", ["thunder 5", "Blunder 40 of the deep", "somaximum 90"])
    def test_trigger_inside_word_ignored(self, query):
        assert extract_price(query) is None

    def test_trigger_touching_amount(self):
        assert extract_price("max$60") == 60
        assert extract_price("<$60") == 60


class TestExtractAvailability:
    """Tests for extract_availability."""

    def test_in_print(self):
        assert extract_availability("in print copies") == Availability.IN_PRINT

    def test_sold_out(self):
        assert extract_availability("sold out editions") == Availability.SOLD_OUT

    def test_preorder_beats_generic_available(self):
        assert extract_availability("pre-order available") == Availability.PREORDER

    def test_available_now(self):
        assert extract_availability("available now") == Availability.IN_PRINT

    def test_unavailable_is_sold_out(self):
        """'unavailable' contains 'available' but the sold-out group is tested first."""
        assert extract_availability("unavailable titles") == Availability.SOLD_OUT

    def test_unrelated_text(self):
        assert extract_availability("horror books") is None


class TestExtractGenreTags:
    """Tests for extract_genre_tags."""

    def test_multi_word_suppresses_component(self):
        assert extract_genre_tags("cosmic horror fiction") == ["cosmic horror"]

    def test_multiple_distinct_genres(self):
        tags = extract_genre_tags("gothic and weird fiction")
        assert "gothic" in tags
        assert "weird fiction" in tags

    def test_case_insensitive(self):
        assert "lovecraftian" in extract_genre_tags("Lovecraftian tales")

    def test_no_tag_is_substring_of_another(self):
        tags = extract_genre_tags("cosmic horror, literary horror and dark fantasy horror")
        for a in tags:
            for b in tags:
                if a != b:
                    assert a not in b

    def test_no_genres(self):
        assert extract_genre_tags("signed limited edition") is None


@pytest.mark.parametrize("extractor", [
    extract_publisher,
    extract_author,
    extract_edition_type,
    extract_price,
    extract_availability,
    extract_genre_tags,
])
@pytest.mark.parametrize("query", ["", "   ", "?!*", "1234567890"])
def test_extractors_are_total(extractor, query):
    """Nonsense input gives no value, never an error."""
    assert extractor(query) is None
