"""
Tests for filter assembly: conditions, analysis and confidence.
"""
import pytest
from press_scout.query import (
    FILTER_DIMENSION_COUNT,
    Availability,
    EditionCategory,
    ExtractedFilters,
    FilterCondition,
    FilterField,
    FilterOperator,
    NumericRange,
    QueryAnalysis,
    assemble_filters,
    build_conditions,
)


def find_condition(conditions, field):
    return next((c for c in conditions if c.field == field), None)


class TestAssembleFiltersScenarios:
    """End-to-end scenarios for assemble_filters."""

    def test_lettered_edition_under_price(self):
        result = assemble_filters("lettered edition under $200")

        assert result.conditions == (
            FilterCondition.equals(FilterField.EDITION_TYPE, "Lettered"),
            FilterCondition.at_most(FilterField.PRICE, 200.0),
        )
        filters = result.analysis.extracted_filters
        assert filters.edition_type == EditionCategory.LETTERED
        assert filters.max_price == 200
        assert result.analysis.confidence == pytest.approx(2 / 6)

    def test_author_by_pattern(self):
        result = assemble_filters("anything by Laird Barron")

        assert len(result.conditions) == 1
        author = result.conditions[0]
        assert author.field == FilterField.AUTHOR
        assert author.operator == FilterOperator.TEXT_MATCH
        assert author.operand == "Laird Barron"
        assert result.analysis.confidence == pytest.approx(1 / 6)

    def test_publisher_and_genre(self):
        result = assemble_filters("Centipede Press horror")

        filters = result.analysis.extracted_filters
        assert filters.publisher == "Centipede Press"
        assert filters.genre_tags == ("horror",)
        assert len(result.conditions) == 2
        genre = find_condition(result.conditions, FilterField.GENRE_TAGS)
        assert genre.operator == FilterOperator.ANY_OF
        assert genre.operand == ("horror",)
        assert result.analysis.confidence == pytest.approx(2 / 6)

    def test_nothing_recognised(self):
        result = assemble_filters("rare books")

        assert result.conditions == ()
        assert result.analysis.confidence == 0
        assert result.analysis.extracted_filters.is_empty()
        assert result.analysis.extracted_filters.to_dict() == {}
        assert result.analysis.original_query == "rare books"

    def test_sold_out_limited(self):
        result = assemble_filters("sold out limited editions")

        filters = result.analysis.extracted_filters
        assert filters.availability == Availability.SOLD_OUT
        assert filters.edition_type == EditionCategory.LIMITED
        assert result.analysis.confidence == pytest.approx(2 / 6)

    def test_publisher_signed_in_print(self):
        result = assemble_filters("Subterranean signed copies in print")

        assert find_condition(result.conditions, FilterField.PUBLISHER).operand == "Subterranean Press"
        assert find_condition(result.conditions, FilterField.EDITION_TYPE).operand == "Collector"
        assert find_condition(result.conditions, FilterField.AVAILABILITY).operand == "in_print"

    def test_vague_price_word_adds_no_price(self):
        result = assemble_filters("anything cheap from Zagava")

        assert find_condition(result.conditions, FilterField.PUBLISHER) is not None
        assert find_condition(result.conditions, FilterField.PRICE) is None
        assert result.analysis.extracted_filters.max_price is None

    def test_surname_alias_with_availability(self):
        result = assemble_filters("Ligotti in print")

        assert find_condition(result.conditions, FilterField.AUTHOR).operand == "Thomas Ligotti"
        assert find_condition(result.conditions, FilterField.AVAILABILITY).operand == "in_print"

    def test_cosmic_horror_with_price_in_dollars(self):
        result = assemble_filters("cosmic horror under 150 dollars")

        assert result.analysis.extracted_filters.genre_tags == ("cosmic horror",)
        price = find_condition(result.conditions, FilterField.PRICE)
        assert price.operand == NumericRange(lte=150.0)

    def test_three_dimensions(self):
        result = assemble_filters("Zagava in print lettered")
        assert result.analysis.confidence == pytest.approx(3 / 6)

    def test_all_six_dimensions(self):
        result = assemble_filters(
            "Centipede Press lettered edition by Thomas Ligotti in print under $400 weird fiction"
        )

        assert result.analysis.confidence == 1
        assert [c.field for c in result.conditions] == [
            FilterField.PUBLISHER,
            FilterField.AUTHOR,
            FilterField.EDITION_TYPE,
            FilterField.PRICE,
            FilterField.AVAILABILITY,
            FilterField.GENRE_TAGS,
        ]

    def test_no_default_availability(self):
        """Assembly never injects an availability condition on its own."""
        result = assemble_filters("lettered edition")
        assert find_condition(result.conditions, FilterField.AVAILABILITY) is None
        assert not result.has_availability


class TestAssemblerProperties:
    """Invariants that hold for any input."""

    QUERIES = [
        "",
        "rare books",
        "lettered edition under $200",
        "Centipede Press horror",
        "pre-order traycased edition",
        "less than €300 lettered",
        "gothic and weird fiction by Arthur Machen",
        "!!! ??? ###",
    ]

    @pytest.mark.parametrize("query", QUERIES)
    def test_condition_count_matches_populated_slots(self, query):
        result = assemble_filters(query)
        assert len(result.conditions) == result.analysis.extracted_filters.populated_count

    @pytest.mark.parametrize("query", QUERIES)
    def test_confidence_is_coverage_ratio(self, query):
        analysis = assemble_filters(query).analysis
        expected = analysis.extracted_filters.populated_count / FILTER_DIMENSION_COUNT
        assert analysis.confidence == expected
        assert analysis.confidence in {n / 6 for n in range(7)}

    @pytest.mark.parametrize("query", QUERIES)
    def test_idempotent(self, query):
        assert assemble_filters(query) == assemble_filters(query)

    def test_original_query_kept_verbatim(self):
        query = "  Lettered   EDITION under $200  "
        assert assemble_filters(query).analysis.original_query == query


class TestBuildConditions:
    """Tests for build_conditions on hand-built ExtractedFilters."""

    def test_canonical_order_independent_of_construction_order(self):
        filters = ExtractedFilters(
            genre_tags=("occult",),
            availability=Availability.PREORDER,
            publisher="Zagava",
        )
        fields = [c.field for c in build_conditions(filters)]
        assert fields == [FilterField.PUBLISHER, FilterField.AVAILABILITY, FilterField.GENRE_TAGS]

    def test_empty_filters(self):
        assert build_conditions(ExtractedFilters()) == []


class TestValueTypes:
    """Construction invariants of the value types."""

    def test_range_needs_a_bound(self):
        with pytest.raises(ValueError):
            NumericRange()

    def test_range_is_inclusive(self):
        assert NumericRange(lte=200).contains(200)
        assert not NumericRange(lte=200).contains(200.01)

    def test_any_of_rejects_empty(self):
        with pytest.raises(ValueError):
            FilterCondition.any_of(FilterField.GENRE_TAGS, [])

    def test_equals_rejects_non_string(self):
        with pytest.raises(ValueError):
            FilterCondition(FilterField.PUBLISHER, FilterOperator.EQUALS, ("a",))

    def test_range_rejects_scalar(self):
        with pytest.raises(ValueError):
            FilterCondition(FilterField.PRICE, FilterOperator.RANGE, "200")

    def test_negative_max_price_rejected(self):
        with pytest.raises(ValueError):
            ExtractedFilters(max_price=-1)

    def test_confidence_bounds(self):
        with pytest.raises(ValueError):
            QueryAnalysis("q", ExtractedFilters(), confidence=1.5)

    def test_condition_to_dict(self):
        condition = FilterCondition.at_most(FilterField.PRICE, 150.0)
        assert condition.to_dict() == {
            "field": "price",
            "operator": "range",
            "operand": {"lte": 150.0},
        }

    def test_analysis_to_dict(self):
        analysis = assemble_filters("sold out limited editions").analysis
        assert analysis.to_dict() == {
            "original_query": "sold out limited editions",
            "extracted_filters": {"edition_type": "Limited", "availability": "sold_out"},
            "confidence": 2 / 6,
        }
