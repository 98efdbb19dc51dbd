"""Tests for free-text facets."""

import pytest

from quickfilter_core.errors import FacetConfigurationError, ProjectionError
from quickfilter_core.facets import FreeText, FreeTextFilter, match_all


def matches(flt, count):
    predicate = flt.make_predicate()
    return [predicate(i) for i in range(count)]


class TestFreeTextIndex:
    def test_index_string_format(self, products):
        flt = FreeText("Search", "title").create_filter(products)
        assert flt.index_string(0) == "red cotton shirt "
        assert flt.index_string(3) == "green cafe apron "
        assert flt.index_string(4) == "blue cotton t shirt "

    def test_index_is_lazy(self, products):
        flt = FreeText("Search", "title").create_filter(products)
        assert not flt.index_built
        assert flt.make_predicate() is match_all
        assert not flt.index_built

        flt.set_query("red")
        flt.make_predicate()
        assert flt.index_built

    def test_list_projection_is_joined(self):
        flt = FreeText("Tags", "tags").create_filter([{"tags": ["Red", "Shirt", "red"]}])
        assert flt.index_string(0) == "red shirt "

    def test_missing_text_indexes_empty(self):
        flt = FreeText("Search", "title").create_filter([{}])
        assert flt.index_string(0) == " "

    def test_projection_errors_surface_when_index_is_built(self):
        flt = FreeText("Year", "year").create_filter([{"year": 2013}])
        flt.set_query("2013")
        with pytest.raises(ProjectionError):
            flt.make_predicate()

    def test_lenient_projection(self):
        flt = FreeText("Year", "year").create_filter([{"year": 2013}], strict=False)
        flt.set_query("2013")
        assert matches(flt, 1) == [True]


class TestFreeTextMatching:
    def test_prefix_matches_token_start(self, products):
        flt = FreeText("Search", "title", initial="sh").create_filter(products)
        assert matches(flt, 5) == [True, False, False, False, True]

    def test_completed_words_match_whole_tokens(self):
        objects = [{"t": "shirt"}, {"t": "shirts"}]
        flt = FreeText("Search", "t", initial="shirt ").create_filter(objects)
        assert matches(flt, 2) == [True, False]

        flt.set_query("shirt")
        assert matches(flt, 2) == [True, True]

    def test_every_token_must_match(self, products):
        flt = FreeText("Search", "title", initial="cotton sh").create_filter(products)
        assert matches(flt, 5) == [True, False, False, False, True]

        flt.set_query("red shirt extra")
        assert matches(flt, 5) == [False] * 5

    def test_prefix_matches_inside_tokens(self, products):
        flt = FreeText("Search", "title", initial="hirt").create_filter(products)
        assert matches(flt, 5) == [True, False, False, False, True]

    def test_completed_word_matches_token_suffix(self):
        objects = [{"t": "tshirt"}, {"t": "shirtless"}]
        flt = FreeText("Search", "t", initial="shirt ").create_filter(objects)
        assert matches(flt, 2) == [True, False]

    def test_word_order_does_not_matter(self, products):
        flt = FreeText("Search", "title", initial="shirt red ").create_filter(products)
        assert matches(flt, 5) == [True, False, False, False, False]

    def test_case_and_accent_insensitive(self, products):
        flt = FreeText("Search", "title", initial="CAFÉ").create_filter(products)
        assert matches(flt, 5) == [False, False, False, True, False]

        flt.set_query("Café")
        assert matches(flt, 5) == [False, False, False, True, False]

    def test_punctuation_splits_tokens(self, products):
        flt = FreeText("Search", "title", initial="t-shirt").create_filter(products)
        assert flt.parsed().tokens == ["t", "shirt"]
        # "t " also occurs at the end of "shirt "
        assert matches(flt, 5) == [True, False, False, False, True]

    def test_blank_query_is_pass_all(self, products):
        flt = FreeText("Search", "title", initial="  ,. ").create_filter(products)
        assert flt.is_pass_all()
        assert flt.make_predicate() is match_all

    def test_refresh_is_a_no_op(self, products):
        flt = FreeText("Search", "title", initial="red").create_filter(products)
        flt.refresh([False] * 5, [flt] * 5)
        assert flt.query == "red"


class TestFreeTextState:
    def test_saved_query_overrides_initial(self, products):
        flt = FreeText("Search", "title", initial="red").create_filter(products, "blue")
        assert flt.query == "blue"

    def test_saved_empty_query_falls_back_to_initial(self, products):
        flt = FreeText("Search", "title", initial="red").create_filter(products, "")
        assert flt.query == "red"

    def test_saved_empty_query_without_initial(self, products):
        flt = FreeText("Search", "title").create_filter(products, "")
        assert flt.query == ""
        assert flt.is_pass_all()

    def test_saved_non_string_is_ignored(self, products):
        facet = FreeText("Search", "title", initial="red")
        for saved in (5, ["blue"], {"q": "blue"}):
            assert facet.create_filter(products, saved).query == "red"

    def test_initial_must_be_string(self):
        with pytest.raises(FacetConfigurationError):
            FreeText("Search", "title", initial=5)

    def test_set_query(self, products):
        flt = FreeText("Search", "title").create_filter(products)
        assert isinstance(flt, FreeTextFilter)
        assert flt.set_query("red") is True
        assert flt.set_query("red") is False
        with pytest.raises(TypeError):
            flt.set_query(None)

    def test_save_state_is_raw_query(self, products):
        flt = FreeText("Search", "title", initial="  Café Sh").create_filter(products)
        assert flt.get_save_state() == "  Café Sh"

    def test_reset(self, products):
        flt = FreeText("Search", "title", initial="red").create_filter(products)
        flt.reset()
        assert flt.query == ""
        assert flt.is_pass_all()
