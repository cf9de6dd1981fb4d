"""Tests for stockmeta.processing.refiner."""

import pytest

from stockmeta.lexicon import Lexicon
from stockmeta.processing.refiner import (
    refine_description,
    refine_title,
    sentence_case,
    strip_phrases,
)


class TestRefineTitle:
    def test_removes_filler_and_sentence_cases(self):
        assert refine_title("Amazing stock photo of a Mountain!! copy space") == "Amazing of a mountain!!"

    @pytest.mark.parametrize("raw,expected", [
        ("Sunset over the sea 4K", "Sunset over the sea"),
        ("Royalty free HD photo of a lake", "Photo of a lake"),
        ("Desk with placeholder text", "Desk with"),
    ])
    def test_forbidden_phrases(self, raw, expected):
        assert refine_title(raw) == expected

    def test_longest_phrase_removed_first(self):
        # "stock photography" must not leave "graphy" behind
        assert refine_title("Stock photography of a beach") == "Of a beach"

    def test_whole_words_only(self):
        # "4k" inside "4km" stays
        assert refine_title("Trail 4km long") == "Trail 4km long"

    def test_surrounding_quotes_removed(self):
        assert refine_title('"Red fox in snow"') == "Red fox in snow"

    def test_truncated_to_200(self):
        assert len(refine_title("word " * 100)) <= 200

    @pytest.mark.parametrize("raw", [None, "", "   ", "stock photo copy space"])
    def test_empty_results(self, raw):
        assert refine_title(raw) == ""

    def test_amazing_is_not_filler(self):
        assert refine_title("Amazing view").startswith("Amazing")


class TestHelpers:
    def test_sentence_case(self):
        assert sentence_case("red fox") == "Red fox"
        assert sentence_case("") == ""

    def test_strip_phrases_case_insensitive(self):
        assert strip_phrases("A COPY SPACE b", ["copy space"]).split() == ["A", "b"]

    def test_strip_phrases_empty_list(self):
        assert strip_phrases("abc", []) == "abc"

    def test_lexicon_phrases_are_used(self):
        lexicon = Lexicon(title_forbidden_phrases=("fox",))
        assert refine_title("Red fox stock photo", lexicon) == "Red stock photo"


class TestRefineDescription:
    def test_trim_and_cut(self):
        assert refine_description("  A fox.  ") == "A fox."
        assert len(refine_description("d" * 600)) == 500

    def test_none(self):
        assert refine_description(None) == ""
