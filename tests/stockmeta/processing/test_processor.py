"""
Tests for stockmeta.processing.processor

End-to-end runs of the metadata pipeline over realistic responses.
"""

import logging

import pytest

from stockmeta.lexicon import DEFAULT_LEXICON
from stockmeta.processing.curator import KeywordCurator
from stockmeta.processing.parser import parse_response
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.processing.tokenizer import tokenize
from stockmeta.schemas.metadata import MetadataResult


@pytest.fixture
def processor():
    return MetadataProcessor()


class TestProcess:
    def test_full_response(self, processor, sample_response):
        result = processor.process(sample_response, "volcano.jpg")

        assert isinstance(result, MetadataResult)
        assert result.title == "Erupting volcano with lava flow at night"
        assert result.keywords[:6] == ("volcano", "eruption", "smoke", "lava", "volcanic", "night")
        assert result.category_code == 11
        assert result.category_name == "Landscapes"
        assert result.description.startswith("A volcano erupting at night")

    def test_keyword_bounds(self, processor, sample_response):
        result = processor.process(sample_response)
        assert 25 <= len(result.keywords) <= 49
        assert len(set(result.keywords)) == len(result.keywords)

    def test_people_bias_and_linked_terms(self, processor):
        raw = (
            "TITLE: Smiling woman holding a cup of coffee\n"
            "KEYWORDS: woman, coffee, cafe, morning\n"
            "CATEGORY: Drinks\n"
            "DESCRIPTION: A young woman enjoys coffee in a cafe.\n"
        )
        result = processor.process(raw)
        assert result.category_code == 13
        assert result.category_name == "People"
        assert "people" in result.keywords
        assert result.keywords[0] == "woman"

    def test_unmapped_category_resolved_by_rules(self, processor):
        raw = "TITLE: Snowy mountain valley\nKEYWORDS: mountain, valley, snow\nCATEGORY: Scenery"
        result = processor.process(raw)
        assert result.category_code == 11
        assert result.category_name == "Landscapes"

    def test_resolved_category_overridden_by_landscape_content(self, processor):
        raw = (
            "TITLE: Mountain valley at sunrise\n"
            "KEYWORDS: mountain, valley, canyon, waterfall\n"
            "CATEGORY: Nature\n"
            "DESCRIPTION: Morning light over a mountain valley.\n"
        )
        fields = parse_response(raw)
        tokens = tokenize(fields.title, fields.keywords, fields.description, fields.category_text)
        trace = processor.classifier.explain(tokens, fields.category_text)
        assert (trace.ai_code, trace.ai_score) == (5, 4)
        assert (trace.rule_code, trace.rule_score) == (11, 16)

        result = processor.process(raw)
        assert result.category_code == 11
        assert result.category_name == "Landscapes"


    def test_no_signal_keeps_raw_category_name(self, processor):
        result = processor.process("TITLE: Abstract swirl\nCATEGORY: Scenery")
        assert result.category_code == 0
        assert result.category_name == "Scenery"

    def test_title_refined(self, processor):
        result = processor.process("TITLE: Amazing stock photo of a Mountain!! copy space")
        assert result.title == "Amazing of a mountain!!"

    def test_keywords_text(self, processor):
        result = processor.process("KEYWORDS: fox, snow")
        assert result.keywords_text.startswith("fox, snow")

    @pytest.mark.parametrize("raw", [None, "", "I cannot help with that request."])
    def test_garbage_degrades_gracefully(self, processor, raw, caplog):
        with caplog.at_level(logging.WARNING, logger="stockmeta.processing.processor"):
            result = processor.process(raw, "broken.jpg")
        assert result.title == ""
        assert result.keywords == ()
        assert result.category_code == 0
        assert result.category_name == "Unknown"
        assert "broken.jpg" in caplog.text

    def test_result_is_immutable(self, processor):
        result = processor.process("TITLE: Red fox")
        with pytest.raises(Exception):
            result.title = "changed"


class TestConfiguredProcessor:
    def test_custom_curator(self):
        lexicon = DEFAULT_LEXICON.extended(stopwords=["snow"])
        processor = MetadataProcessor(
            lexicon=lexicon,
            curator=KeywordCurator(lexicon, max_keywords=2, min_keywords=0),
        )
        result = processor.process("KEYWORDS: fox, snow, winter, forest")
        assert result.keywords == ("fox", "winter")


def test_process_prompt():
    result = MetadataProcessor().process_prompt("PROMPT: A red fox in snow, soft light")
    assert result.prompt == "A red fox in snow, soft light"
