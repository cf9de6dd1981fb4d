"""Tests for the vision request/response records and instruction texts."""

import pytest

from stockmeta.llm.instructions import PROMPT_INSTRUCTIONS, build_metadata_instructions, instructions_for
from stockmeta.llm.providers.base import VisionRequest
from stockmeta.schemas.metadata import ProcessingMode
from stockmeta.taxonomy import DEFAULT_TAXONOMY


class TestVisionRequest:
    def test_data_uri(self):
        request = VisionRequest(image_base64="abc=", mime_type="image/gif", prompt="p")
        assert request.data_uri == "data:image/gif;base64,abc="

    @pytest.mark.parametrize("kwargs", [
        {"image_base64": ""},
        {"mime_type": "image/tiff"},
        {"prompt": ""},
        {"max_tokens": 0},
        {"temperature": 3.0},
    ])
    def test_invalid_values(self, kwargs):
        params = {"image_base64": "abc=", "mime_type": "image/png", "prompt": "p"}
        params.update(kwargs)
        with pytest.raises(ValueError):
            VisionRequest(**params)


class TestInstructions:
    def test_metadata_schema_lines(self):
        text = build_metadata_instructions()
        for label in ("TITLE:", "KEYWORDS:", "CATEGORY:", "DESCRIPTION:"):
            assert label in text

    def test_lists_every_category(self):
        text = build_metadata_instructions()
        for entry in DEFAULT_TAXONOMY.entries():
            assert entry.name in text

    def test_mode_selection(self):
        assert instructions_for(ProcessingMode.PROMPT) == PROMPT_INSTRUCTIONS
        assert instructions_for(ProcessingMode.METADATA) == build_metadata_instructions()
        assert "PROMPT:" in PROMPT_INSTRUCTIONS
