"""
Tests for stockmeta.batch

Uses a scripted in-memory vision provider; no network access.
"""

import base64
from unittest.mock import Mock

import pytest

from stockmeta.batch import (
    BatchProcessor,
    BatchReport,
    detect_mime_type,
    discover_images,
    encode_image,
)
from stockmeta.errors import ImageInputError
from stockmeta.llm.errors import RateLimitError
from stockmeta.llm.providers.base import BaseVisionProvider
from stockmeta.schemas.metadata import ImageResult, ProcessingMode, ProcessingStatus
from stockmeta.utils.error_messages import MESSAGE_TEMPLATES, ErrorCategory


@pytest.fixture
def image_dir(tmp_path):
    folder = tmp_path / "images"
    folder.mkdir()
    (folder / "b.png").write_bytes(b"\x89PNG fake")
    (folder / "a.jpg").write_bytes(b"\xff\xd8 fake")
    (folder / "notes.txt").write_text("not an image")
    return folder


class TestImageHelpers:
    @pytest.mark.parametrize("name,mime", [
        ("photo.JPG", "image/jpeg"),
        ("photo.jpeg", "image/jpeg"),
        ("icon.png", "image/png"),
        ("anim.gif", "image/gif"),
        ("pic.webp", "image/webp"),
    ])
    def test_detect_mime_type(self, name, mime):
        assert detect_mime_type(name) == mime

    def test_unsupported_mime_type(self):
        with pytest.raises(ImageInputError, match="Unsupported image type"):
            detect_mime_type("drawing.tiff")

    def test_encode_image(self, tmp_path):
        path = tmp_path / "x.png"
        path.write_bytes(b"abc")
        assert base64.b64decode(encode_image(path)) == b"abc"

    def test_encode_empty_image(self, tmp_path):
        path = tmp_path / "empty.png"
        path.write_bytes(b"")
        with pytest.raises(ImageInputError, match="empty"):
            encode_image(path)


class TestDiscoverImages:
    def test_directory_sorted_and_filtered(self, image_dir):
        assert [p.name for p in discover_images([image_dir])] == ["a.jpg", "b.png"]

    def test_duplicate_filenames_skipped(self, image_dir, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "a.jpg").write_bytes(b"different bytes")

        images = discover_images([image_dir, other / "a.jpg"])

        assert [p.name for p in images] == ["a.jpg", "b.png"]
        assert images[0].parent == image_dir

    def test_recursive(self, image_dir):
        nested = image_dir / "nested"
        nested.mkdir()
        (nested / "c.webp").write_bytes(b"webp")

        assert len(discover_images([image_dir])) == 2
        assert [p.name for p in discover_images([image_dir], recursive=True)] == ["a.jpg", "b.png", "c.webp"]

    def test_missing_path(self, tmp_path):
        with pytest.raises(ImageInputError, match="does not exist"):
            discover_images([tmp_path / "missing"])


class TestBatchProcessor:
    def test_metadata_mode(self, image_dir, sample_response, scripted_provider):
        provider = scripted_provider(sample_response, sample_response)
        report = BatchProcessor(provider, model="vision-x").process_images([image_dir])

        assert report.total == 2
        assert report.completed == 2
        assert report.results[0].metadata.category_name == "Landscapes"
        assert provider.requests[0].mime_type == "image/jpeg"
        assert provider.requests[1].mime_type == "image/png"
        assert provider.requests[0].model == "vision-x"
        assert "CATEGORY" in provider.requests[0].prompt

    def test_failure_does_not_stop_batch(self, image_dir, sample_response, scripted_provider):
        provider = scripted_provider(RateLimitError("429 Too Many Requests"), sample_response)
        report = BatchProcessor(provider).process_images([image_dir])

        first, second = report.results
        assert first.status == ProcessingStatus.ERROR
        assert first.error == MESSAGE_TEMPLATES[ErrorCategory.QUOTA_EXCEEDED]
        assert second.succeeded
        assert report.failed == 1
        assert report.summary().startswith("1/2 images processed successfully")

    def test_prompt_mode(self, image_dir, scripted_provider):
        provider = scripted_provider("PROMPT: A lone fox in snow", "A city at dusk")
        report = BatchProcessor(provider).process_images([image_dir], ProcessingMode.PROMPT)

        assert [r.prompt.prompt for r in report.results] == ["A lone fox in snow", "A city at dusk"]
        assert all(r.metadata is None for r in report.results)
        assert "PROMPT" in provider.requests[0].prompt

    def test_unreadable_image_recorded(self, tmp_path):
        path = tmp_path / "empty.jpg"
        path.write_bytes(b"")
        provider = Mock(spec=BaseVisionProvider)

        result = BatchProcessor(provider).process_image(path)

        assert result.status == ProcessingStatus.ERROR
        assert result.filename == "empty.jpg"
        provider.describe_image.assert_not_called()

    def test_no_images(self, tmp_path, scripted_provider):
        report = BatchProcessor(scripted_provider()).process_images([tmp_path])
        assert report.total == 0

    def test_progress_output(self, image_dir, sample_response, scripted_provider, capsys):
        provider = scripted_provider(sample_response, sample_response)
        BatchProcessor(provider, show_progress=True).process_images([image_dir])
        assert "Processing images completed" in capsys.readouterr().err


def test_report_counts():
    report = BatchReport(results=[
        ImageResult(filename="a.jpg", status=ProcessingStatus.COMPLETED),
        ImageResult(filename="b.jpg", status=ProcessingStatus.ERROR, error="x"),
        ImageResult(filename="c.jpg"),
    ], duration=2.0)

    assert (report.total, report.completed, report.failed) == (3, 1, 1)
    assert report.summary() == "1/3 images processed successfully in 2.0s"
