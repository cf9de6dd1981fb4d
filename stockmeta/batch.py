"""
Batch Processing

Sends a queue of images to a vision provider one at a time and turns
each response into metadata or a prompt. A failing image is recorded
with a classified, user-facing message and the batch moves on.
"""

import base64
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from stockmeta.errors import ImageInputError
from stockmeta.llm.errors import LLMError
from stockmeta.llm.instructions import instructions_for
from stockmeta.llm.providers.base import BaseVisionProvider, VisionRequest
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.schemas.metadata import ImageResult, ProcessingMode, ProcessingStatus
from stockmeta.utils.error_messages import user_message
from stockmeta.utils.logging_config import get_progress_context


logger = logging.getLogger(__name__)


MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}

PathLike = Union[str, Path]


def detect_mime_type(path: PathLike) -> str:
    """Return the MIME type for an image path, based on its extension.

    Raises:
        ImageInputError: If the extension is not a supported image type
    """
    suffix = Path(path).suffix.lower()
    if suffix not in MIME_TYPES:
        raise ImageInputError(
            f"Unsupported image type '{suffix or '<none>'}'. "
            f"Supported: {', '.join(sorted(MIME_TYPES))}",
            path=str(path),
        )
    return MIME_TYPES[suffix]


def encode_image(path: PathLike) -> str:
    """Read an image file and return its base64 text.

    Raises:
        ImageInputError: If the file cannot be read or is empty
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ImageInputError(f"Cannot read image {path}: {e}", path=str(path))
    if not data:
        raise ImageInputError(f"Image file is empty: {path}", path=str(path))
    return base64.b64encode(data).decode("ascii")


def discover_images(inputs: Iterable[PathLike], recursive: bool = False) -> List[Path]:
    """Expand files and directories into a list of supported images.

    Directories contribute their supported images in name order. An image
    whose filename was already queued is skipped, matching how a second
    upload of the same file is ignored.

    Args:
        inputs: Image files and/or directories
        recursive: Descend into subdirectories

    Returns:
        Unique image paths in discovery order

    Raises:
        ImageInputError: If an input path does not exist
    """
    images: List[Path] = []
    seen_names = set()

    for item in inputs:
        path = Path(item)
        if not path.exists():
            raise ImageInputError(f"Input path does not exist: {path}", path=str(path))

        if path.is_dir():
            pattern = "**/*" if recursive else "*"
            candidates = sorted(p for p in path.glob(pattern) if p.is_file())
        else:
            candidates = [path]

        for candidate in candidates:
            if candidate.suffix.lower() not in MIME_TYPES:
                if candidate == path:
                    logger.warning(f"Skipping unsupported file: {candidate}")
                continue
            if candidate.name in seen_names:
                logger.info(f"Skipping duplicate filename: {candidate.name}")
                continue
            seen_names.add(candidate.name)
            images.append(candidate)

    return images


@dataclass
class BatchReport:
    """Summary of a batch run.

    Attributes:
        results: One ImageResult per queued image, in queue order
        duration: Wall-clock seconds spent on the batch
    """
    results: List[ImageResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def completed(self) -> int:
        return sum(1 for r in self.results if r.status == ProcessingStatus.COMPLETED)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == ProcessingStatus.ERROR)

    def summary(self) -> str:
        return f"{self.completed}/{self.total} images processed successfully in {self.duration:.1f}s"


class BatchProcessor:
    """Runs images through a vision provider and the metadata processor.

    Example:
        >>> batch = BatchProcessor(provider, MetadataProcessor())
        >>> report = batch.process_images(["photos/"], ProcessingMode.METADATA)
        >>> print(report.summary())
    """

    def __init__(
        self,
        provider: BaseVisionProvider,
        processor: Optional[MetadataProcessor] = None,
        model: Optional[str] = None,
        show_progress: bool = False,
    ):
        self.provider = provider
        self.processor = processor or MetadataProcessor()
        self.model = model
        self.show_progress = show_progress

    def process_images(
        self,
        inputs: Iterable[PathLike],
        mode: ProcessingMode = ProcessingMode.METADATA,
        recursive: bool = False,
    ) -> BatchReport:
        """Process every image found under ``inputs`` sequentially.

        Args:
            inputs: Image files and/or directories
            mode: Metadata or prompt generation
            recursive: Descend into subdirectories

        Returns:
            BatchReport with one result per image
        """
        images = discover_images(inputs, recursive=recursive)
        report = BatchReport()
        start = time.time()

        if not images:
            logger.warning("No supported images found")
            return report

        logger.info(f"Processing {len(images)} image(s) in {mode.value} mode")
        if self.show_progress:
            with get_progress_context("Processing images", len(images)) as progress:
                for path in images:
                    report.results.append(self.process_image(path, mode))
                    progress.update(message=path.name)
        else:
            for path in images:
                report.results.append(self.process_image(path, mode))

        report.duration = time.time() - start
        logger.info(report.summary())
        return report

    def process_image(self, path: PathLike, mode: ProcessingMode = ProcessingMode.METADATA) -> ImageResult:
        """Process a single image; failures are captured in the result."""
        path = Path(path)
        try:
            request = VisionRequest(
                image_base64=encode_image(path),
                mime_type=detect_mime_type(path),
                prompt=instructions_for(mode, self.processor.taxonomy),
                model=self.model,
            )
        except (ImageInputError, ValueError) as e:
            logger.error(f"Cannot prepare {path.name}: {e}")
            return ImageResult(filename=path.name, status=ProcessingStatus.ERROR, error=user_message(e))

        return self.process_request(path.name, request, mode)

    def process_request(
        self,
        filename: str,
        request: VisionRequest,
        mode: ProcessingMode = ProcessingMode.METADATA,
    ) -> ImageResult:
        """Send a prepared request and post-process the response."""
        logger.info(f"Processing: {filename}")
        try:
            response = self.provider.describe_image(request)
        except LLMError as e:
            logger.error(f"Vision request failed for {filename}: {e}")
            return ImageResult(filename=filename, status=ProcessingStatus.ERROR, error=user_message(e))

        if mode == ProcessingMode.PROMPT:
            prompt = self.processor.process_prompt(response.content)
            return ImageResult(filename=filename, status=ProcessingStatus.COMPLETED, prompt=prompt)

        metadata = self.processor.process(response.content, filename)
        return ImageResult(filename=filename, status=ProcessingStatus.COMPLETED, metadata=metadata)
