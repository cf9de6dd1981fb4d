"""
CSV Export

Writes completed metadata results in the column layout stock
marketplaces import: Filename, Title, Keywords, Category. Every value is
quoted and embedded quotes are doubled. The filename can optionally be
given a different extension, for uploading vector or converted versions
of the analysed previews.
"""

import csv
import io
import logging
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from stockmeta.errors import ExportError
from stockmeta.schemas.metadata import ImageResult


logger = logging.getLogger(__name__)


CSV_HEADERS = ("Filename", "Title", "Keywords", "Category")

ORIGINAL_EXTENSION = "original"
TARGET_EXTENSIONS = (".jpg", ".jpeg", ".png", ".eps", ".ai", ".svg")


def rename_extension(filename: str, target_extension: Optional[str] = None) -> str:
    """Swap the extension of ``filename`` for ``target_extension``.

    ``None`` or "original" keeps the name unchanged. A name without an
    extension gets the target appended.

    Raises:
        ExportError: If the target extension is not supported
    """
    if not target_extension or target_extension == ORIGINAL_EXTENSION:
        return filename

    target = target_extension.lower()
    if not target.startswith("."):
        target = f".{target}"
    if target not in TARGET_EXTENSIONS:
        raise ExportError(
            f"Unsupported target extension '{target_extension}'. "
            f"Valid options: {ORIGINAL_EXTENSION}, {', '.join(TARGET_EXTENSIONS)}"
        )

    dot = filename.rfind(".")
    base = filename[:dot] if dot > 0 else filename
    return f"{base}{target}"


def default_export_filename(target_extension: Optional[str] = None) -> str:
    """Default CSV name, e.g. ``eps_metadata.csv`` or ``original_format_metadata.csv``."""
    if not target_extension or target_extension == ORIGINAL_EXTENSION:
        return "original_format_metadata.csv"
    return f"{target_extension.lower().lstrip('.')}_metadata.csv"


def write_metadata_csv(
    results: Iterable[ImageResult],
    destination: Union[str, Path, IO[str]],
    target_extension: Optional[str] = None,
) -> int:
    """Write successful metadata results as CSV.

    Args:
        results: Batch results; failed and prompt-mode entries are skipped
        destination: File path or an open text stream
        target_extension: Optional replacement extension for the Filename column

    Returns:
        Number of data rows written

    Raises:
        ExportError: If the destination cannot be written or the extension is invalid
    """
    rows = [
        (
            rename_extension(r.filename, target_extension),
            r.metadata.title,
            r.metadata.keywords_text,
            str(r.metadata.category_code),
        )
        for r in results
        if r.succeeded and r.metadata is not None
    ]

    if isinstance(destination, (str, Path)):
        path = Path(destination)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                _write_rows(f, rows)
        except OSError as e:
            raise ExportError(f"Failed to write CSV to {path}: {e}")
        logger.info(f"Exported {len(rows)} row(s) to {path}")
    else:
        _write_rows(destination, rows)

    return len(rows)


def metadata_csv_text(results: Iterable[ImageResult], target_extension: Optional[str] = None) -> str:
    buffer = io.StringIO()
    write_metadata_csv(results, buffer, target_extension)
    return buffer.getvalue()


def _write_rows(stream: IO[str], rows) -> None:
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(rows)
