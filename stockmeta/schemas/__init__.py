"""
Result Schemas

Pydantic models for the records produced by the metadata pipeline.
"""

from stockmeta.schemas.metadata import (
    ImageResult,
    MetadataResult,
    ParsedFields,
    ProcessingMode,
    ProcessingStatus,
    PromptResult,
)

__all__ = [
    "ImageResult",
    "MetadataResult",
    "ParsedFields",
    "ProcessingMode",
    "ProcessingStatus",
    "PromptResult",
]
