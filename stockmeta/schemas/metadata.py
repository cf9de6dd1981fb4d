"""
Metadata Schemas

Records exchanged between the parsing stages and handed to callers:

- ParsedFields: the four labeled fields extracted from a model response
- MetadataResult: final marketplace metadata for one image
- PromptResult: image-generation prompt for one image
- ImageResult: per-image outcome of a batch run
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class ProcessingMode(str, Enum):
    """What the vision model is asked to produce."""
    METADATA = "metadata"
    PROMPT = "prompt"


class ProcessingStatus(str, Enum):
    """Lifecycle of one image in a batch."""
    WAITING = "waiting"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ParsedFields(BaseModel):
    """Raw field values extracted from a model response.

    Attributes:
        title: Title line (trimmed, at most 200 characters)
        keywords: Raw comma-joined keyword text
        category_text: Category name as reported by the model
        description: Description (trimmed, at most 500 characters)
    """
    title: str = ""
    keywords: str = ""
    category_text: str = ""
    description: str = ""

    def is_empty(self) -> bool:
        return not (self.title or self.keywords or self.category_text or self.description)


class MetadataResult(BaseModel):
    """Marketplace-ready metadata for a single image.

    Keyword order is rank order: model-supplied keywords first, then terms
    lifted from the title and description, then morphological backfill.

    Attributes:
        title: Sentence-case title, at most 200 characters
        keywords: Unique keywords in rank order
        category_code: Taxonomy code (1..21), 0 when nothing matched
        category_name: Taxonomy name, or the model's raw text for code 0
        description: Description, at most 500 characters
    """
    title: str = Field(default="", max_length=200)
    keywords: Tuple[str, ...] = Field(default_factory=tuple)
    category_code: int = Field(default=0, ge=0)
    category_name: str = "Unknown"
    description: str = Field(default="", max_length=500)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Erupting volcano with lava flow at night",
                "keywords": ["volcano", "eruption", "lava", "smoke", "night"],
                "category_code": 11,
                "category_name": "Landscapes",
                "description": "A volcano erupting at night with glowing lava.",
            }
        }

    @property
    def keywords_text(self) -> str:
        """Keywords joined the way marketplaces expect them."""
        return ", ".join(self.keywords)


class PromptResult(BaseModel):
    """Image-generation prompt derived from a model response."""
    prompt: str = ""

    class Config:
        frozen = True


class ImageResult(BaseModel):
    """Outcome of processing one image in a batch.

    Exactly one of ``metadata``, ``prompt`` or ``error`` is populated once
    the image leaves the queue.
    """
    filename: str
    status: ProcessingStatus = ProcessingStatus.WAITING
    metadata: Optional[MetadataResult] = None
    prompt: Optional[PromptResult] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == ProcessingStatus.COMPLETED
