"""
stockmeta

Turns vision model descriptions of images into stock marketplace metadata:
a sentence-case title, a bounded ranked keyword list, a category code from
the marketplace taxonomy, and a short description.
"""

from stockmeta.processing.processor import MetadataProcessor
from stockmeta.schemas.metadata import ImageResult, MetadataResult, ProcessingMode, PromptResult
from stockmeta.taxonomy import DEFAULT_TAXONOMY, Taxonomy

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_TAXONOMY",
    "ImageResult",
    "MetadataProcessor",
    "MetadataResult",
    "ProcessingMode",
    "PromptResult",
    "Taxonomy",
    "__version__",
]
