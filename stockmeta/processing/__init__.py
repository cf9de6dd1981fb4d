"""
Response Processing

Deterministic post-processing of vision model output: parsing, category
classification, keyword curation and title refinement.

Usage:
    >>> from stockmeta.processing import MetadataProcessor
    >>> processor = MetadataProcessor()
    >>> result = processor.process(raw_text, filename="fox.jpg")
    >>> result.keywords_text
"""

from stockmeta.processing.classifier import CategoryClassifier, ClassificationTrace, arbitrate
from stockmeta.processing.curator import KeywordCurator, clean_phrase, split_keywords
from stockmeta.processing.parser import (
    FieldState,
    parse_prompt_response,
    parse_response,
    scan_fields,
)
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.processing.refiner import refine_description, refine_title
from stockmeta.processing.tokenizer import tokenize

__all__ = [
    "CategoryClassifier",
    "ClassificationTrace",
    "FieldState",
    "KeywordCurator",
    "MetadataProcessor",
    "arbitrate",
    "clean_phrase",
    "parse_prompt_response",
    "parse_response",
    "refine_description",
    "refine_title",
    "scan_fields",
    "split_keywords",
    "tokenize",
]
