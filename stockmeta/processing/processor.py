"""
Metadata Processor

Runs the full post-processing pipeline over one raw model response:

    raw text -> parse -> tokenize -> classify -> curate keywords + refine title

Processing is pure and total. Malformed text produces a degraded but
well-formed result instead of an exception, so one bad response can never
abort a batch. The processor holds only read-only tables and can be shared
freely between threads.
"""

import logging
from typing import Optional

from stockmeta.lexicon import DEFAULT_LEXICON, Lexicon
from stockmeta.processing.classifier import CategoryClassifier
from stockmeta.processing.curator import KeywordCurator
from stockmeta.processing.parser import parse_prompt_response, parse_response
from stockmeta.processing.refiner import refine_description, refine_title
from stockmeta.processing.tokenizer import tokenize
from stockmeta.schemas.metadata import MetadataResult, PromptResult
from stockmeta.taxonomy import DEFAULT_TAXONOMY, Taxonomy


logger = logging.getLogger(__name__)


class MetadataProcessor:
    """Converts vision model responses into structured results.

    Example:
        >>> processor = MetadataProcessor()
        >>> result = processor.process("TITLE: Red fox\\nKEYWORDS: fox, wildlife\\nCATEGORY: Animals")
        >>> result.category_name
        'Animals'
    """

    def __init__(
        self,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        lexicon: Lexicon = DEFAULT_LEXICON,
        classifier: Optional[CategoryClassifier] = None,
        curator: Optional[KeywordCurator] = None,
    ):
        self.taxonomy = taxonomy
        self.lexicon = lexicon
        self.classifier = classifier or CategoryClassifier(taxonomy)
        self.curator = curator or KeywordCurator(lexicon)

    def process(self, raw_text: Optional[str], filename: Optional[str] = None) -> MetadataResult:
        """Build marketplace metadata from a metadata-mode response.

        Args:
            raw_text: Text returned by the vision model
            filename: Image the response belongs to (log context only)

        Returns:
            Immutable MetadataResult
        """
        fields = parse_response(raw_text)
        if fields.is_empty():
            logger.warning(f"No labeled fields found in response for {filename or '<unnamed>'}")

        tokens = tokenize(fields.title, fields.keywords, fields.description, fields.category_text)
        code = self.classifier.classify(tokens, fields.category_text)

        keywords = self.curator.curate(fields.keywords, fields.title, fields.description, code)
        name = self.taxonomy.name_for(code) or fields.category_text or "Unknown"

        logger.debug(f"Processed {filename or '<unnamed>'}: category={code}, keywords={len(keywords)}")
        return MetadataResult(
            title=refine_title(fields.title, self.lexicon),
            keywords=keywords,
            category_code=code,
            category_name=name,
            description=refine_description(fields.description),
        )

    def process_prompt(self, raw_text: Optional[str]) -> PromptResult:
        return parse_prompt_response(raw_text)
