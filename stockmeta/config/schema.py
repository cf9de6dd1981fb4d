"""
Configuration Schema

Dataclasses describing the settings a stockmeta run can be tuned with:

- ProcessingConfig: keyword bounds and lexicon extensions
- AppConfig: provider choice, logging and output locations
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from stockmeta.lexicon import DEFAULT_LEXICON, Lexicon
from stockmeta.processing.constants import KEYWORD_MAX, KEYWORD_MIN_STRONG
from stockmeta.processing.curator import KeywordCurator
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.taxonomy import DEFAULT_TAXONOMY
from stockmeta.utils.logging_config import LogLevel


VALID_PROVIDERS = ("auto", "cloud-gemini", "cloud-openai", "cloud-anthropic", "local-ollama")


@dataclass
class ProcessingConfig:
    """Keyword curation settings.

    Attributes:
        keyword_max: Hard upper bound on keywords per image
        keyword_min: Size the backfill step tries to reach
        extra_stopwords: Additional terms never accepted as keywords
        extra_corrections: Additional fragment -> correction entries
    """
    keyword_max: int = KEYWORD_MAX
    keyword_min: int = KEYWORD_MIN_STRONG
    extra_stopwords: List[str] = field(default_factory=list)
    extra_corrections: Dict[str, str] = field(default_factory=dict)

    def build_lexicon(self, base: Lexicon = DEFAULT_LEXICON) -> Lexicon:
        if not self.extra_stopwords and not self.extra_corrections:
            return base
        return base.extended(stopwords=self.extra_stopwords, corrections=self.extra_corrections)

    def build_processor(self) -> MetadataProcessor:
        """Create a processor wired with this configuration's tables and bounds."""
        lexicon = self.build_lexicon()
        curator = KeywordCurator(
            lexicon,
            max_keywords=self.keyword_max,
            min_keywords=self.keyword_min,
        )
        return MetadataProcessor(DEFAULT_TAXONOMY, lexicon, curator=curator)


@dataclass
class AppConfig:
    """Complete stockmeta configuration."""
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    llm_provider: str = "auto"
    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None
    output_dir: str = "."

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.llm_provider not in VALID_PROVIDERS:
            errors.append(
                f"Invalid llm_provider '{self.llm_provider}'. Valid options: {list(VALID_PROVIDERS)}"
            )

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if self.processing.keyword_max <= 0:
            errors.append("processing.keyword_max must be positive")
        if self.processing.keyword_min < 0:
            errors.append("processing.keyword_min must be non-negative")
        if self.processing.keyword_min > self.processing.keyword_max:
            errors.append("processing.keyword_min cannot exceed processing.keyword_max")

        return errors
