"""
Keyword Curator

Turns the noisy keyword list a vision model produces into a ranked,
bounded, marketplace-compliant keyword set.

Ranking tiers, in output order:

- strong: the model's own keywords, in the order it gave them
- medium: words from the title and description, then a few terms linked
  to the final category
- backfill: singular/plural partners of existing keywords, only while the
  list is below the minimum

Every candidate, whatever its tier, passes the same gate: cleaned,
lowercased, spell-corrected (exact matches only), and rejected when it is
too short, a stopword, a duplicate, contains a banned phrase or has more
than three words. Because the gate is shared, feeding curated output back
in as raw keywords never drops or reorders an entry.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from stockmeta.lexicon import DEFAULT_LEXICON, Lexicon
from stockmeta.processing.constants import (
    KEYWORD_MAX,
    KEYWORD_MAX_WORDS,
    KEYWORD_MIN_CHARS,
    KEYWORD_MIN_STRONG,
)
from stockmeta.taxonomy import CATEGORY_LINKED_TERMS


logger = logging.getLogger(__name__)


_KEYWORD_SPLIT = re.compile(r"[,;\n]+")
_LIST_MARKER = re.compile(r"^\d+[.)]\s+")
_EDGE_PUNCTUATION = re.compile(r"^[\s\"'`.,;:!?|*#()\[\]{}-]+|[\s\"'`.,;:!?|*#()\[\]{}-]+$")
_WHITESPACE = re.compile(r"\s+")
_TEXT_WORD_SPLIT = re.compile(r"[^a-z0-9+]+")


def split_keywords(raw_keywords: Optional[str]) -> List[str]:
    """Split raw keyword text on commas, semicolons and newlines."""
    return [part for part in _KEYWORD_SPLIT.split(raw_keywords or "") if part.strip()]


def clean_phrase(phrase: str) -> str:
    """Lowercase, collapse whitespace and strip list markers and edge punctuation."""
    cleaned = _WHITESPACE.sub(" ", (phrase or "").lower()).strip()
    previous = None
    # Repeat until stable: stripping punctuation can expose another marker
    while cleaned != previous:
        previous = cleaned
        cleaned = _EDGE_PUNCTUATION.sub("", _LIST_MARKER.sub("", cleaned))
    return cleaned


class KeywordCurator:
    """Cleans, ranks, bounds and backfills keyword lists.

    Attributes:
        lexicon: Stopwords, corrections and plural tables
        category_terms: Medium-tier terms injected per category code
        max_keywords: Hard upper bound on the output size
        min_keywords: Size the backfill step tries to reach
        max_words: Longest accepted phrase, in words
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        category_terms: Optional[Dict[int, Tuple[str, ...]]] = None,
        max_keywords: int = KEYWORD_MAX,
        min_keywords: int = KEYWORD_MIN_STRONG,
        max_words: int = KEYWORD_MAX_WORDS,
    ):
        if min_keywords > max_keywords:
            raise ValueError(
                f"min_keywords ({min_keywords}) cannot exceed max_keywords ({max_keywords})"
            )
        self.lexicon = lexicon
        self.category_terms = CATEGORY_LINKED_TERMS if category_terms is None else category_terms
        self.max_keywords = max_keywords
        self.min_keywords = min_keywords
        self.max_words = max_words

    def normalize(self, candidate: str) -> str:
        return self.lexicon.correct(clean_phrase(candidate))

    def is_acceptable(self, phrase: str, seen: Set[str]) -> bool:
        """Check a normalized phrase against every keyword rule."""
        if not phrase or phrase in seen:
            return False
        if len(phrase) < KEYWORD_MIN_CHARS and phrase not in self.lexicon.short_keyword_whitelist:
            return False
        if phrase in self.lexicon.stopwords:
            return False
        if any(banned in phrase for banned in self.lexicon.banned_phrases):
            return False
        return len(phrase.split(" ")) <= self.max_words

    def morphological_partner(self, phrase: str) -> Optional[str]:
        """Return the singular or plural counterpart of a phrase.

        Only the last word changes. Irregular forms come from the lexicon;
        everything else gets a trailing "s" added or removed, without
        checking that the result is a real word.
        """
        words = phrase.split(" ")
        last = words[-1]
        if last in self.lexicon.irregular_plurals:
            partner = self.lexicon.irregular_plurals[last]
        elif last in self.lexicon.irregular_singulars:
            partner = self.lexicon.irregular_singulars[last]
        elif last.endswith("s"):
            partner = last[:-1]
        else:
            partner = last + "s"

        if not partner or partner == last:
            return None
        return " ".join(words[:-1] + [partner])

    def medium_candidates(self, title: str, description: str, category_code: int) -> List[str]:
        """Words lifted from the title/description plus category-linked terms."""
        text = f"{title or ''} {description or ''}".lower()
        words = [w for w in _TEXT_WORD_SPLIT.split(text) if len(w) > 2]
        return words + list(self.category_terms.get(category_code, ()))

    def curate(
        self,
        raw_keywords: Optional[str],
        title: str = "",
        description: str = "",
        category_code: int = 0,
    ) -> List[str]:
        """Produce the final ranked keyword list for one image.

        Args:
            raw_keywords: Comma/semicolon/newline separated model keywords
            title: Parsed (unrefined) title
            description: Parsed description
            category_code: Final category code

        Returns:
            Unique keywords in rank order, at most ``max_keywords`` long and
            at least ``min_keywords`` long unless candidates ran out
        """
        curated: List[str] = []
        seen: Set[str] = set()

        strong_count = self._admit(split_keywords(raw_keywords), curated, seen)
        self._admit(self.medium_candidates(title, description, category_code), curated, seen)
        curated = curated[:self.max_keywords]

        if len(curated) < self.min_keywords:
            added = self._backfill(curated)
            logger.debug(f"Backfilled {added} keyword(s)")

        if len(curated) < self.min_keywords:
            logger.warning(
                f"Only {len(curated)} keywords available (minimum {self.min_keywords}); "
                f"candidates exhausted"
            )

        logger.debug(f"Curated {len(curated)} keywords ({strong_count} from model output)")
        return curated

    def _admit(self, candidates: Iterable[str], curated: List[str], seen: Set[str]) -> int:
        admitted = 0
        for candidate in candidates:
            phrase = self.normalize(candidate)
            if self.is_acceptable(phrase, seen):
                curated.append(phrase)
                seen.add(phrase)
                admitted += 1
        return admitted

    def _backfill(self, curated: List[str]) -> int:
        seen = set(curated)
        added = 0
        for phrase in list(curated):
            if len(curated) >= self.min_keywords:
                break
            partner = self.morphological_partner(phrase)
            # A partner that normalization would rewrite is skipped so output stays stable
            if partner is None or self.normalize(partner) != partner:
                continue
            if self.is_acceptable(partner, seen):
                curated.append(partner)
                seen.add(partner)
                added += 1
        return added
