"""
Title and Description Refinement

Titles lose marketing and technical filler ("stock photo", "copy space",
"4k", ...), are lowercased, cut to 200 characters and put in sentence
case. Descriptions are only trimmed and cut to 500 characters.
"""

import re
from functools import lru_cache
from typing import Optional, Sequence

from stockmeta.lexicon import DEFAULT_LEXICON, Lexicon
from stockmeta.processing.constants import DESCRIPTION_MAX_CHARS, TITLE_MAX_CHARS


_WHITESPACE = re.compile(r"\s+")
_SURROUNDING_QUOTES = re.compile(r"^[\"'`]+|[\"'`]+$")


@lru_cache(maxsize=8)
def _phrase_pattern(phrases: Sequence[str]) -> "re.Pattern[str]":
    # Longest first so "stock photography" wins over "stock photo"
    ordered = sorted(set(phrases), key=len, reverse=True)
    alternation = "|".join(re.escape(p) for p in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def sentence_case(text: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    stripped = (text or "").strip()
    if not stripped:
        return ""
    return stripped[0].upper() + stripped[1:]


def strip_phrases(text: str, phrases: Sequence[str]) -> str:
    """Remove whole-word occurrences of any phrase, case-insensitively."""
    if not phrases:
        return text
    return _phrase_pattern(tuple(phrases)).sub(" ", text)


def refine_title(raw_title: Optional[str], lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Produce a marketplace-compliant title.

    Example:
        >>> refine_title("Amazing stock photo of a Mountain!! copy space")
        'Amazing of a mountain!!'
    """
    title = _SURROUNDING_QUOTES.sub("", (raw_title or "").strip())
    title = strip_phrases(title, lexicon.title_forbidden_phrases)
    title = _WHITESPACE.sub(" ", title).strip().lower()
    return sentence_case(title[:TITLE_MAX_CHARS])


def refine_description(raw_description: Optional[str]) -> str:
    return (raw_description or "").strip()[:DESCRIPTION_MAX_CHARS]
