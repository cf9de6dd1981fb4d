"""
Tokenizer

Turns free text into the set of lowercase words and phrases used for
category scoring and bias detection.
"""

import re
from typing import Optional, Set


_SEPARATORS = re.compile(r"[,./-]")
_LETTER_RUN = re.compile(r"[a-z][a-z ]+")
_WHITESPACE = re.compile(r"\s+")


def tokenize(*texts: Optional[str]) -> Set[str]:
    """Extract word and phrase tokens from one or more texts.

    Every maximal run of letters and spaces (starting with a letter) is
    added both as a whole phrase and word by word, so "pine trees" yields
    "pine trees", "pine" and "trees". Digits and punctuation break runs.

    Args:
        *texts: Texts to tokenize; ``None`` and empty strings are skipped

    Returns:
        Unordered set of tokens, intended for membership tests only
    """
    blob = " ".join(t for t in texts if t)
    blob = _SEPARATORS.sub(" ", blob.lower())

    tokens: Set[str] = set()
    for match in _LETTER_RUN.finditer(blob):
        phrase = _WHITESPACE.sub(" ", match.group(0)).strip()
        if not phrase:
            continue
        tokens.add(phrase)
        tokens.update(phrase.split(" "))
    return tokens
