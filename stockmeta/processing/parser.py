"""
Response Parser

Extracts the TITLE / KEYWORDS / CATEGORY / DESCRIPTION fields from the
semi-structured text a vision model returns.

The primary path looks for one labeled line per field. When the model
ignored the schema so badly that no field was found that way, a line
scanner walks the text with an explicit field state: a labeled line
switches the state and seeds the field, and unlabeled lines extend the
KEYWORDS or DESCRIPTION field that is currently open.
"""

import re
from enum import Enum
from typing import Dict, Optional, Tuple

from stockmeta.processing.constants import DESCRIPTION_MAX_CHARS, TITLE_MAX_CHARS
from stockmeta.schemas.metadata import ParsedFields, PromptResult


class FieldState(Enum):
    """Field the fallback scanner is currently filling."""
    NONE = "none"
    TITLE = "title"
    KEYWORDS = "keywords"
    CATEGORY = "category"
    DESCRIPTION = "description"


# Label -> state entered when a line starts with that label
TRANSITIONS: Dict[str, FieldState] = {
    "TITLE": FieldState.TITLE,
    "KEYWORDS": FieldState.KEYWORDS,
    "CATEGORY": FieldState.CATEGORY,
    "DESCRIPTION": FieldState.DESCRIPTION,
}

# States whose field absorbs following unlabeled lines
CONTINUABLE_STATES = frozenset([FieldState.KEYWORDS, FieldState.DESCRIPTION])

# Markdown emphasis, headings, bullets and quotes are tolerated around labels
_DECORATION = r"[ \t*_#>-]*"

_FIELD_PATTERNS: Dict[FieldState, "re.Pattern[str]"] = {
    state: re.compile(
        rf"^{_DECORATION}{label}[*_]*[ \t]*:[*_]*[ \t]*(.*)$",
        re.IGNORECASE | re.MULTILINE,
    )
    for label, state in TRANSITIONS.items()
}

_LINE_LABEL = re.compile(
    rf"^{_DECORATION}({'|'.join(TRANSITIONS)})[*_]*[ \t]*:[*_]*[ \t]*(.*)$",
    re.IGNORECASE,
)

_PROMPT_LABEL = re.compile(r"^prompt\s*:\s*", re.IGNORECASE)


def _extract(text: str, state: FieldState) -> str:
    match = _FIELD_PATTERNS[state].search(text)
    return match.group(1).strip() if match else ""


def match_label(line: str) -> Optional[Tuple[FieldState, str]]:
    """Return the state a labeled line switches to and its remainder."""
    match = _LINE_LABEL.match(line)
    if not match:
        return None
    return TRANSITIONS[match.group(1).upper()], match.group(2).strip()


def scan_fields(text: str) -> Dict[FieldState, str]:
    """Recover fields line by line from text that broke the schema.

    Args:
        text: Raw model response

    Returns:
        Mapping of field state to the text collected for it
    """
    fields = {state: "" for state in TRANSITIONS.values()}
    current = FieldState.NONE

    for raw_line in text.strip().split("\n"):
        line = raw_line.strip()
        labeled = match_label(line)
        if labeled:
            current, remainder = labeled
            fields[current] = remainder
        elif current in CONTINUABLE_STATES and line:
            fields[current] = f"{fields[current]} {line}".strip()

    return fields


def parse_response(raw_text: Optional[str]) -> ParsedFields:
    """Parse a metadata response into its four fields.

    Never raises: text without any recognisable label yields empty fields.

    Args:
        raw_text: Text returned by the vision model

    Returns:
        ParsedFields with title and description already trimmed and cut
    """
    text = raw_text or ""
    fields = {state: _extract(text, state) for state in TRANSITIONS.values()}

    if not any(fields.values()):
        fields = scan_fields(text)

    return ParsedFields(
        title=fields[FieldState.TITLE].strip()[:TITLE_MAX_CHARS],
        keywords=fields[FieldState.KEYWORDS].strip(),
        category_text=fields[FieldState.CATEGORY].strip(),
        description=fields[FieldState.DESCRIPTION].strip()[:DESCRIPTION_MAX_CHARS],
    )


def parse_prompt_response(raw_text: Optional[str]) -> PromptResult:
    """Turn a prompt-mode response into a PromptResult."""
    cleaned = _PROMPT_LABEL.sub("", (raw_text or "").strip(), count=1)
    return PromptResult(prompt=cleaned)
