"""
Category Taxonomy

Static definition of the 21 Adobe Stock categories used to classify every
image. Each entry carries its canonical name, the alias names a vision
model tends to answer with, and the vocabulary used by the rule scorer.

The tables are built once at import time and never mutated. Code that
needs a different taxonomy (tests, experiments) builds its own
``Taxonomy`` and passes it in explicitly.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple


PEOPLE_CODE = 13
GRAPHICS_CODE = 8
UNKNOWN_CODE = 0


@dataclass(frozen=True)
class TaxonomyEntry:
    """A single category of the taxonomy.

    Attributes:
        code: Numeric category code (1..21)
        name: Canonical display name
        aliases: Lowercase alternative names that resolve to this code
        vocabulary: Lowercase terms that count towards this category
    """
    code: int
    name: str
    aliases: FrozenSet[str] = frozenset()
    vocabulary: FrozenSet[str] = frozenset()


class Taxonomy:
    """Read-only collection of taxonomy entries ordered by code."""

    def __init__(self, entries: Iterable[TaxonomyEntry]):
        ordered = sorted(entries, key=lambda e: e.code)
        codes = [e.code for e in ordered]
        if len(set(codes)) != len(codes):
            raise ValueError(f"Duplicate taxonomy codes: {codes}")
        if UNKNOWN_CODE in codes:
            raise ValueError("Code 0 is reserved for unknown categories")

        self._entries: Tuple[TaxonomyEntry, ...] = tuple(ordered)
        self._by_code: Dict[int, TaxonomyEntry] = {e.code: e for e in ordered}
        self._name_to_code: Dict[str, int] = {e.name.lower(): e.code for e in ordered}
        self._alias_to_code: Dict[str, int] = {}
        for entry in ordered:
            for alias in entry.aliases:
                self._alias_to_code[alias.lower()] = entry.code

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: int) -> bool:
        return code in self._by_code

    def entries(self) -> Tuple[TaxonomyEntry, ...]:
        return self._entries

    def codes(self) -> List[int]:
        return [e.code for e in self._entries]

    def get(self, code: int) -> Optional[TaxonomyEntry]:
        return self._by_code.get(code)

    def name_for(self, code: int) -> Optional[str]:
        entry = self._by_code.get(code)
        return entry.name if entry else None

    def resolve(self, name: Optional[str]) -> int:
        """Resolve a category name reported by the model to a code.

        Lookup order is canonical name, alias, then alias with a trailing
        "s" removed. Anything else resolves to ``UNKNOWN_CODE``.

        Args:
            name: Free-text category name (case and padding ignored)

        Returns:
            Taxonomy code, or 0 when the name is not recognised
        """
        normalized = (name or "").strip().lower()
        if not normalized:
            return UNKNOWN_CODE
        if normalized in self._name_to_code:
            return self._name_to_code[normalized]
        if normalized in self._alias_to_code:
            return self._alias_to_code[normalized]
        if normalized.endswith("s") and normalized[:-1] in self._alias_to_code:
            return self._alias_to_code[normalized[:-1]]
        return UNKNOWN_CODE


def _entry(code: int, name: str, aliases: Iterable[str], vocabulary: Iterable[str]) -> TaxonomyEntry:
    return TaxonomyEntry(
        code=code,
        name=name,
        aliases=frozenset(aliases),
        vocabulary=frozenset(vocabulary),
    )


DEFAULT_TAXONOMY = Taxonomy([
    _entry(1, "Animals",
           ["animals"],
           ["animal", "animals", "wildlife", "pet", "pets", "dog", "cat", "bird", "insect", "fish"]),
    _entry(2, "Buildings and Architecture",
           ["architecture", "building", "buildings"],
           ["architecture", "building", "buildings", "interior", "exterior", "skyscraper",
            "bridge", "temple", "house", "home", "facade"]),
    _entry(3, "Business",
           ["business", "finance", "money", "office"],
           ["business", "office", "corporate", "startup", "meeting", "finance", "money",
            "budget", "report", "strategy", "analytics"]),
    _entry(4, "Drinks",
           ["drinks", "beverage", "beverages", "coffee", "tea", "wine", "beer"],
           ["drink", "drinks", "beverage", "coffee", "tea", "wine", "beer", "cocktail", "juice"]),
    _entry(5, "The Environment",
           ["environment", "nature", "ecology", "sustainability"],
           ["environment", "ecosystem", "forest", "nature", "conservation", "sustainability",
            "recycling", "green"]),
    _entry(6, "States of Mind",
           ["states of mind", "emotion", "emotions", "mental", "psychology"],
           ["emotion", "emotions", "mood", "feelings", "anxiety", "joy", "sadness", "mental",
            "mind", "psychology"]),
    _entry(7, "Food",
           ["food", "cuisine", "meal", "dish", "cooking", "baking"],
           ["food", "meal", "cuisine", "dish", "cooking", "baking", "snack", "breakfast",
            "lunch", "dinner", "recipe"]),
    _entry(8, "Graphic Resources",
           ["graphic resources", "graphics", "icon", "icons", "vector", "ui", "pattern", "template"],
           ["vector", "icon", "icons", "glyph", "pictogram", "ui", "pattern", "template",
            "infographic", "sticker", "mockup"]),
    _entry(9, "Hobbies and Leisure",
           ["hobbies and leisure", "hobbies", "leisure", "recreation", "game", "games", "music"],
           ["hobby", "hobbies", "leisure", "recreation", "gaming", "gamepad", "music",
            "instrument", "reading", "garden", "fishing"]),
    _entry(10, "Industry",
           ["industry", "manufacturing", "factory", "industrial", "construction"],
           ["industry", "industrial", "factory", "manufacturing", "assembly", "warehouse",
            "construction", "machinery"]),
    _entry(11, "Landscapes",
           ["landscapes", "landscape", "mountain", "mountains", "desert", "sea", "ocean"],
           ["landscape", "mountain", "mountains", "valley", "desert", "sea", "ocean", "coast",
            "coastline", "canyon", "waterfall", "horizon"]),
    _entry(12, "Lifestyle",
           ["lifestyle", "home life", "everyday life", "family life"],
           ["lifestyle", "daily", "everyday", "home life", "family life", "homework", "routine",
            "leisure time"]),
    _entry(13, "People",
           ["people", "person", "human", "portrait", "face", "hand", "hands"],
           ["person", "people", "man", "woman", "child", "boy", "girl", "portrait", "face",
            "hand", "hands", "selfie", "crowd", "human", "body"]),
    _entry(14, "Plants and Flowers",
           ["plants and flowers", "plants", "plant", "flower", "flowers", "botany", "leaf"],
           ["plant", "plants", "flower", "flowers", "leaf", "leaves", "blossom", "botanical",
            "flora", "bloom"]),
    _entry(15, "Culture and Religion",
           ["culture and religion", "religion", "cultural", "festival", "temple", "ritual", "tradition"],
           ["religion", "faith", "church", "temple", "mosque", "ritual", "festival", "tradition",
            "culture", "cultural"]),
    _entry(16, "Science",
           ["science", "scientific", "laboratory", "lab", "microscope", "dna", "atom"],
           ["science", "lab", "laboratory", "microscope", "experiment", "chemical", "physics",
            "biology", "dna", "molecule", "atom"]),
    _entry(17, "Social Issues",
           ["social issues", "protest", "poverty", "equality", "diversity", "pollution", "climate change"],
           ["protest", "inequality", "poverty", "pollution", "homeless", "crime", "violence",
            "war", "climate change", "social issue"]),
    _entry(18, "Sports",
           ["sports", "sport", "soccer", "football", "basketball", "tennis", "fitness", "running"],
           ["sport", "sports", "ball", "stadium", "tournament", "match", "game", "athlete",
            "fitness", "run", "running", "swim", "tennis", "soccer", "football", "basketball",
            "baseball", "golf"]),
    _entry(19, "Technology",
           ["technology", "tech", "computer", "laptop", "smartphone", "ai", "robot", "server"],
           ["technology", "tech", "computer", "laptop", "pc", "server", "cpu", "chip", "robot",
            "ai", "smartphone", "tablet", "code", "coding", "programming", "circuit",
            "motherboard"]),
    _entry(20, "Transport",
           ["transport", "transportation", "car", "cars", "train", "airplane", "ship", "bike"],
           ["transport", "transportation", "car", "cars", "vehicle", "bus", "train", "rail",
            "airplane", "ship", "bike", "bicycle", "traffic"]),
    _entry(21, "Travel",
           ["travel", "tourism", "vacation", "holiday", "destination", "landmark"],
           ["travel", "tourism", "vacation", "holiday", "journey", "trip", "itinerary",
            "destination", "landmark", "cityscape", "sightseeing"]),
])


# Presence of any of these terms assigns the category outright.
PEOPLE_BIAS_TERMS: FrozenSet[str] = frozenset([
    "person", "people", "human", "man", "woman", "boy", "girl", "child", "children",
    "portrait", "face", "hand", "hands", "selfie", "body", "crowd",
])

GRAPHICS_BIAS_TERMS: FrozenSet[str] = frozenset([
    "vector", "icon", "icons", "glyph", "pictogram", "ui", "pattern", "template",
    "infographic", "sticker", "mockup", "svg", "eps", "illustration", "flat icon",
    "outline icon", "line icon",
])

# Medium-tier keywords injected for a handful of categories
CATEGORY_LINKED_TERMS: Dict[int, Tuple[str, ...]] = {
    13: ("people", "person", "human", "portrait"),
    8: ("vector", "icon", "icons", "graphic", "ui"),
    19: ("technology", "tech"),
    3: ("business", "office"),
    7: ("food",),
}
