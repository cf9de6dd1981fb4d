"""
Keyword Lexicon

Word tables consumed by the keyword curator and title refiner:

- stopwords: low-value or forbidden terms never emitted as keywords
- corrections: truncated or misspelled fragments produced by vision
  models, mapped to the intended word (exact match only)
- irregular plurals: singular/plural pairs that do not follow the
  default "+s" rule
- banned phrases: substrings that disqualify a keyword
- title forbidden phrases: marketing and technical filler removed from titles

The module-level ``DEFAULT_LEXICON`` is built once. Callers that need
different tables construct a ``Lexicon`` (or use ``extended``) and pass
it to the pipeline explicitly.
"""

from dataclasses import dataclass, field, replace
from functools import cached_property
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


DEFAULT_STOPWORDS = frozenset([
    "the", "a", "an", "and", "or", "of", "on", "in", "for", "to", "with", "by", "at",
    "from", "as", "is", "are", "be", "no", "not", "without", "copy", "space", "stock",
    "photo", "image", "illustration", "vector illustration", "nobody", "background",
    "closeup", "close up", "studio shot", "horizontal", "vertical",
    "portrait orientation", "landscape orientation", "high quality", "hd", "4k", "free",
    "royalty free", "text", "placeholder",
])

DEFAULT_CORRECTIONS = {
    # truncated tokens
    "volcan": "volcano",
    "eruptio": "eruption",
    "smok": "smoke",
    "mountai": "mountain",
    "landscap": "landscape",
    "technolog": "technology",
    "architectur": "architecture",
    "beautifu": "beautiful",
    "sunse": "sunset",
    "waterfal": "waterfall",
    "vegetabl": "vegetable",
    "celebratio": "celebration",
    "environmen": "environment",
    "businesswoma": "businesswoman",
    "communicatio": "communication",
    "innovatio": "innovation",
    "educatio": "education",
    "transportatio": "transportation",
    # common misspellings
    "wildife": "wildlife",
    "buisness": "business",
    "bussiness": "business",
    "tecnology": "technology",
    "enviroment": "environment",
    "restaraunt": "restaurant",
    "accomodation": "accommodation",
    "beatiful": "beautiful",
    "sillhouette": "silhouette",
    "silouette": "silhouette",
    "vegatables": "vegetables",
    "archtecture": "architecture",
    "colorfull": "colorful",
    "flowres": "flowers",
    # split compounds
    "sun set": "sunset",
    "water fall": "waterfall",
    "sea side": "seaside",
    "hi tech": "high tech",
    "sky line": "skyline",
}

DEFAULT_IRREGULAR_PLURALS = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
    "leaf": "leaves",
    "knife": "knives",
    "wolf": "wolves",
    "life": "lives",
    "shelf": "shelves",
    "loaf": "loaves",
    "half": "halves",
    "calf": "calves",
    "cactus": "cacti",
    "fungus": "fungi",
    "sheep": "sheep",
    "fish": "fish",
    "deer": "deer",
    "species": "species",
    "series": "series",
    "berry": "berries",
    "strawberry": "strawberries",
    "cherry": "cherries",
    "city": "cities",
    "country": "countries",
    "family": "families",
    "butterfly": "butterflies",
    "puppy": "puppies",
    "baby": "babies",
    "lady": "ladies",
    "party": "parties",
    "glass": "glasses",
    "bus": "buses",
    "box": "boxes",
    "fox": "foxes",
    "dish": "dishes",
    "brush": "brushes",
    "church": "churches",
    "beach": "beaches",
    "peach": "peaches",
    "bench": "benches",
    "watch": "watches",
    "sandwich": "sandwiches",
    "dress": "dresses",
    "tomato": "tomatoes",
    "potato": "potatoes",
    "hero": "heroes",
}

DEFAULT_SHORT_KEYWORDS = frozenset(["ai", "ui", "ux", "3d", "2d", "vr", "ar", "tv", "dj", "pc"])

DEFAULT_BANNED_PHRASES = (
    "stock photo",
    "copy space",
    "no people",
    "nobody",
    "text placeholder",
)

DEFAULT_TITLE_FORBIDDEN_PHRASES = (
    "stock photography",
    "stock photo",
    "stock image",
    "copy space",
    "copyspace",
    "high quality",
    "high resolution",
    "royalty free",
    "hd",
    "4k",
    "8k",
    "dslr",
    "shot on iphone",
    "nobody",
    "no people",
    "text placeholder",
    "placeholder text",
    "space for text",
    "placeholder",
)


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({k.lower(): v.lower() for k, v in mapping.items()})


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of word tables used by keyword and title refinement.

    Attributes:
        stopwords: Terms never accepted as keywords
        corrections: Exact fragment -> corrected word or phrase
        irregular_plurals: Singular -> plural for non "+s" words
        short_keyword_whitelist: Keywords allowed below 3 characters
        banned_phrases: Substrings that disqualify a keyword
        title_forbidden_phrases: Phrases removed from titles
    """
    stopwords: FrozenSet[str] = DEFAULT_STOPWORDS
    corrections: Mapping[str, str] = field(default_factory=lambda: _freeze(DEFAULT_CORRECTIONS))
    irregular_plurals: Mapping[str, str] = field(
        default_factory=lambda: _freeze(DEFAULT_IRREGULAR_PLURALS)
    )
    short_keyword_whitelist: FrozenSet[str] = DEFAULT_SHORT_KEYWORDS
    banned_phrases: Tuple[str, ...] = DEFAULT_BANNED_PHRASES
    title_forbidden_phrases: Tuple[str, ...] = DEFAULT_TITLE_FORBIDDEN_PHRASES

    @cached_property
    def irregular_singulars(self) -> Dict[str, str]:
        """Inverse of ``irregular_plurals`` (plural -> singular)."""
        return {plural: singular for singular, plural in self.irregular_plurals.items()}

    def correct(self, phrase: str) -> str:
        """Apply spelling correction to a lowercase phrase.

        The whole phrase is looked up first. Failing that, each word of a
        multi-word phrase is corrected on its own. Only exact matches are
        replaced, so "volcanic" never becomes "volcanoic".
        """
        if phrase in self.corrections:
            return self.corrections[phrase]
        words = phrase.split(" ")
        if len(words) == 1:
            return phrase
        return " ".join(self.corrections.get(word, word) for word in words)

    def extended(
        self,
        stopwords: Optional[Iterable[str]] = None,
        corrections: Optional[Mapping[str, str]] = None,
        irregular_plurals: Optional[Mapping[str, str]] = None,
    ) -> "Lexicon":
        """Return a copy with additional entries merged in."""
        merged_corrections = dict(self.corrections)
        merged_corrections.update(corrections or {})
        merged_plurals = dict(self.irregular_plurals)
        merged_plurals.update(irregular_plurals or {})
        return replace(
            self,
            stopwords=self.stopwords | frozenset(w.lower() for w in (stopwords or ())),
            corrections=_freeze(merged_corrections),
            irregular_plurals=_freeze(merged_plurals),
        )


DEFAULT_LEXICON = Lexicon()
