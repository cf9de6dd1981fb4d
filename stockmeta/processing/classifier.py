"""
Category Classifier

Chooses the final taxonomy code for an image by combining three signals:

1. Bias overrides: people-indicating terms force People, graphics-indicating
   terms force Graphic Resources (people is checked first).
2. Rule scoring: every vocabulary term present as a token scores 3, every
   word of a term present as a token scores 1.
3. The model's self-reported category, trusted unless the rule scorer
   beats it by ``ARBITRATION_SCORE_GAP`` points or more.

Ties in the rule score go to the lowest code. When no term scores at all,
the rule code is 0.
"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, Optional

from stockmeta.processing.constants import (
    ARBITRATION_SCORE_GAP,
    PHRASE_MATCH_POINTS,
    WORD_MATCH_POINTS,
)
from stockmeta.taxonomy import (
    DEFAULT_TAXONOMY,
    GRAPHICS_BIAS_TERMS,
    GRAPHICS_CODE,
    PEOPLE_BIAS_TERMS,
    PEOPLE_CODE,
    UNKNOWN_CODE,
    Taxonomy,
)


logger = logging.getLogger(__name__)


@dataclass
class ClassificationTrace:
    """How a category decision was reached.

    Attributes:
        code: Final category code
        bias: "people" or "graphics" when an override fired, else None
        ai_code: Code resolved from the model's category text (0 if none)
        rule_code: Best-scoring code (0 if nothing scored)
        scores: Score per taxonomy code (empty when a bias fired)
    """
    code: int
    bias: Optional[str] = None
    ai_code: int = UNKNOWN_CODE
    rule_code: int = UNKNOWN_CODE
    scores: Dict[int, int] = field(default_factory=dict)

    @property
    def ai_score(self) -> int:
        return self.scores.get(self.ai_code, 0)

    @property
    def rule_score(self) -> int:
        return self.scores.get(self.rule_code, 0)


def arbitrate(ai_code: int, rule_code: int, ai_score: int, rule_best: int) -> int:
    """Pick between the model's category and the rule scorer's category."""
    if not ai_code:
        return rule_code
    if ai_code == rule_code:
        return ai_code
    if rule_code and rule_best - ai_score >= ARBITRATION_SCORE_GAP:
        return rule_code
    return ai_code


def best_rule_code(scores: Dict[int, int]) -> int:
    """Return the highest-scoring code, lowest code on ties, 0 if all zero."""
    best_code, best_score = UNKNOWN_CODE, 0
    for code in sorted(scores):
        if scores[code] > best_score:
            best_code, best_score = code, scores[code]
    return best_code


class CategoryClassifier:
    """Assigns a taxonomy code from response tokens and the model's category.

    Example:
        >>> classifier = CategoryClassifier()
        >>> classifier.classify(tokenize("snowy mountain valley"), "Scenery")
        11
    """

    def __init__(
        self,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        people_terms: FrozenSet[str] = PEOPLE_BIAS_TERMS,
        graphics_terms: FrozenSet[str] = GRAPHICS_BIAS_TERMS,
        people_code: int = PEOPLE_CODE,
        graphics_code: int = GRAPHICS_CODE,
    ):
        self.taxonomy = taxonomy
        self.people_terms = people_terms
        self.graphics_terms = graphics_terms
        self.people_code = people_code
        self.graphics_code = graphics_code

    def score(self, tokens: AbstractSet[str]) -> Dict[int, int]:
        """Score every taxonomy code against the token set."""
        scores = {code: 0 for code in self.taxonomy.codes()}
        for entry in self.taxonomy.entries():
            for term in entry.vocabulary:
                if term in tokens:
                    scores[entry.code] += PHRASE_MATCH_POINTS
                for word in term.split(" "):
                    if word in tokens:
                        scores[entry.code] += WORD_MATCH_POINTS
        return scores

    def explain(self, tokens: AbstractSet[str], category_text: Optional[str]) -> ClassificationTrace:
        """Classify and return the full decision trace."""
        if not tokens.isdisjoint(self.people_terms):
            return ClassificationTrace(code=self.people_code, bias="people")
        if not tokens.isdisjoint(self.graphics_terms):
            return ClassificationTrace(code=self.graphics_code, bias="graphics")

        scores = self.score(tokens)
        ai_code = self.taxonomy.resolve(category_text)
        rule_code = best_rule_code(scores)
        code = arbitrate(ai_code, rule_code, scores.get(ai_code, 0), scores.get(rule_code, 0))
        return ClassificationTrace(
            code=code,
            ai_code=ai_code,
            rule_code=rule_code,
            scores=scores,
        )

    def classify(self, tokens: AbstractSet[str], category_text: Optional[str]) -> int:
        """Return the final category code for a response.

        Args:
            tokens: Tokens extracted from the parsed response fields
            category_text: Category name reported by the model

        Returns:
            Taxonomy code, or 0 when no signal matched at all
        """
        trace = self.explain(tokens, category_text)
        logger.debug(
            f"Category {trace.code} (bias={trace.bias}, ai={trace.ai_code}:{trace.ai_score}, "
            f"rule={trace.rule_code}:{trace.rule_score})"
        )
        return trace.code
