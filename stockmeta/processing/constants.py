"""Limits shared by the response processing stages."""

TITLE_MAX_CHARS = 200
DESCRIPTION_MAX_CHARS = 500

KEYWORD_MAX = 49
KEYWORD_MIN_STRONG = 25
KEYWORD_MAX_WORDS = 3
KEYWORD_MIN_CHARS = 3

# Minimum lead the rule score needs over the model's own category to override it
ARBITRATION_SCORE_GAP = 5

PHRASE_MATCH_POINTS = 3
WORD_MATCH_POINTS = 1
