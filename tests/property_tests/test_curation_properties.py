"""
Property-based tests for keyword curation.

For any raw keyword text, the curated list is unique, bounded, free of
stopwords and banned phrases, and stable when fed back in. Enough
distinct candidates always reach the keyword floor.
"""

from hypothesis import HealthCheck, given, settings, strategies as st

from stockmeta.lexicon import DEFAULT_LEXICON
from stockmeta.processing.constants import KEYWORD_MAX, KEYWORD_MAX_WORDS, KEYWORD_MIN_STRONG
from stockmeta.processing.curator import KeywordCurator, clean_phrase


WORDS = st.sampled_from([
    "volcano", "volcan", "eruptio", "lava", "fox", "foxes", "snow", "the", "and", "image",
    "stock photo", "mountain view", "red fox in snow", "hd", "4k", "people", "child", "children",
    "city", "cities", "a", "ox", "night sky", "beautiful", "mother's", "kids'", "rock & roll",
])
SEPARATORS = st.sampled_from([", ", ",", "; ", "\n", " ,"])

raw_keyword_text = st.lists(
    st.one_of(WORDS, st.text(alphabet="abcdefghij -.,1'\"!?&", max_size=15)),
    max_size=80,
).flatmap(lambda parts: SEPARATORS.map(lambda sep: sep.join(parts)))

acceptable_words = st.lists(
    st.text(alphabet="bcdfghjklmnpqrstvwxz", min_size=4, max_size=10).filter(
        lambda word: word not in DEFAULT_LEXICON.corrections and word not in DEFAULT_LEXICON.stopwords
    ),
    min_size=KEYWORD_MIN_STRONG,
    max_size=60,
    unique=True,
)

property_settings = settings(
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.too_slow],
)

curator = KeywordCurator()


class TestCurationProperties:
    @property_settings
    @given(raw=raw_keyword_text, title=st.text(max_size=60), category=st.integers(0, 21))
    def test_output_obeys_keyword_rules(self, raw, title, category):
        keywords = curator.curate(raw, title=title, category_code=category)

        assert len(keywords) <= KEYWORD_MAX
        assert len(set(keywords)) == len(keywords)
        for keyword in keywords:
            assert keyword == keyword.lower().strip()
            assert keyword not in DEFAULT_LEXICON.stopwords
            assert len(keyword.split(" ")) <= KEYWORD_MAX_WORDS
            assert not any(banned in keyword for banned in DEFAULT_LEXICON.banned_phrases)

    @property_settings
    @given(raw=raw_keyword_text)
    def test_recuration_keeps_existing_order(self, raw):
        first = curator.curate(raw)
        second = curator.curate(", ".join(first))
        assert second[:len(first)] == first

    @property_settings
    @given(phrase=st.text(max_size=40))
    def test_clean_phrase_is_idempotent(self, phrase):
        once = clean_phrase(phrase)
        assert clean_phrase(once) == once

    @property_settings
    @given(raw=raw_keyword_text, limit=st.integers(1, 60))
    def test_custom_bounds(self, raw, limit):
        bounded = KeywordCurator(max_keywords=limit, min_keywords=min(limit, 25))
        assert len(bounded.curate(raw)) <= limit

    @property_settings
    @given(words=acceptable_words, separator=SEPARATORS)
    def test_enough_candidates_reach_the_floor(self, words, separator):
        keywords = curator.curate(separator.join(words))
        assert len(keywords) >= KEYWORD_MIN_STRONG
        assert keywords[:len(words)] == words[:len(keywords)]
