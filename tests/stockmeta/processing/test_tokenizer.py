"""Tests for stockmeta.processing.tokenizer."""

from stockmeta.processing.tokenizer import tokenize


def test_phrase_and_words():
    tokens = tokenize("Pine trees")
    assert tokens == {"pine trees", "pine", "trees"}


def test_separators_become_spaces():
    tokens = tokenize("red fox, snow-covered field")
    # Commas and hyphens turn into spaces, so the run continues across them
    assert "red fox snow covered field" in tokens
    assert {"red", "fox", "snow", "covered", "field"} <= tokens


def test_digits_break_runs():
    tokens = tokenize("mountain 4k view")
    assert "mountain" in tokens
    assert "k view" in tokens
    assert "view" in tokens
    assert not any(ch.isdigit() for token in tokens for ch in token)


def test_repeated_spaces_collapsed():
    tokens = tokenize("climate   change")
    assert "climate change" in tokens
    assert "" not in tokens


def test_multiple_texts_and_none():
    tokens = tokenize("Cat", None, "", "pet")
    assert {"cat", "pet"} <= tokens


def test_empty_input():
    assert tokenize() == set()
    assert tokenize(None, "") == set()
