"""
Tests for the word list source.
"""

import random

import pytest

from conftest import VOCABULARY
from wordle_engine.errors import WordSourceError
from wordle_engine.services.word_source import WordListSource, WordSource


def test_random_word_comes_from_vocabulary():
    source = WordListSource(VOCABULARY, word_length=5, rng=random.Random(7))

    for _ in range(20):
        assert source.get_random_word() in VOCABULARY


def test_seeded_sources_draw_the_same_words():
    first = WordListSource(VOCABULARY, rng=random.Random(42))
    second = WordListSource(VOCABULARY, rng=random.Random(42))

    assert [first.get_random_word() for _ in range(5)] == [second.get_random_word() for _ in range(5)]


def test_membership_is_case_insensitive():
    source = WordListSource(["crane", "Slate"])

    assert source.is_valid_word("CRANE")
    assert source.is_valid_word("crane")
    assert source.is_valid_word("sLaTe")


def test_membership_is_exact_not_substring():
    source = WordListSource(["CRANE", "SLATE"])

    # Both are substrings of "CRANESLATE" but not entries
    assert not source.is_valid_word("NESLA")
    assert not source.is_valid_word("ANESL")
    assert not source.is_valid_word("CRAN")
    assert not source.is_valid_word("CRANES")


def test_non_string_candidates_are_not_words():
    source = WordListSource(VOCABULARY)

    assert not source.is_valid_word(None)
    assert not source.is_valid_word(12345)


def test_words_are_normalized_and_deduplicated():
    source = WordListSource(["crane", "CRANE", " mango "])

    assert source.words == ("CRANE", "MANGO")
    assert len(source) == 2


@pytest.mark.parametrize("bad_word", ["CRAN", "CRANES", "CR4NE"])
def test_invalid_entries_are_rejected(bad_word):
    with pytest.raises(WordSourceError):
        WordListSource(["CRANE", bad_word])


def test_empty_source_cannot_supply_a_word():
    source = WordListSource([])

    with pytest.raises(WordSourceError):
        source.get_random_word()


def test_other_word_lengths_are_supported():
    source = WordListSource(["planet", "letter"], word_length=6)

    assert source.word_length == 6
    assert source.get_random_word() in ("PLANET", "LETTER")


def test_from_settings_uses_configured_word_list():
    source = WordListSource.from_settings()

    assert isinstance(source, WordSource)
    assert source.is_valid_word("crane")
    assert len(source.get_random_word()) == source.word_length == 5


def test_non_ascii_entries_and_candidates_are_rejected():
    with pytest.raises(WordSourceError):
        WordListSource(["CRAS", "craß"], word_length=4)

    assert not WordListSource(["CRASS"]).is_valid_word("craß")
