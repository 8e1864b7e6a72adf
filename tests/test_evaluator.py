"""
Tests for the guess evaluator.
"""

from collections import Counter
from itertools import product

import pytest

from wordle_engine.errors import InvalidGuessShape
from wordle_engine.models.game import Feedback, LetterMark
from wordle_engine.services.evaluator import evaluate

C, P, A = LetterMark.CORRECT, LetterMark.PRESENT, LetterMark.ABSENT


def test_identical_guess_is_all_correct():
    feedback = evaluate("CRANE", "CRANE")

    assert feedback.marks == (C, C, C, C, C)
    assert feedback.is_correct
    assert feedback.pattern == "GGGGG"


def test_duplicate_letters_against_allow():
    # Exact L at index 2 is reserved first; the leading L takes the other one.
    feedback = evaluate("ALLOW", "LOLLY")

    assert feedback.marks == (P, P, C, A, A)
    assert not feedback.is_correct


def test_disjoint_guess_is_all_absent():
    assert evaluate("CRANE", "MOIST").marks == (A, A, A, A, A)


def test_exact_match_takes_priority_over_earlier_present():
    # CRANE has one A; the exact hit at index 2 consumes it.
    assert evaluate("CRANE", "AXAXX").pattern == "BBGBB"


def test_repeated_guess_letter_with_single_secret_occurrence():
    # Only the first non-exact A is present, the rest are absent.
    assert evaluate("CRANE", "AAXYZ").pattern == "YBBBB"


@pytest.mark.parametrize("secret,guess,expected", [
    ("LEVEL", "BELLE", "BGYYY"),
    ("SCOOP", "COOLS", "YYGBY"),
    ("CRANE", "RAISE", "YYBBG"),
    ("CRANE", "STARE", "BBGYG"),
    ("LEVEL", "LEMON", "GGBBB"),
    ("ABBEY", "BABES", "YYGGB"),
])
def test_golden_patterns(secret, guess, expected):
    assert evaluate(secret, guess).pattern == expected


def test_length_mismatch_is_rejected():
    with pytest.raises(InvalidGuessShape):
        evaluate("CRANE", "CRAN")


def test_feedback_keeps_guess_and_secret():
    feedback = evaluate("MANGO", "CRANE")

    assert feedback.guess == "CRANE"
    assert feedback.secret == "MANGO"
    assert feedback.letters()[2] == ("A", P)


def test_secret_does_not_affect_feedback_equality():
    with_secret = evaluate("CRANE", "CRANE")
    without_secret = Feedback(guess="CRANE", marks=(C,) * 5)

    assert with_secret == without_secret
    assert "MANGO" not in repr(evaluate("MANGO", "CRANE"))


def test_evaluate_has_no_carry_over_between_calls():
    first = evaluate("ALLOW", "LOLLY")
    evaluate("LOLLY", "ALLOW")

    assert evaluate("ALLOW", "LOLLY") == first


def test_marking_properties_over_small_alphabet():
    """Exhaustive check over every three-letter word from a three-letter alphabet."""
    words = ["".join(letters) for letters in product("ABC", repeat=3)]

    for secret in words:
        secret_counts = Counter(secret)
        for guess in words:
            feedback = evaluate(secret, guess)

            for i, mark in enumerate(feedback.marks):
                assert (mark is C) == (guess[i] == secret[i])

            hits = Counter(letter for letter, mark in feedback.letters() if mark is not A)
            for letter in set(guess):
                assert hits[letter] <= secret_counts[letter]
                assert hits[letter] == min(secret_counts[letter], guess.count(letter))
