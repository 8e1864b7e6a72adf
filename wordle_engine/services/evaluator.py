"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..errors import InvalidGuessShape
from ..models.game import Feedback, LetterMark


def evaluate(secret: str, guess: str) -> Feedback:
    """
    Compare a guess against the secret and mark every position.

    Exact matches are marked first and reserve their secret letter. The
    remaining guess positions are then scanned left to right, each one
    claiming the first unreserved secret position holding the same letter.
    A secret letter therefore satisfies at most one guess position, and an
    exact match always wins over a misplaced one.

    Both words are expected in the same case; GameSession normalizes guesses
    before calling this.

    Raises:
        InvalidGuessShape: If the words differ in length
    """
    if len(guess) != len(secret):
        raise InvalidGuessShape(
            f"Guess must be exactly {len(secret)} letters, got {len(guess)}"
        )

    marks: List[Optional[LetterMark]] = [None] * len(guess)
    consumed = [False] * len(secret)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            marks[i] = LetterMark.CORRECT
            consumed[i] = True

    # Second pass: misplaced letters against unconsumed secret positions
    for i, letter in enumerate(guess):
        if marks[i] is not None:
            continue
        marks[i] = LetterMark.ABSENT
        for j, secret_letter in enumerate(secret):
            if not consumed[j] and secret_letter == letter:
                marks[i] = LetterMark.PRESENT
                consumed[j] = True
                break

    return Feedback(guess=guess, marks=tuple(marks), secret=secret)
