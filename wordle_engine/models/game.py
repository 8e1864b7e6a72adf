"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterMark(Enum):
    """Verdict for a single guess position."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def symbol(self) -> str:
        """Single-character code used in compact patterns."""
        return _MARK_SYMBOLS[self]


_MARK_SYMBOLS = {
    LetterMark.CORRECT: "G",
    LetterMark.PRESENT: "Y",
    LetterMark.ABSENT: "B",
}


class LetterStatus(Enum):
    """Keyboard summary of what is known about a letter across all guesses."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"


class SessionState(Enum):
    """The two states of a game session."""
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


@dataclass(frozen=True)
class Feedback:
    """
    Result of evaluating one guess.

    The secret is kept for debugging and tests only; it does not take part
    in equality and is left out of the repr.
    """
    guess: str
    marks: Tuple[LetterMark, ...]
    secret: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def is_correct(self) -> bool:
        return all(mark is LetterMark.CORRECT for mark in self.marks)

    @property
    def pattern(self) -> str:
        """Compact form, e.g. 'GYBBB'."""
        return "".join(mark.symbol for mark in self.marks)

    def letters(self) -> List[Tuple[str, LetterMark]]:
        """Pairs each guess letter with its mark."""
        return list(zip(self.guess, self.marks))


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    attempts_used: int
    max_attempts: int
    word_length: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter marks as strings for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
