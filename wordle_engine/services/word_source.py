"""
Word Source

Supplies secret words and answers vocabulary membership questions.
The game session only relies on the WordSource interface; WordListSource
is the in-memory implementation backed by the configured word list.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..config.game_settings import WORD_LIST, WORD_LENGTH
from ..errors import WordSourceError
from ..utils.helpers import normalize_word


class WordSource(ABC):
    """Vocabulary collaborator consumed by GameSession."""

    word_length: int

    @abstractmethod
    def get_random_word(self) -> str:
        """Return an uppercase word of ``word_length`` letters."""

    @abstractmethod
    def is_valid_word(self, candidate: str) -> bool:
        """True iff ``candidate`` is a whole vocabulary entry, ignoring case."""


class WordListSource(WordSource):
    """
    Word source over a fixed list of words.

    Words are kept twice: as an ordered tuple so random selection is
    reproducible with a seeded generator, and as a frozenset for exact
    membership tests.
    """

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self.rng = rng or random.Random()

        normalized = []
        for word in words:
            word = word.strip()
            if len(word) != word_length or not (word.isascii() and word.isalpha()):
                raise WordSourceError(
                    f"Word '{word}' is not a {word_length}-letter alphabetic word"
                )
            normalized.append(normalize_word(word))

        # dict.fromkeys keeps first-seen order while dropping duplicates
        self.words = tuple(dict.fromkeys(normalized))
        self._vocabulary = frozenset(self.words)

    @classmethod
    def from_settings(cls, rng: Optional[random.Random] = None) -> "WordListSource":
        """Build a source from the configured word list."""
        return cls(WORD_LIST, WORD_LENGTH, rng=rng)

    def __len__(self) -> int:
        return len(self.words)

    def get_random_word(self) -> str:
        if not self.words:
            raise WordSourceError("Word list is empty; cannot choose a secret word")
        return self.rng.choice(self.words)

    def is_valid_word(self, candidate: str) -> bool:
        if not isinstance(candidate, str) or not candidate.isascii():
            return False
        return normalize_word(candidate) in self._vocabulary
