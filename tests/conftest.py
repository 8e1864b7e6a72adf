"""
Pytest configuration for the Wordle engine.

Sends log files to a throwaway directory and provides word sources whose
secret word is known in advance.
"""

import itertools
import os
import tempfile

# Must run before wordle_engine is imported; Config reads the environment at import time.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle_logs_"))

import pytest

from wordle_engine.services.word_source import WordListSource


VOCABULARY = [
    "CRANE", "ALLOW", "LOLLY", "MANGO", "APPLE", "BRAIN",
    "CHAIR", "DANCE", "EARLY", "FIELD", "HEART", "LIGHT",
]


class ScriptedChoice:
    """Stands in for random.Random: hands out the given words in order, forever."""

    def __init__(self, *words):
        self._words = itertools.cycle(words)

    def choice(self, seq):
        word = next(self._words)
        assert word in seq
        return word


def make_source(*secrets, words=VOCABULARY):
    return WordListSource(words, word_length=5, rng=ScriptedChoice(*secrets))


@pytest.fixture
def source_for():
    """Factory fixture: source_for('CRANE') draws CRANE as every secret."""
    return make_source
