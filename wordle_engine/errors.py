"""
Game Errors

Exceptions raised by the rules engine. Guess errors carry a stable code
so the HTTP layer can report them without string matching.
"""


class GameError(Exception):
    """Base class for all errors raised by the engine."""
    code = "game_error"


class GuessError(GameError):
    """A submitted guess was rejected. The session is left unchanged."""
    code = "invalid_guess"


class GameAlreadyOver(GuessError):
    """Guess submitted after the game was won or the budget ran out."""
    code = "game_over"


class InvalidGuessShape(GuessError):
    """Guess is missing, not alphabetic, or has the wrong length."""
    code = "invalid_shape"


class UnknownWord(GuessError):
    """Guess is not an entry of the vocabulary."""
    code = "unknown_word"


class WordSourceError(GameError):
    """The vocabulary cannot supply a word."""
    code = "word_source_error"


class GameNotFound(GameError):
    """No game is registered under the requested id."""
    code = "game_not_found"
