"""
Game Session

Holds one secret word, the attempt count and the termination state, and
turns submitted guesses into feedback.
"""

import threading
from typing import Any, Dict, List, Optional, Tuple

from .evaluator import evaluate
from .word_source import WordSource
from ..config.game_settings import MAX_ATTEMPTS
from ..errors import GameAlreadyOver, InvalidGuessShape, UnknownWord, GuessError
from ..models.game import Feedback, LetterStatus, SessionState
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_word

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Keyboard status only moves up this ladder
_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameSession:
    """
    A single game of Wordle.

    The session is IN_PROGRESS after start() or restart() and moves to OVER
    when a guess is all correct or the last allowed guess is accepted. OVER
    rejects every guess until the next restart(). Rejected guesses never
    change the session.

    All state changes happen under a lock so one session can be shared by
    several request threads. The keyboard letter status is updated under
    the same lock as the guess that produced it.
    """

    def __init__(self, word_source: WordSource, max_attempts: int = MAX_ATTEMPTS,
                 game_id: Optional[str] = None):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.word_source = word_source
        self.game_id = game_id
        self._max_attempts = max_attempts
        self._lock = threading.Lock()

        self._secret = ""
        self._attempts = 0
        self._state = SessionState.IN_PROGRESS
        self._won = False
        self._history: List[Feedback] = []
        self._letter_status = self._fresh_letter_status()

        self.start()

    def start(self) -> None:
        """Draw a new secret and reset the attempt count."""
        secret = normalize_word(self.word_source.get_random_word())
        with self._lock:
            self._secret = secret
            self._attempts = 0
            self._state = SessionState.IN_PROGRESS
            self._won = False
            self._history = []
            self._letter_status = self._fresh_letter_status()

        game_logger.log_game_event(
            self.game_id, 'game_started',
            word_length=len(secret), max_attempts=self._max_attempts
        )

    restart = start

    def submit_guess(self, guess: Any) -> Feedback:
        """
        Evaluate a guess and advance the game.

        Args:
            guess: The word to try; case and surrounding whitespace are ignored

        Returns:
            Feedback for the guess

        Raises:
            GameAlreadyOver: If the game was already won or lost
            InvalidGuessShape: If the guess is missing, not alphabetic or has
                the wrong length
            UnknownWord: If the guess is not in the vocabulary
        """
        with self._lock:
            try:
                normalized_guess = self._validate(guess)
            except GuessError as e:
                rejection, attempts = e, self._attempts
            else:
                rejection = None
                self._attempts += 1
                feedback = evaluate(self._secret, normalized_guess)
                self._history.append(feedback)
                self._update_letter_status(feedback)
                self._transition(feedback)

                attempts, state, secret = self._attempts, self._state, self._secret

        if rejection is not None:
            game_logger.log_game_event(
                self.game_id, 'guess_rejected',
                reason=rejection.code, attempts_used=attempts
            )
            raise rejection

        game_logger.log_game_event(
            self.game_id, 'guess_accepted',
            guess=feedback.guess, pattern=feedback.pattern, attempts_used=attempts
        )
        if state is SessionState.OVER:
            game_logger.log_game_event(
                self.game_id, 'game_won' if feedback.is_correct else 'game_lost',
                attempts_used=attempts, target_word=secret
            )

        return feedback

    def _validate(self, guess: Any) -> str:
        """Return the normalized guess or raise the matching GuessError."""
        if self._state is SessionState.OVER:
            raise GameAlreadyOver("Game is already over")

        if guess is None or not isinstance(guess, str):
            raise InvalidGuessShape("Guess must be a string")

        # Length and alphabet are checked before uppercasing, which can change length ('ß' -> 'SS')
        stripped = guess.strip()

        if len(stripped) != len(self._secret):
            raise InvalidGuessShape(f"Guess must be exactly {len(self._secret)} letters")

        if not (stripped.isascii() and stripped.isalpha()):
            raise InvalidGuessShape("Guess must contain only letters A-Z")

        normalized_guess = normalize_word(stripped)

        if not self.word_source.is_valid_word(normalized_guess):
            raise UnknownWord(f"'{normalized_guess}' is not in the word list")

        return normalized_guess

    def _transition(self, feedback: Feedback) -> None:
        """Move to OVER on a win or when the guess budget is used up."""
        if feedback.is_correct:
            self._won = True
            self._state = SessionState.OVER
        elif self._attempts >= self._max_attempts:
            self._state = SessionState.OVER

    @staticmethod
    def _fresh_letter_status() -> Dict[str, str]:
        return {letter: LetterStatus.UNUSED.value for letter in ALPHABET}

    def _update_letter_status(self, feedback: Feedback) -> None:
        """Raises each guessed letter's status; a letter never moves down."""
        for letter, mark in feedback.letters():
            new_status = LetterStatus(mark.value)
            current_status = LetterStatus(self._letter_status.get(letter, LetterStatus.UNUSED.value))
            if _STATUS_RANK[new_status] > _STATUS_RANK[current_status]:
                self._letter_status[letter] = new_status.value

    def snapshot(self) -> Dict[str, Any]:
        """Consistent copy of the whole session state, read under the lock."""
        with self._lock:
            return {
                "secret": self._secret,
                "attempts_used": self._attempts,
                "max_attempts": self._max_attempts,
                "word_length": len(self._secret),
                "game_over": self._state is SessionState.OVER,
                "won": self._won,
                "history": tuple(self._history),
                "letter_status": dict(self._letter_status),
            }

    def is_finished(self) -> bool:
        return self._state is SessionState.OVER

    def is_won(self) -> bool:
        return self._won

    def get_attempts(self) -> int:
        return self._attempts

    def reveal_secret(self) -> str:
        """Return the secret word. Meant for debugging and end-of-game display."""
        return self._secret

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def history(self) -> Tuple[Feedback, ...]:
        return tuple(self._history)

    @property
    def letter_status(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._letter_status)
