"""
Game Service

Keeps track of many game sessions by id and builds client-facing state.
"""

import threading
import uuid
from typing import Dict, Optional

from .game_session import GameSession
from .word_source import WordListSource, WordSource
from ..config.game_settings import MAX_ATTEMPTS
from ..errors import GameNotFound
from ..models.game import Feedback, GameState


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Keyboard letter status tracking per game
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self, word_source: Optional[WordSource] = None, max_attempts: int = MAX_ATTEMPTS):
        self.word_source = word_source if word_source is not None else WordListSource.from_settings()
        self.max_attempts = max_attempts
        self.games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = GameSession(self.word_source, self.max_attempts, game_id=game_id)

        with self._lock:
            self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> GameSession:
        with self._lock:
            session = self.games.get(game_id)
        if session is None:
            raise GameNotFound(f"Game '{game_id}' not found")
        return session

    def make_guess(self, game_id: str, guess) -> Feedback:
        """
        Submits a guess to a game. The session updates its own keyboard status.

        Raises:
            GameNotFound: If no game has this id
            GuessError: If the session rejects the guess
        """
        session = self.get_session(game_id)
        return session.submit_guess(guess)

    def restart_game(self, game_id: str) -> None:
        """Draws a new secret for an existing game and clears its history."""
        self.get_session(game_id).restart()

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state for a session.

        The answer is only included once the game is over.
        """
        snapshot = self.get_session(game_id).snapshot()
        history = snapshot["history"]

        return GameState(
            game_id=game_id,
            attempts_used=snapshot["attempts_used"],
            max_attempts=snapshot["max_attempts"],
            word_length=snapshot["word_length"],
            game_over=snapshot["game_over"],
            won=snapshot["won"],
            guesses=[feedback.guess for feedback in history],
            guess_results=[
                [(letter, mark.value) for letter, mark in feedback.letters()]
                for feedback in history
            ],
            letter_status=snapshot["letter_status"],
            answer=snapshot["secret"] if snapshot["game_over"] else None
        )

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def active_games_count(self) -> int:
        with self._lock:
            return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None,
                            max_attempts: int = MAX_ATTEMPTS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, max_attempts)
    return _game_service
