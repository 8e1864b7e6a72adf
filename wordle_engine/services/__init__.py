"""
Services Package

Contains the rules engine: word source, guess evaluator, game session
and the multi-game service.
"""

from .evaluator import evaluate
from .word_source import WordSource, WordListSource
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate',
    'WordSource', 'WordListSource',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service'
]
