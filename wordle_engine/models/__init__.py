"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import Feedback, GameState, LetterMark, LetterStatus, SessionState

__all__ = ['Feedback', 'GameState', 'LetterMark', 'LetterStatus', 'SessionState']
