"""
Game Configuration Constants Module

This module defines the game rules: guess budget, word length and the
vocabulary the secret words are drawn from. Values come from the
environment-based Config so a deployment can change them without code edits.
"""

import json
from typing import Dict, List, Final, Iterable

from .app_config import Config
from ..errors import WordSourceError

MAX_ATTEMPTS: Final[int] = Config.MAX_ATTEMPTS
"""
Maximum number of accepted guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = Config.WORD_LENGTH
"""Number of letters in every secret and every guess."""


def load_word_list(path: str = Config.WORD_LIST_PATH, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        path: JSON file holding an array of words
        word_length: Required length of every word

    Returns:
        List[str]: List of uppercase words

    Raises:
        WordSourceError: If the file is missing, malformed, empty or
            contains invalid words
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError as e:
        raise WordSourceError(f"Word list file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise WordSourceError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(word_list, list):
        raise WordSourceError("JSON file must contain an array of words")

    if not word_list:
        raise WordSourceError("Word list cannot be empty")

    uppercase_words = []
    for word in word_list:
        if not isinstance(word, str):
            raise WordSourceError(f"Word list entry {word!r} is not a string")
        word = word.strip()
        if len(word) != word_length:
            raise WordSourceError(
                f"Word '{word}' in {path} is not {word_length} characters long; "
                f"WORD_LIST_PATH must point at a list matching WORD_LENGTH"
            )
        if not (word.isascii() and word.isalpha()):
            raise WordSourceError(f"Word '{word}' contains non-alphabetic characters")
        uppercase_words.append(word.upper())

    return uppercase_words


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


def validate_word_list_integrity(words: Iterable[str] = WORD_LIST, word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        WordSourceError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise WordSourceError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise WordSourceError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise WordSourceError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise WordSourceError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        seen = set()
        duplicates = sorted({word for word in words if word in seen or seen.add(word)})
        raise WordSourceError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Iterable[str] = WORD_LIST) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":
    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except WordSourceError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
