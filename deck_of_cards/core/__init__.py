"""
Core deck model.

This package contains the card value types, the deck itself, configuration
and the exception hierarchy.
"""

from .enums import Suit, Rank, CardColor, ShuffleAlgorithm, get_all_suits, get_all_ranks
from .cards import Card, Deck
from .config import DeckConfig
from .exceptions import DeckOfCardsError, InvalidCardError, DeckConfigError
from .logging_setup import setup_logging

__all__ = [
    # Enums
    'Suit', 'Rank', 'CardColor', 'ShuffleAlgorithm',

    # Core classes
    'Card', 'Deck',

    # Configuration
    'DeckConfig', 'setup_logging',

    # Exceptions
    'DeckOfCardsError', 'InvalidCardError', 'DeckConfigError',

    # Utility functions
    'get_all_suits', 'get_all_ranks',
]
