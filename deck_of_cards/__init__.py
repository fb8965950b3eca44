"""
Deck of Cards

A standard 52-card deck with Fisher-Yates and faro shuffles, dealing and
membership queries, plus a small command line front end.
"""

from typing import Optional

from .core import (
    Card, CardColor, Deck, DeckConfig, DeckConfigError, DeckOfCardsError,
    InvalidCardError, Rank, ShuffleAlgorithm, Suit,
)

__version__ = "0.1.0"
__author__ = "Deck of Cards Development Team"


def new_deck(config: Optional[DeckConfig] = None) -> Deck:
    """Create a new shuffled deck.

    Args:
        config: Deck configuration. The seed drives the random source and
            each configured shuffle is applied after creation.

    Returns:
        A full 52-card deck.
    """
    config = config or DeckConfig()
    deck = Deck(rng=config.create_rng())
    for algorithm in config.shuffles:
        deck.shuffle(algorithm)
    return deck


__all__ = [
    'Card', 'CardColor', 'Deck', 'DeckConfig', 'Rank', 'ShuffleAlgorithm', 'Suit',
    'DeckOfCardsError', 'InvalidCardError', 'DeckConfigError',
    'new_deck',
]
