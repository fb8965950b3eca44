"""
CLIRenderer的单元测试。
"""

import random

import pytest

from deck_of_cards.core import Card, Deck, Rank, Suit
from deck_of_cards.ui.cli.render import CLIRenderer

pytestmark = pytest.mark.unit


class TestCLIRenderer:
    """测试渲染函数。"""

    def test_render_card(self):
        card = Card(Suit.DIAMOND, Rank.NINE)
        assert CLIRenderer.render_card(card) == "Nine of Diamonds (red)"
        assert CLIRenderer.render_card(card, position=3) == "3: Nine of Diamonds (red)"

    def test_render_dealt(self):
        card = Card(Suit.SPADE, Rank.ACE)
        assert CLIRenderer.render_dealt(card, 51) == "Dealt Ace of Spades (black), 51 cards remaining."
        assert CLIRenderer.render_dealt(None, 0) == "Deck is empty, no card dealt."

    def test_render_contains(self):
        card = Card(Suit.CLUB, Rank.KING)
        assert CLIRenderer.render_contains(card, True) == "King of Clubs is in the deck."
        assert CLIRenderer.render_contains(card, False) == "King of Clubs is not in the deck."

    def test_render_summary(self):
        deck = Deck(rng=random.Random(0))
        assert CLIRenderer.render_summary(deck) == "52 cards (26 red, 26 black)"
