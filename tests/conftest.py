"""
测试配置 - pytest公共fixture

提供固定种子的随机数生成器和牌组，使洗牌结果可重现。
"""

import random

import pytest

from deck_of_cards.core import Deck


class RecordingRandom(random.Random):
    """记录randint调用并总是返回下界的随机数生成器(仅用于测试)"""

    def __init__(self):
        super().__init__(0)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return a


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(42)


@pytest.fixture
def deck(seeded_rng):
    """使用固定种子的新牌组"""
    return Deck(rng=seeded_rng)


@pytest.fixture
def recording_rng():
    """记录调用的随机数生成器"""
    return RecordingRandom()


def _deal_down_to(deck, size):
    while deck.count() > size:
        deck.deal_one_card()
    return deck


@pytest.fixture
def deal_down_to():
    """发牌直到牌组只剩size张的辅助函数"""
    return _deal_down_to
