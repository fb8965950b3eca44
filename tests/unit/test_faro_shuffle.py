"""
faro洗牌的单元测试。

逐个小牌组尺寸验证交错后的顺序，包括奇数尺寸时最后一张被截断到末位的情况。
"""

import random

import pytest

from deck_of_cards.core.cards import Deck

pytestmark = pytest.mark.unit


def expected_faro(cards):
    """按索引公式计算faro洗牌结果"""
    result = list(cards)
    highest = len(cards) - 1
    midpoint = highest // 2 + 1
    for i in range(midpoint):
        result[min(2 * i + 1, highest)] = cards[i]
    for i in range(midpoint, len(cards)):
        result[min(2 * (i - midpoint), highest)] = cards[i]
    return tuple(result)


class TestFaroShuffle:
    """测试faro洗牌。"""

    def setup_method(self):
        self.deck = Deck(rng=random.Random(1234))

    def _shrink(self, size):
        while self.deck.count() > size:
            self.deck.deal_one_card()
        return self.deck.cards

    def test_single_card_is_noop(self):
        before = self._shrink(1)
        self.deck.shuffle_faro()
        assert self.deck.cards == before
        assert self.deck.count() == 1

    def test_empty_deck_is_noop(self):
        self._shrink(0)
        self.deck.shuffle_faro()
        assert self.deck.count() == 0

    def test_two_cards_swap(self):
        c0, c1 = self._shrink(2)
        self.deck.shuffle_faro()
        assert self.deck.cards == (c1, c0)

    def test_three_cards(self):
        # h=2, m=2: 0->1, 1->2(截断), 2->0
        c0, c1, c2 = self._shrink(3)
        self.deck.shuffle_faro()
        assert self.deck.cards == (c2, c0, c1)

    def test_four_cards(self):
        # h=3, m=2: 0->1, 1->3, 2->0, 3->2
        c0, c1, c2, c3 = self._shrink(4)
        self.deck.shuffle_faro()
        assert self.deck.cards == (c2, c0, c3, c1)

    def test_five_cards(self):
        # h=4, m=3: 0->1, 1->3, 2->4(截断), 3->0, 4->2
        c0, c1, c2, c3, c4 = self._shrink(5)
        self.deck.shuffle_faro()
        assert self.deck.cards == (c3, c0, c4, c1, c2)

    @pytest.mark.parametrize("size", [1, 2, 3, 4])
    def test_small_decks_keep_cards_distinct(self, size):
        before = self._shrink(size)
        self.deck.shuffle_faro()
        assert not self.deck.contains_duplicates()
        assert sorted(map(repr, self.deck.cards)) == sorted(map(repr, before))

    def test_full_deck_interleave(self):
        before = self.deck.cards
        self.deck.shuffle_faro()
        after = self.deck.cards

        # 下半部分的第一张到最前，上半部分的第一张紧随其后
        assert after[0] == before[26]
        assert after[1] == before[0]
        assert after[-1] == before[25]
        assert after == expected_faro(before)
        assert not self.deck.contains_duplicates()

    @pytest.mark.parametrize("size", range(2, 53))
    def test_matches_index_formula(self, size):
        before = self._shrink(size)
        self.deck.shuffle_faro()
        assert self.deck.cards == expected_faro(before)
        assert set(self.deck.cards) == set(before)

    def test_in_shuffle_cycle_length(self):
        """下半部分在前的交错(in-shuffle)，52张牌做52次才复原，8次不够。"""
        before = self.deck.cards
        for _ in range(8):
            self.deck.shuffle_faro()
        assert self.deck.cards != before
        for _ in range(44):
            self.deck.shuffle_faro()
        assert self.deck.cards == before

    def test_repeated_shuffles_after_deals(self):
        self.deck.shuffle_faro()
        assert not self.deck.contains_duplicates()

        self.deck.deal_one_card()
        self.deck.shuffle_faro()
        assert not self.deck.contains_duplicates()

        for _ in range(49):
            self.deck.deal_one_card()
        self.deck.shuffle_faro()
        assert self.deck.count() == 2
        assert not self.deck.contains_duplicates()
