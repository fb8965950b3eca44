"""
扑克牌相关的核心数据结构.

包含Card和Deck类，提供标准52张牌的创建、两种洗牌算法、发牌和成员查询.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .enums import CardColor, Rank, ShuffleAlgorithm, Suit, get_all_ranks, get_all_suits
from .exceptions import DeckConfigError, InvalidCardError


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含花色和点数. 相等性基于花色和点数，颜色由花色推导.

    Examples:
        >>> card = Card(Suit.HEART, Rank.ACE)
        >>> str(card)
        'Ace of Hearts'
        >>> card.color
        <CardColor.RED: 'red'>
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            InvalidCardError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"suit must be a Suit, got {type(self.suit).__name__}")
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"rank must be a Rank, got {type(self.rank).__name__}")

    @property
    def color(self) -> CardColor:
        """红桃和方块为红色，梅花和黑桃为黑色"""
        return self.suit.color

    @property
    def description(self) -> str:
        """
        返回卡牌的可读描述.

        Returns:
            str: 形如"Ace of Hearts"的字符串，花色以复数形式结尾
        """
        return f"{self.rank.name.capitalize()} of {self.suit.value.capitalize()}s"

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @classmethod
    def from_description(cls, text: str) -> 'Card':
        """
        从描述字符串创建卡牌对象.

        Args:
            text: 形如"Ace of Hearts"的字符串，大小写不敏感，花色结尾的"s"可省略

        Returns:
            Card: 对应的卡牌对象

        Raises:
            InvalidCardError: 当字符串格式无效时
        """
        if not isinstance(text, str):
            raise InvalidCardError(f"card description must be a string, got {type(text).__name__}")

        parts = text.strip().lower().split()
        if len(parts) != 3 or parts[1] != "of":
            raise InvalidCardError(f"malformed card description: {text!r}")

        rank_str, _, suit_str = parts
        rank_map = {rank.name.lower(): rank for rank in Rank}
        suit_map = {suit.value: suit for suit in Suit}
        suit_map.update({f"{suit.value}s": suit for suit in Suit})

        if rank_str not in rank_map:
            raise InvalidCardError(f"unknown rank: {rank_str!r}")
        if suit_str not in suit_map:
            raise InvalidCardError(f"unknown suit: {suit_str!r}")

        return cls(suit_map[suit_str], rank_map[rank_str])


class Deck:
    """
    表示一副扑克牌.

    牌组创建时即为洗好的完整52张牌，只会通过发牌变小，reset()可随时恢复.
    牌组头部(索引0)为发牌位置. 随机源可注入以支持确定性测试.

    牌组不做内部加锁，多线程共享时由调用方负责同步.

    Examples:
        >>> deck = Deck(rng=random.Random(42))
        >>> deck.count()
        52
        >>> card = deck.deal_one_card()
        >>> deck.contains(card)
        False
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于Fisher-Yates洗牌. 为None时使用新的random.Random()
            logger: 日志记录器，为None时使用模块日志记录器
        """
        self._rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self._cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """重置为标准顺序的完整52张牌(花色在外层，点数在内层)，然后随机洗牌."""
        self._cards = [
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        self.logger.debug("Deck reset to %d cards", len(self._cards))
        self.shuffle_random()

    def shuffle_random(self) -> None:
        """
        Fisher-Yates洗牌.

        从最后一个位置向前，每个位置i与[0, i]中均匀随机选出的位置j交换.
        """
        for i in range(len(self._cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        self.logger.debug("Random shuffle applied to %d cards", len(self._cards))

    def shuffle_faro(self) -> None:
        """
        完美交错(faro)洗牌.

        上半部分[0, m)的第i张移到min(2i+1, h)，下半部分[m, n)的第i张移到
        min(2(i-m), h)，其中h为最大索引，m = h // 2 + 1.

        越界位置被截断到h，先写上半部分再写下半部分，冲突时后写入者生效.
        这是保留下来的已知行为，改动会改变洗牌结果.
        """
        if len(self._cards) <= 1:
            return

        source = list(self._cards)
        highest_index = len(source) - 1
        midpoint = highest_index // 2 + 1

        for i in range(midpoint):
            self._cards[min(2 * i + 1, highest_index)] = source[i]
        for i in range(midpoint, highest_index + 1):
            self._cards[min(2 * (i - midpoint), highest_index)] = source[i]

        self.logger.debug("Faro shuffle applied to %d cards (midpoint=%d)",
                          len(self._cards), midpoint)

    def shuffle(self, algorithm: Union[ShuffleAlgorithm, str] = ShuffleAlgorithm.RANDOM) -> None:
        """
        按指定算法洗牌.

        Args:
            algorithm: ShuffleAlgorithm或其字符串值("random"/"faro")

        Raises:
            DeckConfigError: 当算法名称未知时
        """
        try:
            algorithm = ShuffleAlgorithm(algorithm)
        except ValueError:
            raise DeckConfigError(f"Unknown shuffle algorithm: {algorithm!r}") from None

        if algorithm is ShuffleAlgorithm.FARO:
            self.shuffle_faro()
        else:
            self.shuffle_random()

    def deal_one_card(self) -> Optional[Card]:
        """
        从牌组头部发一张牌.

        Returns:
            Optional[Card]: 发出的牌，牌组为空时返回None
        """
        if not self._cards:
            self.logger.debug("Deal requested from an empty deck")
            return None

        card = self._cards.pop(0)
        self.logger.debug("Dealt %s, %d cards remaining", card, len(self._cards))
        return card

    def count(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    def contains(self, card: Card) -> bool:
        """检查牌组中是否有与card相同的牌"""
        for c in self._cards:
            if c == card:
                return True
        return False

    def contains_duplicates(self) -> bool:
        """检查牌组中是否有两个位置放着相同的牌"""
        for index, card in enumerate(self._cards):
            for other in self._cards[index + 1:]:
                if card == other:
                    return True
        return False

    def describe(self) -> str:
        """
        返回牌组的可读描述.

        Returns:
            str: 如"Deck of 2 cards. Order of cards:  1: Ace of Hearts, 2: Two of Clubs."
        """
        desc = f"Deck of {self.count()} cards."
        if self._cards:
            desc += " Order of cards: "
            last_index = len(self._cards) - 1
            for index, card in enumerate(self._cards):
                desc += f" {index + 1}: {card}"
                desc += "," if index < last_index else "."
        return desc

    def print_description(self, echo: Callable[[str], None] = print) -> None:
        """输出牌组描述"""
        echo(self.describe())

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前牌序的只读快照，索引0为下一张要发的牌"""
        return tuple(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self.contains(card)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Deck(count={len(self._cards)})"
