"""
扑克牌的基础枚举定义.

包含花色、点数、颜色以及洗牌算法的枚举类型.
"""

from enum import Enum, IntEnum
from typing import List


class CardColor(Enum):
    """扑克牌颜色枚举"""
    RED = "red"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value


class Suit(Enum):
    """
    扑克牌花色枚举.

    声明顺序即标准牌序中花色的顺序: 红桃、黑桃、梅花、方块.
    """

    HEART = "heart"      # 红桃
    SPADE = "spade"      # 黑桃
    CLUB = "club"        # 梅花
    DIAMOND = "diamond"  # 方块

    def __str__(self) -> str:
        return self.value

    @property
    def color(self) -> CardColor:
        """返回花色对应的颜色"""
        if self in (Suit.HEART, Suit.DIAMOND):
            return CardColor.RED
        return CardColor.BLACK


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A最小(0)，K最大(12)，数值即点数在标准牌序中的位置.
    """

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    def __str__(self) -> str:
        return self.name.lower()


class ShuffleAlgorithm(Enum):
    """洗牌算法枚举"""
    RANDOM = "random"  # Fisher-Yates
    FARO = "faro"      # 完美交错洗牌

    def __str__(self) -> str:
        return self.value


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按声明顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
