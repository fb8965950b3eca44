"""牌组CLI渲染模块.

这个模块负责把卡牌和牌组渲染为命令行显示文本，
实现显示逻辑与牌组逻辑的分离。
"""

from typing import Optional

from deck_of_cards.core import Card, CardColor, Deck

COLOR_STYLES = {
    CardColor.RED: "red",
    CardColor.BLACK: "white",
}


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_card(card: Card, position: Optional[int] = None) -> str:
        """渲染单张卡牌.

        Args:
            card: 要渲染的卡牌
            position: 可选的1起始位置编号

        Returns:
            形如"3: Ace of Hearts (red)"的字符串
        """
        text = f"{card.description} ({card.color})"
        if position is not None:
            text = f"{position}: {text}"
        return text

    @staticmethod
    def render_dealt(card: Optional[Card], remaining: int) -> str:
        """渲染一次发牌结果."""
        if card is None:
            return "Deck is empty, no card dealt."
        return f"Dealt {CLIRenderer.render_card(card)}, {remaining} cards remaining."

    @staticmethod
    def render_contains(card: Card, found: bool) -> str:
        """渲染成员查询结果."""
        verdict = "is in the deck" if found else "is not in the deck"
        return f"{card.description} {verdict}."

    @staticmethod
    def render_summary(deck: Deck) -> str:
        """渲染牌组概要: 剩余张数以及红黑牌数量."""
        red = sum(1 for card in deck if card.color is CardColor.RED)
        black = deck.count() - red
        return f"{deck.count()} cards ({red} red, {black} black)"
