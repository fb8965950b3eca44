"""
牌组异常定义.

发空牌组不是错误(返回None)，这里只覆盖非法输入和非法配置.
"""


class DeckOfCardsError(Exception):
    """牌组基础异常类"""
    pass


class InvalidCardError(DeckOfCardsError, TypeError, ValueError):
    """无效卡牌异常(花色/点数类型错误或描述字符串无法解析)"""
    pass


class DeckConfigError(DeckOfCardsError, ValueError):
    """牌组配置错误异常"""
    pass
