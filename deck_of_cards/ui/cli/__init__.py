"""牌组CLI用户界面模块.

这个包提供命令行界面的牌组演示程序，包括：
- CLI会话主类与click入口
- 渲染器（显示逻辑）
"""

from .cli_deck import DeckCLI, main
from .render import CLIRenderer

__all__ = [
    'DeckCLI',
    'CLIRenderer',
    'main',
]
