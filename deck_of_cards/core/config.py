"""
牌组配置相关类的实现.

包含随机种子、日志级别和创建后附加洗牌等设置，支持从环境变量读取.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .enums import ShuffleAlgorithm
from .exceptions import DeckConfigError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 环境变量名
ENV_SEED = "DECK_SEED"
ENV_LOG_LEVEL = "DECK_LOG_LEVEL"
ENV_DEBUG = "DECK_DEBUG"


@dataclass
class DeckConfig:
    """
    牌组配置类.

    包含创建牌组和运行命令行时所需的设置参数.
    """
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌
    log_level: str = "INFO"             # 日志级别
    debug_mode: bool = False            # 调试模式，强制DEBUG日志
    shuffles: List[ShuffleAlgorithm] = field(default_factory=list)  # 创建后依次执行的洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        self._validate_seed()
        self._validate_log_level()
        self._validate_shuffles()

    def _validate_seed(self):
        if self.random_seed is not None and (
                isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)):
            raise DeckConfigError(f"random_seed must be an int, got {self.random_seed!r}")

    def _validate_log_level(self):
        if not isinstance(self.log_level, str):
            raise DeckConfigError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise DeckConfigError(
                f"Invalid log level {self.log_level!r}, expected one of {', '.join(VALID_LOG_LEVELS)}"
            )

    def _validate_shuffles(self):
        normalized = []
        for algorithm in self.shuffles:
            try:
                normalized.append(ShuffleAlgorithm(algorithm))
            except ValueError:
                raise DeckConfigError(f"Unknown shuffle algorithm: {algorithm!r}") from None
        self.shuffles = normalized

    @property
    def effective_log_level(self) -> int:
        """返回实际生效的logging数值级别"""
        if self.debug_mode:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    def create_rng(self) -> random.Random:
        """根据随机种子创建随机数生成器"""
        return random.Random(self.random_seed)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DeckConfig':
        """
        从环境变量创建配置.

        Args:
            environ: 环境变量映射，默认为os.environ

        Returns:
            DeckConfig: 读取DECK_SEED、DECK_LOG_LEVEL、DECK_DEBUG后的配置

        Raises:
            DeckConfigError: 当DECK_SEED不是整数或日志级别无效时
        """
        if environ is None:
            environ = os.environ

        seed = None
        raw_seed = environ.get(ENV_SEED, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise DeckConfigError(f"{ENV_SEED} must be an integer, got {raw_seed!r}") from None

        debug = environ.get(ENV_DEBUG, "").strip().lower() in ("1", "true", "yes")

        return cls(
            random_seed=seed,
            log_level=environ.get(ENV_LOG_LEVEL, "INFO"),
            debug_mode=debug,
        )
