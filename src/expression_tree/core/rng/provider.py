# -*- coding: utf-8 -*-
"""
随机源实现 - 基于可设种子的 random.Random
"""
import random
from typing import Optional

from ...interfaces import IRandomSource


class SeededRandomSource(IRandomSource):
    """
    可设种子的随机源

    每个实例持有独立的 random.Random，不读写全局随机状态，
    相同种子产生相同序列，便于测试复现。
    """

    def __init__(self, seed: Optional[int] = None):
        """
        初始化随机源

        Args:
            seed: 随机种子，None表示使用系统熵
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def uniform(self) -> float:
        return self._rng.random()

    def choose_index(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"选择范围必须大于0: {n}")
        return self._rng.randrange(n)

    def reseed(self, seed: Optional[int]) -> None:
        """重新设置种子"""
        self._seed = seed
        self._rng.seed(seed)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed})"
