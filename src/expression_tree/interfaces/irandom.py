"""
随机源接口
"""
from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """随机源接口 - 表达式树生成只依赖这三个原语"""

    @abstractmethod
    def coin_flip(self) -> bool:
        """
        均匀的二选一

        Returns:
            True 或 False，概率各1/2
        """
        pass

    @abstractmethod
    def uniform(self) -> float:
        """
        [0, 1) 区间内的均匀浮点数
        """
        pass

    @abstractmethod
    def choose_index(self, n: int) -> int:
        """
        在 [0, n) 中均匀选择一个下标

        Args:
            n: 集合大小，必须大于0

        Raises:
            ValueError: n 小于 1
        """
        pass
