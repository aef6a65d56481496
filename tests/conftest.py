"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from expression_tree.interfaces import IRandomSource


class ScriptedRandomSource(IRandomSource):
    """按预设脚本返回结果的随机源，用于构造确定的生成过程"""

    def __init__(self, coins=(), uniforms=(), indices=()):
        self.coins = list(coins)
        self.uniforms = list(uniforms)
        self.indices = list(indices)
        self.index_requests = []

    def coin_flip(self) -> bool:
        return self.coins.pop(0)

    def uniform(self) -> float:
        return self.uniforms.pop(0)

    def choose_index(self, n: int) -> int:
        self.index_requests.append(n)
        index = self.indices.pop(0)
        assert 0 <= index < n, f"脚本下标越界: {index} 不在 [0, {n})"
        return index

    def exhausted(self) -> bool:
        return not (self.coins or self.uniforms or self.indices)


@pytest.fixture
def scripted_random():
    """返回构造 ScriptedRandomSource 的函数"""
    return ScriptedRandomSource
