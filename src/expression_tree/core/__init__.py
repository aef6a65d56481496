"""
核心模块包
包含节点、随机源和树算法的核心实现
"""

# 导入节点模块
from .node import ExpressionNode, NodeFactory, Operator

# 导入随机源模块
from .rng import SeededRandomSource

__all__ = [
    # 节点模块
    'ExpressionNode',
    'NodeFactory',
    'Operator',

    # 随机源模块
    'SeededRandomSource',
]
