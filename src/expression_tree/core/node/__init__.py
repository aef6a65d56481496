"""
节点模块 - 节点实体、载荷和工厂
"""

from .payload import Operator, ValuePayload, OperatorPayload, Payload
from .entity import ExpressionNode
from .factory import NodeFactory

__all__ = [
    'Operator',
    'ValuePayload',
    'OperatorPayload',
    'Payload',
    'ExpressionNode',
    'NodeFactory',
]
