"""
节点接口定义
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class INode(ABC):
    """节点接口 - 定义表达式树节点的基本行为"""

    @property
    @abstractmethod
    def payload(self) -> Any:
        """节点载荷（数值或运算符）"""
        pass

    @property
    @abstractmethod
    def children(self) -> List['INode']:
        """子节点列表（按顺序）"""
        pass

    @abstractmethod
    def set_value(self, value: float) -> None:
        """
        设置数值载荷

        Args:
            value: 数值

        Raises:
            InvariantViolationError: 节点当前有子节点
        """
        pass

    @abstractmethod
    def set_operator(self, operator: Any) -> None:
        """
        设置运算符载荷

        Raises:
            InvalidOperatorError: 运算符不在固定集合内
        """
        pass

    @abstractmethod
    def add_child(self, child: 'INode') -> 'INode':
        """
        追加子节点，子节点归父节点所有

        Raises:
            InvalidStructuralOperationError: 父节点当前是数值节点
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """没有子节点即为叶子"""
        pass

    @abstractmethod
    def is_operator(self) -> bool:
        """载荷是否为运算符（与子节点数量无关）"""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        pass
