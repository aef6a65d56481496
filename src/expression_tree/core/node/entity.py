"""
表达式树节点实体模块
定义表达式树节点，每个节点要么是数值，要么是作用于子节点的运算符
"""

from typing import Optional, Dict, Any, List, Union

from ...interfaces import INode
from ...exceptions import (
    NodeError, InvariantViolationError, InvalidStructuralOperationError
)
from .payload import (
    Operator, OperatorPayload, Payload, ValuePayload, make_payload
)


class ExpressionNode(INode):
    """
    表达式树节点

    每个节点包含：
    1. 载荷：ValuePayload（数值）或 OperatorPayload（运算符）
    2. 树关系：parent, children（子节点归父节点独占，不共享、无环）

    不变量：
    - 只有没有子节点的节点才能被设置为数值
    - 只有当前载荷是运算符的节点才能添加子节点
    """

    def __init__(self, payload: Union[Payload, Operator, str, float, int] = 0.0):
        """
        初始化节点

        Args:
            payload: 初始载荷，默认数值0.0；字符串/Operator视为运算符
        """
        self._payload: Payload = make_payload(payload)

        # ========== 树结构关系 ==========
        self.parent: Optional['ExpressionNode'] = None
        self._children: List['ExpressionNode'] = []

    # ========== 载荷 ==========

    @property
    def payload(self) -> Payload:
        return self._payload

    @property
    def children(self) -> List['ExpressionNode']:
        """子节点列表的副本，修改结构须通过 add_child"""
        return list(self._children)

    @property
    def value(self) -> float:
        """
        数值载荷

        Raises:
            NodeError: 节点当前是运算符节点
        """
        if not isinstance(self._payload, ValuePayload):
            raise NodeError(f"运算符节点没有数值: {self!r}", code="NOT_A_VALUE")
        return self._payload.value

    @property
    def operator(self) -> Operator:
        """
        运算符载荷

        Raises:
            NodeError: 节点当前是数值节点
        """
        if not isinstance(self._payload, OperatorPayload):
            raise NodeError(f"数值节点没有运算符: {self!r}", code="NOT_AN_OPERATOR")
        return self._payload.operator

    def set_value(self, value: float) -> None:
        """
        设置数值

        Args:
            value: 新的数值

        Raises:
            InvariantViolationError: 节点当前有子节点（父节点必须是运算符）
        """
        if not self.is_leaf():
            raise InvariantViolationError(
                operation="set_value",
                reason=f"节点有 {len(self._children)} 个子节点，只有叶子可以保存数值"
            )
        self._payload = ValuePayload(float(value))

    def set_operator(self, operator: Union[Operator, str]) -> None:
        """
        设置运算符，对当前子节点数量没有约束

        Raises:
            InvalidOperatorError: 运算符不在固定集合内
        """
        self._payload = OperatorPayload(Operator.from_symbol(operator))

    # ========== 树结构管理 ==========

    def add_child(self, child: 'ExpressionNode') -> 'ExpressionNode':
        """
        追加子节点，子节点的所有权转移给当前节点

        Returns:
            追加的子节点

        Raises:
            InvalidStructuralOperationError: 当前节点是数值节点，或子节点已有父节点/会形成环
        """
        if not self.is_operator():
            raise InvalidStructuralOperationError(
                operation="add_child",
                reason="节点必须先成为运算符才能接受子节点"
            )
        if child.parent is not None:
            raise InvalidStructuralOperationError(
                operation="add_child",
                reason="子节点已属于另一个父节点"
            )
        if child is self.get_root():
            raise InvalidStructuralOperationError(
                operation="add_child",
                reason="不能把祖先节点添加为子节点"
            )

        self._children.append(child)
        child.parent = self
        return child

    def is_leaf(self) -> bool:
        return len(self._children) == 0

    def is_operator(self) -> bool:
        return isinstance(self._payload, OperatorPayload)

    def get_root(self) -> 'ExpressionNode':
        """获取根节点"""
        root = self
        while root.parent:
            root = root.parent
        return root

    # ========== 序列化 ==========

    def to_dict(self) -> Dict[str, Any]:
        """
        序列化节点（递归包含子节点）

        Returns:
            数值节点: {'type': 'value', 'value': 1.0}
            运算符节点: {'type': 'operator', 'operator': '+', 'children': [...]}
        """
        if isinstance(self._payload, ValuePayload):
            return {'type': 'value', 'value': self._payload.value}

        return {
            'type': 'operator',
            'operator': self._payload.operator.symbol,
            'children': [child.to_dict() for child in self._children],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExpressionNode':
        """
        反序列化创建节点，通过受约束的修改方法重建，不变量同样生效

        Raises:
            NodeError: 数据格式不正确
            InvalidOperatorError: 运算符无效
        """
        node_type = data.get('type')

        if node_type == 'value':
            if data.get('children'):
                raise InvariantViolationError(
                    operation="from_dict",
                    reason="数值节点不能有子节点"
                )
            return cls(float(data['value']))

        if node_type == 'operator':
            node = cls(Operator.from_symbol(data['operator']))
            for child_data in data.get('children', []):
                node.add_child(cls.from_dict(child_data))
            return node

        raise NodeError(f"无法识别的节点类型: {node_type!r}", code="INVALID_NODE_DATA")

    # ========== 特殊方法 ==========

    def __repr__(self) -> str:
        if self.is_operator():
            return f"ExpressionNode({self._payload}, children={len(self._children)})"
        return f"ExpressionNode({self._payload})"

    def __eq__(self, other) -> bool:
        """结构相等：载荷相同且子节点逐个结构相等"""
        if not isinstance(other, ExpressionNode):
            return NotImplemented
        return self._payload == other._payload and self._children == other._children

    __hash__ = None
