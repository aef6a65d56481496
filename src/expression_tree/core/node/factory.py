"""
节点工厂 - 创建随机节点
"""
from typing import Iterable, List, Optional, Union

from ...interfaces import IRandomSource
from ...exceptions import ValidationError
from .entity import ExpressionNode
from .payload import Operator


class NodeFactory:
    """节点工厂，负责创建单个未挂接的节点"""

    def __init__(
        self,
        random_source: IRandomSource,
        operators: Optional[Iterable[Union[Operator, str]]] = None
    ):
        """
        初始化节点工厂

        Args:
            random_source: 随机源
            operators: 可选运算符子集，默认使用全部运算符

        Raises:
            InvalidOperatorError: 包含未知运算符
            ValidationError: 运算符集合为空
        """
        self._random = random_source

        if operators is None:
            self._operators: List[Operator] = list(Operator)
        else:
            self._operators = []
            for op in operators:
                op = Operator.from_symbol(op)
                if op not in self._operators:
                    self._operators.append(op)

        if not self._operators:
            raise ValidationError(
                message="运算符集合不能为空",
                field="operators",
                reason="empty"
            )

    @property
    def random_source(self) -> IRandomSource:
        return self._random

    @property
    def operators(self) -> List[Operator]:
        return list(self._operators)

    def random_value(self) -> float:
        """[0, 1) 内的随机数值"""
        return self._random.uniform()

    def random_operator(self) -> Operator:
        """从运算符集合中均匀选择"""
        index = self._random.choose_index(len(self._operators))
        return self._operators[index]

    def create_value_node(self, value: float) -> ExpressionNode:
        """创建数值节点"""
        return ExpressionNode(float(value))

    def create_operator_node(self, operator: Union[Operator, str]) -> ExpressionNode:
        """创建没有子节点的运算符节点"""
        return ExpressionNode(Operator.from_symbol(operator))

    def generate_leaf_or_operator(self) -> ExpressionNode:
        """
        随机生成一个节点

        1/2 概率生成数值节点（[0, 1) 均匀浮点数），
        否则生成没有子节点的运算符节点。
        """
        if self._random.coin_flip():
            return self.create_value_node(self.random_value())
        return self.create_operator_node(self.random_operator())
