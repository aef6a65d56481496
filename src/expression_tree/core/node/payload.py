"""
节点载荷 - 数值与运算符的标签联合
"""
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, List, Union

from ...exceptions import InvalidOperatorError


class Operator(Enum):
    """固定运算符集合，每个运算符对任意多个操作数做从左到右的折叠"""

    ADD = "+"
    SUB = "-"
    MUL = "*"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def symbols(cls) -> List[str]:
        """所有合法运算符符号"""
        return [op.value for op in cls]

    @classmethod
    def from_symbol(cls, symbol: Union[str, 'Operator']) -> 'Operator':
        """
        根据符号获取运算符

        Args:
            symbol: 运算符符号（如 '+'）或Operator本身

        Returns:
            Operator枚举值

        Raises:
            InvalidOperatorError: 符号不在固定集合内
        """
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperatorError(symbol, valid_operators=cls.symbols())

    def fold(self, values: Iterable[float]) -> float:
        """
        从左到右折叠操作数

        减法对顺序敏感: [10, 3, 2] -> (10 - 3) - 2 = 5

        Raises:
            TypeError: 操作数为空
        """
        return reduce(_BINARY_OPS[self], values)

    def __str__(self) -> str:
        return self.value


_BINARY_OPS = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
}


@dataclass(frozen=True)
class ValuePayload:
    """数值载荷"""
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class OperatorPayload:
    """运算符载荷"""
    operator: Operator

    def __str__(self) -> str:
        return self.operator.symbol


Payload = Union[ValuePayload, OperatorPayload]


def make_payload(raw: Union[Payload, Operator, str, float, int]) -> Payload:
    """
    把原始输入转换为载荷

    字符串和Operator视为运算符，数字视为数值；bool 不被接受。

    Raises:
        InvalidOperatorError: 字符串不是合法运算符
        TypeError: 无法识别的类型
    """
    if isinstance(raw, (ValuePayload, OperatorPayload)):
        return raw
    if isinstance(raw, (Operator, str)):
        return OperatorPayload(Operator.from_symbol(raw))
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return ValuePayload(float(raw))
    raise TypeError(f"无法识别的节点载荷类型: {type(raw).__name__}")
