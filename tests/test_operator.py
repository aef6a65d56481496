"""
测试运算符折叠
"""
import pytest

from expression_tree.core.node.payload import (
    Operator, OperatorPayload, ValuePayload, make_payload
)
from expression_tree.exceptions import InvalidOperatorError


class TestOperator:

    def test_symbols(self):
        assert Operator.symbols() == ['+', '-', '*']

    @pytest.mark.parametrize("symbol,expected", [
        ('+', Operator.ADD),
        ('-', Operator.SUB),
        ('*', Operator.MUL),
    ])
    def test_from_symbol(self, symbol, expected):
        assert Operator.from_symbol(symbol) is expected

    def test_from_symbol_passthrough(self):
        assert Operator.from_symbol(Operator.SUB) is Operator.SUB

    @pytest.mark.parametrize("symbol", ['/', 'x', '', '++', None, 1])
    def test_from_symbol_invalid(self, symbol):
        with pytest.raises(InvalidOperatorError) as exc_info:
            Operator.from_symbol(symbol)
        assert exc_info.value.details["valid_operators"] == ['+', '-', '*']

    def test_fold_add(self):
        assert Operator.ADD.fold([1.0, 5.0, 10.0]) == 16.0

    def test_fold_mul(self):
        assert Operator.MUL.fold([2.0, 3.0, 4.0]) == 24.0

    def test_fold_sub_is_left_associative(self):
        # (10 - 3) - 2，而不是 10 - (3 - 2)
        assert Operator.SUB.fold([10.0, 3.0, 2.0]) == 5.0

    def test_fold_single_operand(self):
        assert Operator.SUB.fold([7.0]) == 7.0

    def test_fold_empty_raises(self):
        with pytest.raises(TypeError):
            Operator.ADD.fold([])


class TestPayload:

    def test_make_payload(self):
        assert make_payload(1) == ValuePayload(1.0)
        assert make_payload('*') == OperatorPayload(Operator.MUL)
        assert make_payload(Operator.ADD) == OperatorPayload(Operator.ADD)

    def test_payload_is_immutable(self):
        payload = ValuePayload(1.0)
        with pytest.raises(AttributeError):
            payload.value = 2.0

    def test_str(self):
        assert str(ValuePayload(1.0)) == "1.0"
        assert str(OperatorPayload(Operator.SUB)) == "-"
