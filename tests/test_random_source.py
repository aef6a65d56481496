"""
测试随机源和节点工厂
"""
import pytest

from expression_tree.core.rng import SeededRandomSource
from expression_tree.core.node import NodeFactory, Operator
from expression_tree.exceptions import InvalidOperatorError, ValidationError


class TestSeededRandomSource:

    def test_same_seed_same_sequence(self):
        a = SeededRandomSource(7)
        b = SeededRandomSource(7)
        seq_a = [(a.coin_flip(), a.uniform(), a.choose_index(5)) for _ in range(50)]
        seq_b = [(b.coin_flip(), b.uniform(), b.choose_index(5)) for _ in range(50)]
        assert seq_a == seq_b

    def test_reseed_restarts_sequence(self):
        source = SeededRandomSource(3)
        first = [source.uniform() for _ in range(5)]
        source.reseed(3)
        assert [source.uniform() for _ in range(5)] == first
        assert source.seed == 3

    def test_uniform_range(self):
        source = SeededRandomSource(1)
        for _ in range(1000):
            value = source.uniform()
            assert 0.0 <= value < 1.0

    def test_choose_index_range(self):
        source = SeededRandomSource(2)
        seen = {source.choose_index(4) for _ in range(500)}
        assert seen == {0, 1, 2, 3}

    def test_choose_index_invalid(self):
        with pytest.raises(ValueError):
            SeededRandomSource(0).choose_index(0)

    def test_coin_flip_is_fair(self):
        source = SeededRandomSource(11)
        heads = sum(source.coin_flip() for _ in range(10000))
        assert 4700 < heads < 5300


class TestNodeFactory:

    def test_generate_value_node(self, scripted_random):
        factory = NodeFactory(scripted_random(coins=[True], uniforms=[0.25]))
        node = factory.generate_leaf_or_operator()
        assert not node.is_operator()
        assert node.value == 0.25
        assert node.is_leaf()

    def test_generate_operator_node(self, scripted_random):
        factory = NodeFactory(scripted_random(coins=[False], indices=[1]))
        node = factory.generate_leaf_or_operator()
        assert node.operator is Operator.SUB
        assert node.is_leaf()

    def test_random_operator_uses_operator_subset(self, scripted_random):
        source = scripted_random(indices=[0, 1])
        factory = NodeFactory(source, operators=['*', '+'])
        assert factory.random_operator() is Operator.MUL
        assert factory.random_operator() is Operator.ADD
        assert source.index_requests == [2, 2]

    def test_duplicate_operators_collapsed(self):
        factory = NodeFactory(SeededRandomSource(0), operators=['+', '+', Operator.ADD])
        assert factory.operators == [Operator.ADD]

    def test_empty_operators(self):
        with pytest.raises(ValidationError):
            NodeFactory(SeededRandomSource(0), operators=[])

    def test_unknown_operator(self):
        with pytest.raises(InvalidOperatorError):
            NodeFactory(SeededRandomSource(0), operators=['+', '/'])

    def test_generated_mix(self):
        factory = NodeFactory(SeededRandomSource(5))
        nodes = [factory.generate_leaf_or_operator() for _ in range(2000)]
        operators = [n for n in nodes if n.is_operator()]

        assert 850 < len(operators) < 1150
        assert {n.operator for n in operators} == set(Operator)
        assert all(0.0 <= n.value < 1.0 for n in nodes if not n.is_operator())
