"""
表达式树算法
包括生成、遍历、修复、打印和求值，均作用于以 ExpressionNode 为根的整棵树
"""
import logging
import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from ...interfaces import IRandomSource
from ...exceptions import StructuralInvariantError, ValidationError
from ..node.entity import ExpressionNode
from ..node.factory import NodeFactory

logger = logging.getLogger(__name__)


# ========== 遍历 ==========

def size(tree: ExpressionNode) -> int:
    """返回树中节点总数"""
    total = 1
    for child in tree.children:
        total += size(child)
    return total


def iter_with_depth(tree: ExpressionNode) -> Iterator[Tuple[ExpressionNode, int]]:
    """
    先序遍历，产出 (节点, 深度)，根节点深度为0

    使用显式栈，不受递归深度限制
    """
    stack: List[Tuple[ExpressionNode, int]] = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        yield node, level
        for child in reversed(node.children):
            stack.append((child, level + 1))


def flatten(tree: ExpressionNode) -> List[ExpressionNode]:
    """
    以先序返回树中所有节点

    每次调用都重新计算，反映树的当前形状
    """
    return [node for node, _ in iter_with_depth(tree)]


def depth(tree: ExpressionNode) -> int:
    """树的深度，单节点树为0"""
    return max(level for _, level in iter_with_depth(tree))


def pick_random_node(tree: ExpressionNode, random_source: IRandomSource) -> ExpressionNode:
    """从树中均匀随机选择一个节点（包括根节点和任何运算符节点）"""
    nodes = flatten(tree)
    index = random_source.choose_index(len(nodes))
    return nodes[index]


# ========== 生成与修复 ==========

def generate(target_size: int, factory: NodeFactory) -> ExpressionNode:
    """
    生成恰好包含 target_size 个节点的随机表达式树

    1. 用 generate_leaf_or_operator() 生成根节点
    2. 重复 target_size - 1 次：随机选择一个节点，若为数值节点先改为随机运算符，
       再挂接一个新生成的子节点
    3. 修复没有子节点的运算符节点

    Args:
        target_size: 目标节点数，必须 >= 1
        factory: 节点工厂（同时提供随机源）

    Returns:
        修复后的根节点

    Raises:
        ValidationError: target_size 不是正整数
    """
    if isinstance(target_size, bool) or not isinstance(target_size, int) or target_size < 1:
        raise ValidationError(
            message=f"目标节点数必须是正整数: {target_size!r}",
            field="target_size",
            value=target_size,
            reason="must_be_positive_int"
        )

    random_source = factory.random_source
    root = factory.generate_leaf_or_operator()

    for _ in range(target_size - 1):
        target = pick_random_node(root, random_source)

        if not target.is_operator():
            # 只有运算符节点可以接受子节点
            target.set_operator(factory.random_operator())

        target.add_child(factory.generate_leaf_or_operator())

    logger.debug(f"生成树完成: 目标节点数={target_size}")
    return repair(root, random_source)


def repair(tree: ExpressionNode, random_source: IRandomSource) -> ExpressionNode:
    """
    把没有子节点的运算符节点改为随机数值叶子

    幂等：对已修复的树再次调用不会产生变化

    Returns:
        修复后的树（原地修改）
    """
    fixed = _repair_node(tree, random_source)
    if fixed:
        logger.debug(f"修复了 {fixed} 个没有子节点的运算符节点")
    return tree


def _repair_node(node: ExpressionNode, random_source: IRandomSource) -> int:
    if node.is_leaf():
        if node.is_operator():
            node.set_value(random_source.uniform())
            return 1
        return 0

    return sum(_repair_node(child, random_source) for child in node.children)


def validate_tree(tree: ExpressionNode) -> bool:
    """
    检查整棵树满足 叶子<=>数值、内部节点<=>运算符

    Raises:
        StructuralInvariantError: 发现违反不变量的节点
    """
    for node, _ in iter_with_depth(tree):
        if node.is_leaf() and node.is_operator():
            raise StructuralInvariantError("运算符节点没有子节点", node_repr=repr(node))
        if not node.is_leaf() and not node.is_operator():
            raise StructuralInvariantError("数值节点存在子节点", node_repr=repr(node))
    return True


# ========== 求值 ==========

def evaluate(tree: ExpressionNode) -> float:
    """
    对表达式树求值

    数值叶子直接返回数值；运算符节点按顺序求值子节点后从左到右折叠，
    减法为 ((c1 - c2) - c3) - ...

    Raises:
        StructuralInvariantError: 遇到没有子节点的运算符节点
    """
    if not tree.is_operator():
        return tree.value

    if tree.is_leaf():
        raise StructuralInvariantError(
            "求值时遇到没有子节点的运算符节点，生成后是否漏掉了repair?",
            node_repr=repr(tree)
        )

    return tree.operator.fold([evaluate(child) for child in tree.children])


# ========== 打印 ==========

def format_expression(tree: ExpressionNode) -> str:
    """
    把树格式化为嵌套表达式

    数值: 3.5
    运算符: (+ 1.0 2.0)
    """
    if not tree.is_operator():
        return repr(tree.value)

    parts = [tree.operator.symbol]
    parts.extend(format_expression(child) for child in tree.children)
    return "(" + " ".join(parts) + ")"


def print_as_expression(tree: ExpressionNode, stream: Optional[TextIO] = None) -> str:
    """
    把嵌套表达式写入字符流（默认标准输出）

    Returns:
        写入的表达式文本（不含换行）
    """
    text = format_expression(tree)
    out = stream if stream is not None else sys.stdout
    out.write(text + "\n")
    return text
