"""
树算法模块
"""

from .algorithms import (
    size, flatten, depth, iter_with_depth, pick_random_node,
    generate, repair, validate_tree, evaluate,
    format_expression, print_as_expression,
)

__all__ = [
    'size',
    'flatten',
    'depth',
    'iter_with_depth',
    'pick_random_node',
    'generate',
    'repair',
    'validate_tree',
    'evaluate',
    'format_expression',
    'print_as_expression',
]
