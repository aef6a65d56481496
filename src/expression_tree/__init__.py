"""
表达式树系统 - 随机生成、打印和求值算术表达式树
"""

__version__ = "1.0.0"

from .system import ExpressionTreeSystem

__all__ = ['ExpressionTreeSystem']
