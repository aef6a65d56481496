"""
接口定义包
"""

from .inode import INode
from .irandom import IRandomSource

__all__ = [
    'INode',
    'IRandomSource',
]
