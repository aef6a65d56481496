"""
数据导出器基类
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Any

from ...exceptions import BaseError
from ...core.node.entity import ExpressionNode


class ExportError(BaseError):
    """导出过程异常"""
    def __init__(self, message: str, path: str = None, **kwargs):
        super().__init__(
            message=f"导出失败: {message}",
            code="EXPORT_ERROR",
            details={"path": path},
            **kwargs
        )


class DataExporter(ABC):
    """数据导出器抽象基类"""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self._validate_config()

    def _validate_config(self):
        """验证配置参数"""
        pass

    @abstractmethod
    def build_rows(self, tree: ExpressionNode) -> List[Dict[str, Any]]:
        """把树转换为标准化的行记录"""
        pass

    @abstractmethod
    def to_table(self, rows: List[Dict[str, Any]]) -> Any:
        """把行记录转换为表格对象"""
        pass

    def export(self, tree: ExpressionNode) -> Any:
        """
        导出的完整流程
        1. 转换为行记录
        2. 生成表格
        """
        if not isinstance(tree, ExpressionNode):
            raise ExportError(f"不支持的对象类型: {type(tree).__name__}")

        rows = self.build_rows(tree)
        return self.to_table(rows)
