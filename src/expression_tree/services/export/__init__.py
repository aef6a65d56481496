"""
导出服务
"""

from .base_exporter import DataExporter, ExportError
from .dataframe_exporter import TreeDataFrameExporter

__all__ = ['DataExporter', 'ExportError', 'TreeDataFrameExporter']
