"""
表达式树表格导出器
把树按先序展开为 pandas DataFrame，每行一个节点，可保存为CSV或Excel
"""
import math
from pathlib import Path
from typing import Dict, List, Any, Union

import pandas as pd

from ...core.node.entity import ExpressionNode
from ...core.tree.algorithms import iter_with_depth
from .base_exporter import DataExporter, ExportError


class TreeDataFrameExporter(DataExporter):
    """
    表达式树表格导出器

    输出列：
    position, parent_position, depth, kind, operator, value, n_children, subtree_value
    """

    COLUMNS = [
        'position', 'parent_position', 'depth', 'kind',
        'operator', 'value', 'n_children', 'subtree_value'
    ]

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.include_subtree_values = self.config.get('include_subtree_values', True)
        self.format = self.config.get('format', 'csv')

        # 统计信息
        self.stats = {
            'trees_exported': 0,
            'rows_exported': 0,
            'files_written': 0
        }

    def _validate_config(self):
        fmt = self.config.get('format', 'csv')
        if fmt not in ('csv', 'xlsx'):
            raise ExportError(f"不支持的导出格式: {fmt}")

    # ============ 抽象方法实现 ============

    def build_rows(self, tree: ExpressionNode) -> List[Dict[str, Any]]:
        """按先序生成节点行记录"""
        subtree_values = _subtree_values(tree) if self.include_subtree_values else {}

        positions: Dict[int, int] = {}
        rows = []
        for position, (node, level) in enumerate(iter_with_depth(tree)):
            positions[id(node)] = position
            parent_position = positions.get(id(node.parent)) if node is not tree else None

            rows.append({
                'position': position,
                'parent_position': parent_position,
                'depth': level,
                'kind': 'operator' if node.is_operator() else 'value',
                'operator': node.operator.symbol if node.is_operator() else None,
                'value': None if node.is_operator() else node.value,
                'n_children': len(node.children),
                'subtree_value': subtree_values.get(id(node), math.nan),
            })

        return rows

    def to_table(self, rows: List[Dict[str, Any]]) -> pd.DataFrame:
        df = pd.DataFrame(rows, columns=self.COLUMNS)
        df['parent_position'] = pd.array([row['parent_position'] for row in rows], dtype='Int64')

        self.stats['trees_exported'] += 1
        self.stats['rows_exported'] += len(df)
        return df

    # ============ 文件输出 ============

    def save(self, df: pd.DataFrame, file_path: Union[str, Path]) -> Path:
        """
        保存表格，按文件后缀选择格式；没有后缀时使用配置的格式并补上后缀

        Returns:
            实际写入的文件路径

        Raises:
            ExportError: 后缀不支持或写入失败
        """
        path = Path(file_path)
        if not path.suffix:
            path = path.with_suffix(f".{self.format}")
        suffix = path.suffix.lower()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if suffix == '.csv':
                df.to_csv(path, index=False)
            elif suffix == '.xlsx':
                df.to_excel(path, index=False, engine='openpyxl')
            else:
                raise ExportError(f"不支持的文件后缀: {suffix}", path=str(path))
        except ExportError:
            raise
        except OSError as e:
            raise ExportError(str(e), path=str(path))

        self.stats['files_written'] += 1
        return path

    def export_to_file(self, tree: ExpressionNode, file_path: Union[str, Path]) -> Path:
        """导出并保存"""
        return self.save(self.export(tree), file_path)


def _subtree_values(tree: ExpressionNode) -> Dict[int, float]:
    """
    计算每个子树的值

    没有子节点的运算符节点及其祖先记为NaN，未修复的树也能导出
    """
    values: Dict[int, float] = {}

    def visit(node: ExpressionNode) -> float:
        if not node.is_operator():
            result = node.value
        elif node.is_leaf():
            result = math.nan
        else:
            result = node.operator.fold([visit(child) for child in node.children])
        values[id(node)] = result
        return result

    visit(tree)
    return values
