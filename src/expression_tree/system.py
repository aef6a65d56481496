"""
表达式树系统主入口
集成节点模块、随机源、树算法和导出服务，提供完整的管理接口
"""

import logging
from typing import Dict, List, Optional, Any, TextIO
from datetime import datetime
from pathlib import Path

from .exceptions import TreeNotFoundError, ValidationError
from .config.settings import SystemSettings
from .config.validator import ConfigValidator

from .interfaces import IRandomSource
from .core.node import ExpressionNode, NodeFactory
from .core.rng import SeededRandomSource
from .core.tree import algorithms
from .services.export import TreeDataFrameExporter

PACKAGE_LOGGER = "expression_tree"


class ExpressionTreeSystem:
    """
    表达式树系统主类
    管理随机生成的表达式树，提供求值、打印和导出接口
    """

    def __init__(
            self,
            config: Optional[Dict[str, Any]] = None,
            random_source: Optional[IRandomSource] = None
    ):
        """
        初始化系统

        Args:
            config: 系统配置字典
            random_source: 随机源（默认使用按配置种子创建的 SeededRandomSource）
        """
        # 加载配置
        self.validator = ConfigValidator()
        if config:
            self.validator.validate_system_config(config)
        self.settings = SystemSettings.from_dict(config) if config else SystemSettings()

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        # 核心组件（延迟初始化）
        self._random_source: Optional[IRandomSource] = random_source
        self._node_factory: Optional[NodeFactory] = None
        self._exporter: Optional[TreeDataFrameExporter] = None

        # 数据容器
        self._trees: Dict[str, ExpressionNode] = {}  # tree_id -> root
        self._tree_metadata: Dict[str, Dict[str, Any]] = {}

        # 系统状态
        self._initialized = False
        self._start_time = datetime.now()

        self.logger.info(f"{self.settings.system_name}初始化完成")

    def _setup_logging(self):
        """配置日志系统"""
        level = getattr(logging, self.settings.log_level)
        logging.basicConfig(
            level=level,
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

        # 日志文件挂在包级logger上，同一文件只挂一个handler
        self._file_handler: Optional[logging.FileHandler] = None
        if not self.settings.log_file:
            return

        log_path = Path(self.settings.log_file).resolve()
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in package_logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_path):
                return

        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(self.settings.log_format))
        package_logger.addHandler(handler)
        if package_logger.getEffectiveLevel() > level:
            package_logger.setLevel(level)
        self._file_handler = handler

    def close(self) -> None:
        """关闭本系统创建的日志文件handler"""
        if self._file_handler is None:
            return
        logging.getLogger(PACKAGE_LOGGER).removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    def initialize(self) -> 'ExpressionTreeSystem':
        """初始化系统组件"""
        if self._initialized:
            return self

        try:
            # 初始化随机源
            if self._random_source is None:
                self._random_source = SeededRandomSource(self.settings.seed)
            self.logger.debug(f"随机源初始化完成: {self._random_source!r}")

            # 初始化节点工厂
            self._node_factory = NodeFactory(self._random_source, self.settings.operators)
            self.logger.debug(f"节点工厂初始化完成: 运算符={self.settings.operators}")

            # 初始化导出器
            self._exporter = TreeDataFrameExporter({"format": self.settings.export_format})

            self._initialized = True
            self.logger.info("系统组件初始化完成")

        except Exception as e:
            self.logger.error(f"系统初始化失败: {e}")
            raise

        return self

    # ========== 树管理 ==========

    def create_tree(self, tree_id: str, size: Optional[int] = None) -> Dict[str, Any]:
        """
        随机生成一棵表达式树并登记

        Args:
            tree_id: 树ID（唯一标识）
            size: 节点数，默认使用配置中的 default_tree_size

        Returns:
            创建结果
        """
        if not self._initialized:
            self.initialize()

        if tree_id in self._trees:
            raise ValidationError(
                message=f"树已存在: {tree_id}",
                field="tree_id",
                value=tree_id,
                reason="duplicate"
            )

        target_size = self.settings.default_tree_size if size is None else size
        self.validator.validate_tree_size(target_size, max_size=self.settings.max_tree_size)

        try:
            root = algorithms.generate(target_size, self._node_factory)

            self._trees[tree_id] = root
            self._tree_metadata[tree_id] = {
                "id": tree_id,
                "size": target_size,
                "created_at": datetime.now().isoformat(),
            }

            self.logger.info(f"创建树成功: {tree_id} (节点数={target_size})")

            return {
                "success": True,
                "tree_id": tree_id,
                "size": target_size,
                "root": root,
                "created_at": self._tree_metadata[tree_id]["created_at"]
            }

        except Exception as e:
            self.logger.error(f"创建树失败: {tree_id}, 错误: {e}")
            raise

    def add_tree(self, tree_id: str, root: ExpressionNode) -> Dict[str, Any]:
        """
        登记一棵外部构造的树（会先做结构校验）

        Raises:
            ValidationError: 树ID重复
            StructuralInvariantError: 树结构无效
        """
        if tree_id in self._trees:
            raise ValidationError(
                message=f"树已存在: {tree_id}",
                field="tree_id",
                value=tree_id,
                reason="duplicate"
            )

        algorithms.validate_tree(root)
        tree_size = algorithms.size(root)

        self._trees[tree_id] = root
        self._tree_metadata[tree_id] = {
            "id": tree_id,
            "size": tree_size,
            "created_at": datetime.now().isoformat(),
        }
        self.logger.info(f"登记树成功: {tree_id} (节点数={tree_size})")

        return {"success": True, "tree_id": tree_id, "size": tree_size}

    def get_tree(self, tree_id: str) -> ExpressionNode:
        """获取树的根节点"""
        if tree_id not in self._trees:
            raise TreeNotFoundError(tree_id=tree_id)
        return self._trees[tree_id]

    def delete_tree(self, tree_id: str) -> Dict[str, Any]:
        """删除树"""
        if tree_id not in self._trees:
            raise TreeNotFoundError(tree_id=tree_id)

        del self._trees[tree_id]
        del self._tree_metadata[tree_id]

        self.logger.info(f"删除树成功: {tree_id}")

        return {
            "success": True,
            "tree_id": tree_id,
            "deleted_at": datetime.now().isoformat()
        }

    def list_trees(self) -> List[Dict[str, Any]]:
        """列出所有树的元数据"""
        return [dict(meta) for meta in self._tree_metadata.values()]

    # ========== 求值与输出 ==========

    def evaluate_tree(self, tree_id: str) -> float:
        """对树求值"""
        root = self.get_tree(tree_id)
        try:
            return algorithms.evaluate(root)
        except Exception as e:
            self.logger.error(f"树求值失败: {tree_id}, 错误: {e}")
            raise

    def render_tree(self, tree_id: str) -> str:
        """把树格式化为嵌套表达式"""
        return algorithms.format_expression(self.get_tree(tree_id))

    def print_tree(self, tree_id: str, stream: Optional[TextIO] = None) -> str:
        """把树打印到字符流"""
        return algorithms.print_as_expression(self.get_tree(tree_id), stream)

    def export_tree(self, tree_id: str, file_path: Optional[str] = None):
        """
        把树导出为 DataFrame，指定 file_path 时同时保存到文件

        Returns:
            pandas.DataFrame
        """
        if not self._initialized:
            self.initialize()

        root = self.get_tree(tree_id)
        df = self._exporter.export(root)

        if file_path:
            path = self._exporter.save(df, file_path)
            self.logger.info(f"导出树成功: {tree_id} -> {path}")

        return df

    def get_tree_info(self, tree_id: str) -> Dict[str, Any]:
        """获取树的统计信息"""
        root = self.get_tree(tree_id)
        return {
            "tree_id": tree_id,
            "size": algorithms.size(root),
            "depth": algorithms.depth(root),
            "leaf_count": sum(1 for node in algorithms.flatten(root) if node.is_leaf()),
            "value": algorithms.evaluate(root),
            "expression": algorithms.format_expression(root),
            "created_at": self._tree_metadata[tree_id]["created_at"],
        }

    def get_system_info(self) -> Dict[str, Any]:
        """获取系统信息"""
        total_nodes = sum(algorithms.size(root) for root in self._trees.values())

        return {
            "system_name": self.settings.system_name,
            "version": self.settings.version,
            "start_time": self._start_time.isoformat(),
            "uptime": str(datetime.now() - self._start_time),
            "initialized": self._initialized,
            "tree_count": len(self._trees),
            "total_nodes": total_nodes,
            "settings": {
                "default_tree_size": self.settings.default_tree_size,
                "max_tree_size": self.settings.max_tree_size,
                "operators": list(self.settings.operators),
                "seed": self.settings.seed,
                "log_level": self.settings.log_level
            }
        }
