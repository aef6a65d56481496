"""
系统配置设置
"""
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from ..exceptions import ConfigError
from ..core.node.payload import Operator


@dataclass
class SystemSettings:
    """
    系统配置类
    使用dataclass确保配置的类型安全
    """

    # 系统基本配置
    system_name: str = "表达式树系统"
    version: str = "1.0.0"

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 生成配置
    default_tree_size: int = 10
    max_tree_size: int = 10000
    operators: list = field(default_factory=lambda: Operator.symbols())
    seed: Optional[int] = None

    # 导出配置
    export_format: str = "csv"  # csv, xlsx

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )
        self.log_level = self.log_level.upper()

        # 验证树大小
        for key in ("default_tree_size", "max_tree_size"):
            size = getattr(self, key)
            if isinstance(size, bool) or not isinstance(size, int):
                raise ConfigError(
                    message=f"{key} 必须是整数: {size!r}",
                    config_key=key
                )
        if self.default_tree_size < 1:
            raise ConfigError(
                message=f"默认树大小必须大于0: {self.default_tree_size}",
                config_key="default_tree_size"
            )
        if self.max_tree_size < self.default_tree_size:
            raise ConfigError(
                message=f"最大树大小不能小于默认树大小: {self.max_tree_size} < {self.default_tree_size}",
                config_key="max_tree_size"
            )

        # 验证运算符
        if not self.operators:
            raise ConfigError(message="运算符集合不能为空", config_key="operators")
        for op in self.operators:
            if op not in Operator.symbols():
                raise ConfigError(
                    message=f"无效的运算符: {op} (必须是 {Operator.symbols()} 之一)",
                    config_key="operators"
                )

        # 验证导出格式
        if self.export_format not in ("csv", "xlsx"):
            raise ConfigError(
                message=f"无效的导出格式: {self.export_format}",
                config_key="export_format"
            )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SystemSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
