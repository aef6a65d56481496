"""
配置验证器
"""
from typing import Dict, Any, List

from ..exceptions import ValidationError, ConfigError
from ..core.node.payload import Operator


class ConfigValidator:
    """配置验证器"""

    def validate_system_config(self, config: Dict[str, Any]) -> bool:
        """验证系统配置字典"""
        try:
            if 'log_level' in config and not isinstance(config['log_level'], str):
                raise ValidationError(
                    message="日志级别必须是字符串",
                    field="log_level",
                    value=config['log_level'],
                    reason="invalid_type"
                )

            if 'operators' in config:
                self.validate_operators(config['operators'])

            for key in ('default_tree_size', 'max_tree_size'):
                if key in config:
                    self.validate_tree_size(config[key], field=key)

            if 'seed' in config and config['seed'] is not None:
                seed = config['seed']
                if isinstance(seed, bool) or not isinstance(seed, int):
                    raise ValidationError(
                        message=f"随机种子必须是整数: {seed!r}",
                        field="seed",
                        value=seed,
                        reason="invalid_type"
                    )

            return True

        except ValidationError:
            raise
        except Exception as e:
            raise ConfigError(f"配置验证失败: {str(e)}")

    def validate_tree_size(self, tree_size: Any, max_size: int = None, field: str = "tree_size") -> int:
        """
        验证树大小

        Args:
            tree_size: 待验证的节点数
            max_size: 上限，None表示不限制
            field: 报错时使用的字段名

        Returns:
            验证后的节点数
        """
        if isinstance(tree_size, bool) or not isinstance(tree_size, int):
            raise ValidationError(
                message=f"树大小必须是整数: {tree_size!r}",
                field=field,
                value=tree_size,
                reason="invalid_type"
            )

        if tree_size < 1:
            raise ValidationError(
                message=f"树大小必须大于0: {tree_size}",
                field=field,
                value=tree_size,
                reason="out_of_range"
            )

        if max_size is not None and tree_size > max_size:
            raise ValidationError(
                message=f"树大小超过上限: {tree_size} > {max_size}",
                field=field,
                value=tree_size,
                reason="out_of_range"
            )

        return tree_size

    def validate_operators(self, operators: Any) -> List[str]:
        """验证运算符列表，返回去重后的符号列表"""
        if not isinstance(operators, (list, tuple)) or not operators:
            raise ValidationError(
                message="运算符必须是非空列表",
                field="operators",
                value=operators,
                reason="invalid_type"
            )

        valid = Operator.symbols()
        result = []
        for op in operators:
            if op not in valid:
                raise ValidationError(
                    message=f"无效的运算符: {op!r}",
                    field="operators",
                    value=op,
                    reason=f"必须是 {valid} 之一"
                )
            if op not in result:
                result.append(op)

        return result
