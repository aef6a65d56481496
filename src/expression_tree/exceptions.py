"""
表达式树系统异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 树结构相关异常 ====================
class TreeError(BaseError):
    """树结构错误基类"""
    pass


class TreeNotFoundError(TreeError):
    """树不存在"""
    def __init__(self, tree_id: str, **kwargs):
        super().__init__(
            message=f"树不存在: {tree_id}",
            code="TREE_NOT_FOUND",
            details={"tree_id": tree_id},
            **kwargs
        )


class StructuralInvariantError(TreeError):
    """
    求值时发现结构不变量被破坏

    例如没有子节点的运算符节点。经过repair的树不会出现这种情况，
    出现即说明上游构造代码有误。
    """
    def __init__(self, reason: str, node_repr: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"树结构不变量被破坏: {reason}",
            code="STRUCTURAL_INVARIANT",
            details={"reason": reason, "node": node_repr},
            **kwargs
        )


# ==================== 节点相关异常 ====================
class NodeError(TreeError):
    """节点操作错误"""
    pass


class InvariantViolationError(NodeError):
    """节点不变量被违反（例如给有子节点的节点设置数值）"""
    def __init__(self, operation: str, reason: str, code: str = "INVARIANT_VIOLATION", **kwargs):
        super().__init__(
            message=f"节点不变量被违反 [{operation}]: {reason}",
            code=code,
            details={"operation": operation, "reason": reason},
            **kwargs
        )


class InvalidStructuralOperationError(InvariantViolationError):
    """非法的结构操作（例如向数值节点添加子节点）"""
    def __init__(self, operation: str, reason: str, **kwargs):
        super().__init__(
            operation=operation,
            reason=reason,
            code="INVALID_STRUCTURAL_OPERATION",
            **kwargs
        )


class InvalidOperatorError(NodeError):
    """运算符不在固定运算符集合内"""
    def __init__(self, operator: Any, valid_operators: Optional[list] = None, **kwargs):
        details = {"operator": operator, "valid_operators": valid_operators}
        message = f"无效的运算符: {operator!r}"
        if valid_operators:
            message += f" (必须是 {valid_operators} 之一)"
        super().__init__(message, code="INVALID_OPERATOR", details=details, **kwargs)
