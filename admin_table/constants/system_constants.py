"""系统常量定义."""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    DATABASE = "database"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    INVALID_REQUEST = "无效的请求"

    # 数据源错误
    DATABASE_QUERY_ERROR = "数据库查询错误"

    # 列表配置错误
    TABLE_FIELDS_NOT_CONFIGURED = "列表字段尚未配置"
