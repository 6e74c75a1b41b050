"""常量模块.

主要常量:
- ErrorMessages / ErrorCategory / ErrorSeverity: 错误相关常量
- SortDirection: 排序方向
- TableDefaults: 列表分页/排序默认值
- FieldAttribute: 字段声明属性键
"""

from .system_constants import ErrorCategory, ErrorMessages, ErrorSeverity
from .table_constants import FieldAttribute, SortDirection, TableDefaults

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FieldAttribute",
    "SortDirection",
    "TableDefaults",
]
