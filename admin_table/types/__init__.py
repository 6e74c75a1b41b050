"""类型定义模块."""

from .fields import FieldDescriptor, FieldSet, RawFieldSet
from .ordering import EMPTY_ORDERING, OrderingResolution
from .pagination import PaginationState
from .table import TableResult

__all__ = [
    "EMPTY_ORDERING",
    "FieldDescriptor",
    "FieldSet",
    "OrderingResolution",
    "PaginationState",
    "RawFieldSet",
    "TableResult",
]
