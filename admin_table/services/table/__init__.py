"""列表(分页/排序)服务."""

from .field_normalizer import humanize_field_key, normalize_field, normalize_fields
from .ordering_resolver import resolve_ordering
from .pagination_calculator import calculate_pagination
from .table_service import TableService, run_table_query

__all__ = [
    "TableService",
    "calculate_pagination",
    "humanize_field_key",
    "normalize_field",
    "normalize_fields",
    "resolve_ordering",
    "run_table_query",
]
