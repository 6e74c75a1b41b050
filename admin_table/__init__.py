"""admin_table - 管理后台分页/排序列表查询组件.

主要入口:
- TableService / run_table_query: 列表查询编排
- EntityDataSource / MemoryDataSource: 数据源适配器
- TableQueryParams / current_table_query: 浏览器参数解析
"""

from admin_table.errors import AppError, ConfigurationError, DataSourceError, ValidationError
from admin_table.repositories import EntityDataSource, MemoryDataSource, TableDataSource
from admin_table.schemas.table_query import TableQueryParams
from admin_table.services.table import TableService, run_table_query
from admin_table.settings import APP_VERSION, Settings
from admin_table.types import FieldDescriptor, OrderingResolution, PaginationState, TableResult
from admin_table.utils.request_args import current_table_query, parse_table_query

__version__ = APP_VERSION

__all__ = [
    "AppError",
    "ConfigurationError",
    "DataSourceError",
    "EntityDataSource",
    "FieldDescriptor",
    "MemoryDataSource",
    "OrderingResolution",
    "PaginationState",
    "Settings",
    "TableDataSource",
    "TableQueryParams",
    "TableResult",
    "TableService",
    "ValidationError",
    "current_table_query",
    "parse_table_query",
    "run_table_query",
]
