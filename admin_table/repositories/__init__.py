"""数据源适配层."""

from .data_source import TableDataSource
from .memory_data_source import MemoryDataSource, MemoryQueryHandle
from .sqlalchemy_data_source import EntityDataSource, EntityQueryHandle

__all__ = [
    "EntityDataSource",
    "EntityQueryHandle",
    "MemoryDataSource",
    "MemoryQueryHandle",
    "TableDataSource",
]
