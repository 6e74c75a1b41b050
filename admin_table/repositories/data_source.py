"""列表数据源端口.

职责:
- 定义列表编排层依赖的最小能力: 建立查询、附加过滤、排序、计数、分页、投影、取数
- 不做分页/排序策略判断(由 services/table 负责),不做序列化
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

HandleT = TypeVar("HandleT")


class TableDataSource(ABC, Generic[HandleT]):
    """列表数据源抽象基类.

    ``HandleT`` 为具体适配器的查询句柄类型; 编排层只透传,不关心其内部结构.

    Attributes:
        alias: 主表/主实体在查询中的别名,为 None 时由编排层使用配置的默认别名.

    """

    def __init__(self, alias: str | None = None) -> None:
        self.alias = alias

    @abstractmethod
    def begin_query(self, alias: str) -> HandleT:
        """以主表/主实体及别名建立基础查询."""

    def apply_supplementary_changes(self, handle: HandleT) -> None:
        """子类可覆盖: 追加额外过滤/关联.

        计数查询在此之后克隆,因此这里的过滤同样作用于总数.
        """

    @abstractmethod
    def apply_ordering(self, handle: HandleT, field: str, direction: str) -> None:
        """按 ``<alias>.<key>`` 与 asc/desc 设置排序(覆盖已有排序)."""

    @abstractmethod
    def clone_for_count(self, handle: HandleT) -> HandleT:
        """克隆用于计数的查询,后续对原查询的排序/分页/投影不影响克隆."""

    @abstractmethod
    def count(self, handle: HandleT) -> int:
        """统计匹配行数."""

    @abstractmethod
    def apply_paging(self, handle: HandleT, offset: int, limit: int) -> None:
        """设置 offset/limit."""

    @abstractmethod
    def add_projection(self, handle: HandleT, source_expression: str, result_key: str) -> None:
        """追加 ``<alias>.<key> AS <result_key>`` 投影."""

    @abstractmethod
    def fetch(self, handle: HandleT) -> Sequence[object]:
        """执行查询并返回行数据."""
