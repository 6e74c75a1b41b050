"""SQLAlchemy ORM 列表数据源.

职责:
- 负责 Query 组装与数据库读取(read)
- 排序/分页/投影先记录在句柄上,取数时一次性组装,避免在 LIMIT 之后追加 ORDER BY
- 不做序列化、不 commit
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, aliased
from sqlalchemy.sql.elements import ColumnElement

from admin_table.constants.table_constants import SortDirection, TableDefaults
from admin_table.errors import DataSourceError
from admin_table.repositories.data_source import TableDataSource


@dataclass(slots=True)
class EntityQueryHandle:
    """实体查询句柄.

    ``aliases`` 记录别名到(别名化)实体的映射,子类关联其他实体时通过 `register_alias` 登记.
    """

    alias: str
    query: Query[Any]
    aliases: dict[str, Any] = field(default_factory=dict)
    order_by: list[ColumnElement[Any]] = field(default_factory=list)
    columns: list[ColumnElement[Any]] = field(default_factory=list)
    offset: int | None = None
    limit: int | None = None

    def register_alias(self, alias: str, entity: Any) -> None:
        self.aliases[alias] = entity


class EntityDataSource(TableDataSource[EntityQueryHandle]):
    """基于 SQLAlchemy Session 与映射实体的列表数据源.

    需要额外过滤或关联时继承并覆盖 `apply_supplementary_changes`:

        >>> class ActiveUsersDataSource(EntityDataSource):
        ...     def apply_supplementary_changes(self, handle):
        ...         entity = handle.aliases[handle.alias]
        ...         handle.query = handle.query.filter(entity.is_active.is_(True))

    """

    def __init__(
        self,
        session: Session,
        model: type[Any],
        *,
        alias: str | None = None,
        count_column: str = TableDefaults.COUNT_COLUMN,
    ) -> None:
        super().__init__(alias)
        self.session = session
        self.model = model
        self.count_column = count_column

    def begin_query(self, alias: str) -> EntityQueryHandle:
        entity = aliased(self.model, name=alias)
        handle = EntityQueryHandle(alias=alias, query=self.session.query(entity))
        handle.register_alias(alias, entity)
        return handle

    def apply_ordering(self, handle: EntityQueryHandle, field: str, direction: str) -> None:
        column = self._resolve_column(handle, field)
        handle.order_by = [column.desc() if direction == SortDirection.DESC else column.asc()]

    def clone_for_count(self, handle: EntityQueryHandle) -> EntityQueryHandle:
        # Query 为生成式对象,共享引用即可; 排序/分页/投影不复制
        return EntityQueryHandle(alias=handle.alias, query=handle.query, aliases=dict(handle.aliases))

    def count(self, handle: EntityQueryHandle) -> int:
        column = self._resolve_column(handle, f"{handle.alias}.{self.count_column}")
        try:
            total = handle.query.order_by(None).with_entities(func.count(column)).scalar()
        except SQLAlchemyError as exc:
            raise DataSourceError(
                extra={"action": "count", "model": self.model.__name__, "error": str(exc)},
            ) from exc
        return int(total or 0)

    def apply_paging(self, handle: EntityQueryHandle, offset: int, limit: int) -> None:
        handle.offset = offset
        handle.limit = limit

    def add_projection(self, handle: EntityQueryHandle, source_expression: str, result_key: str) -> None:
        handle.columns.append(self._resolve_column(handle, source_expression).label(result_key))

    def fetch(self, handle: EntityQueryHandle) -> Sequence[object]:
        """执行查询.

        存在投影列时每行返回 dict(别名 → 实体, result_key → 值),否则返回实体列表.
        """
        query = handle.query
        if handle.columns:
            query = query.add_columns(*handle.columns)
        if handle.order_by:
            query = query.order_by(*handle.order_by)
        if handle.offset is not None:
            query = query.offset(handle.offset)
        if handle.limit is not None:
            query = query.limit(handle.limit)
        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            raise DataSourceError(
                extra={"action": "fetch", "model": self.model.__name__, "error": str(exc)},
            ) from exc
        if not handle.columns:
            return list(rows)
        return [dict(row._mapping) for row in rows]

    @staticmethod
    def _resolve_column(handle: EntityQueryHandle, source_expression: str) -> Any:
        alias, _, key = source_expression.partition(".")
        entity = handle.aliases.get(alias)
        column = getattr(entity, key, None) if entity is not None and key else None
        if column is None:
            raise DataSourceError(
                f"未知的列表字段: {source_expression}",
                extra={"source_expression": source_expression},
            )
        return column
