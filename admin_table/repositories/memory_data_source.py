"""内存列表数据源.

用于非 SQL 来源(如接口返回的列表、缓存快照)以及测试.
行数据为 Mapping; 非主别名字段从同名嵌套 Mapping 中读取,如 ``c.name`` → ``row["c"]["name"]``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from admin_table.constants.table_constants import SortDirection
from admin_table.repositories.data_source import TableDataSource

Row = Mapping[str, object]
RowFilter = Callable[[Row], bool]


@dataclass(slots=True)
class MemoryQueryHandle:
    """内存查询句柄."""

    alias: str
    rows: list[Row]
    order_field: str | None = None
    descending: bool = False
    offset: int = 0
    limit: int | None = None
    projections: list[tuple[str, str]] = field(default_factory=list)


def _sort_values(pairs: list[tuple[object, Row]], *, descending: bool) -> list[Row]:
    try:
        ordered = sorted(pairs, key=lambda pair: pair[0], reverse=descending)
    except TypeError:
        # 同列混合类型(如 int 与 str)时按字符串形式比较
        ordered = sorted(pairs, key=lambda pair: str(pair[0]), reverse=descending)
    return [row for _, row in ordered]


class MemoryDataSource(TableDataSource[MemoryQueryHandle]):
    """基于内存行集合的列表数据源.

    Args:
        rows: 行数据.
        alias: 主别名.
        row_filter: 可选的行过滤函数,在计数前生效.

    """

    def __init__(
        self,
        rows: Iterable[Row],
        *,
        alias: str | None = None,
        row_filter: RowFilter | None = None,
    ) -> None:
        super().__init__(alias)
        self._rows = list(rows)
        self._row_filter = row_filter

    def begin_query(self, alias: str) -> MemoryQueryHandle:
        return MemoryQueryHandle(alias=alias, rows=list(self._rows))

    def apply_supplementary_changes(self, handle: MemoryQueryHandle) -> None:
        if self._row_filter is not None:
            handle.rows = [row for row in handle.rows if self._row_filter(row)]

    def apply_ordering(self, handle: MemoryQueryHandle, field: str, direction: str) -> None:
        handle.order_field = field
        handle.descending = direction == SortDirection.DESC

    def clone_for_count(self, handle: MemoryQueryHandle) -> MemoryQueryHandle:
        return MemoryQueryHandle(alias=handle.alias, rows=list(handle.rows))

    def count(self, handle: MemoryQueryHandle) -> int:
        return len(handle.rows)

    def apply_paging(self, handle: MemoryQueryHandle, offset: int, limit: int) -> None:
        handle.offset = offset
        handle.limit = limit

    def add_projection(self, handle: MemoryQueryHandle, source_expression: str, result_key: str) -> None:
        handle.projections.append((source_expression, result_key))

    def fetch(self, handle: MemoryQueryHandle) -> Sequence[object]:
        """返回 dict 行: 别名 → 原始行, result_key → 投影值."""
        rows = handle.rows
        if handle.order_field is not None:
            order_field = handle.order_field
            keyed = [(self._lookup(handle, row, order_field), row) for row in rows]
            # 无论升序降序, None 均排在最后
            present = [(value, row) for value, row in keyed if value is not None]
            missing = [row for value, row in keyed if value is None]
            rows = _sort_values(present, descending=handle.descending) + missing
        end = None if handle.limit is None else handle.offset + handle.limit
        page_rows = rows[handle.offset : end]
        return [self._project(handle, row) for row in page_rows]

    def _project(self, handle: MemoryQueryHandle, row: Row) -> dict[str, object]:
        result: dict[str, object] = {handle.alias: row}
        for source_expression, result_key in handle.projections:
            result[result_key] = self._lookup(handle, row, source_expression)
        return result

    @staticmethod
    def _lookup(handle: MemoryQueryHandle, row: Row, source_expression: str) -> object:
        alias, _, key = source_expression.partition(".")
        if alias == handle.alias:
            return row.get(key)
        nested = row.get(alias)
        if isinstance(nested, Mapping):
            return nested.get(key)
        return None
