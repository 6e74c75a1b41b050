"""列表查询结果类型."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from admin_table.types.fields import FieldSet
from admin_table.types.ordering import OrderingResolution
from admin_table.types.pagination import PaginationState

RowT = TypeVar("RowT")


@dataclass(slots=True)
class TableResult(Generic[RowT]):
    """一次列表查询的行数据、分页与排序结果."""

    rows: Sequence[RowT]
    pagination: PaginationState
    ordering: OrderingResolution
    fields: FieldSet = field(default_factory=dict)

    def pagination_context(self) -> dict[str, int]:
        return self.pagination.to_dict()

    def ordering_context(self, requested_order: str | None, requested_direction: str | None) -> Mapping[str, str | None]:
        """渲染表头排序链接所需的排序信息(浏览器请求值 + 实际生效值)."""
        return {
            "order": requested_order,
            "direction": requested_direction,
            "applied_field": self.ordering.field,
            "applied_direction": self.ordering.direction,
        }
