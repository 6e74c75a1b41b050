"""列表排序解析.

单次遍历字段集合,"最后一个命中者生效":
- 请求字段与字段键完全一致且该字段可排序 → 命中
- 未请求字段且该字段声明了默认排序方向 → 命中
命中后方向取值顺序: 合法的请求方向 → 字段声明的默认方向 → 回落方向(默认 asc).
请求字段不存在或不可排序时返回空结果,不抛异常.
"""

from __future__ import annotations

from admin_table.constants.table_constants import SortDirection
from admin_table.types.fields import FieldDescriptor, FieldSet
from admin_table.types.ordering import EMPTY_ORDERING, OrderingResolution


def _field_matches(field: FieldDescriptor, requested_field: str | None) -> bool:
    if not field.is_orderable:
        return False
    if requested_field:
        return requested_field == field.key
    return field.is_default_order


def _resolve_direction(field: FieldDescriptor, requested_direction: str | None, fallback_direction: str) -> str:
    if SortDirection.is_valid(requested_direction):
        return str(requested_direction)
    return field.default_direction or fallback_direction


def resolve_ordering(
    fields: FieldSet,
    requested_field: str | None,
    requested_direction: str | None,
    *,
    fallback_direction: str = SortDirection.ASC,
) -> OrderingResolution:
    """根据字段集合与浏览器请求解析实际生效的排序.

    Args:
        fields: 规范化后的字段集合.
        requested_field: 请求的排序字段键,可为空.
        requested_direction: 请求的排序方向,非 asc/desc 时忽略.
        fallback_direction: 请求与字段均未给出方向时使用的方向.

    Returns:
        生效的 ``(<alias>.<key>, direction)``,或空结果表示不排序.

    """
    if not SortDirection.is_valid(fallback_direction):
        fallback_direction = SortDirection.ASC

    resolution = EMPTY_ORDERING
    for field in fields.values():
        if _field_matches(field, requested_field):
            # 不提前返回: 与旧实现一致,后命中的字段覆盖先命中的字段
            resolution = OrderingResolution(
                field=field.source_expression,
                direction=_resolve_direction(field, requested_direction, fallback_direction),
            )
    return resolution
