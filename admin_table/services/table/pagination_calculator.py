"""列表分页计算.

规则(沿用旧实现的开区间边界):
- ``min < per_page < max`` 时采用请求的每页数量,否则回落为默认值
- ``max_page = ceil(total / per_page)``,总数为 0 时为 0
- ``1 < page < max_page`` 时采用请求页码,否则回落为第 1 页

注意: 恰好等于 ``max_page`` 的页码也会回落为 1,最后一页无法被直接请求.
所有非法输入均降级为安全默认值,不抛异常.
"""

from __future__ import annotations

from admin_table.constants.table_constants import TableDefaults
from admin_table.types.pagination import PaginationState


def _safe_int(value: object) -> int | None:
    # bool 是 int 的子类,分页参数不应接受 bool.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return None


def resolve_per_page(
    requested_per_page: object,
    *,
    per_page_bounds: tuple[int, int] = (TableDefaults.PER_PAGE_MIN, TableDefaults.PER_PAGE_MAX),
    default_per_page: int = TableDefaults.PER_PAGE,
) -> int:
    lower, upper = per_page_bounds
    per_page = _safe_int(requested_per_page)
    if per_page is not None and lower < per_page < upper:
        return per_page
    return default_per_page


def compute_max_page(total_count: int, per_page: int) -> int:
    """计算总页数,总数为 0 时返回 0."""
    if total_count <= 0:
        return 0
    return (total_count + per_page - 1) // per_page


def resolve_page(requested_page: object, max_page: int) -> int:
    page = _safe_int(requested_page)
    if page is not None and 1 < page < max_page:
        return page
    return 1


def calculate_pagination(
    total_count: int,
    requested_page: object,
    requested_per_page: object,
    *,
    per_page_bounds: tuple[int, int] = (TableDefaults.PER_PAGE_MIN, TableDefaults.PER_PAGE_MAX),
    default_per_page: int = TableDefaults.PER_PAGE,
) -> PaginationState:
    """根据总数与浏览器请求计算分页状态.

    Args:
        total_count: 未分页查询的匹配行数.
        requested_page: 请求页码(不可信输入).
        requested_per_page: 请求每页数量(不可信输入).
        per_page_bounds: 每页数量开区间上下限.
        default_per_page: 每页数量非法时的回落值.

    Returns:
        PaginationState, 其 offset/limit 供数据源分页使用.

    """
    total = max(int(total_count or 0), 0)
    per_page = resolve_per_page(
        requested_per_page,
        per_page_bounds=per_page_bounds,
        default_per_page=default_per_page,
    )
    max_page = compute_max_page(total, per_page)
    return PaginationState(
        total_count=total,
        requested_page=requested_page,
        requested_per_page=requested_per_page,
        page=resolve_page(requested_page, max_page),
        per_page=per_page,
        max_page=max_page,
    )
