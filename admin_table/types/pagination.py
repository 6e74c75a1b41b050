"""分页状态类型."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaginationState:
    """单次请求的分页状态.

    不变量:
    - ``max_page >= 1`` 时 ``1 <= page <= max_page``,否则 ``page == 1``
    - ``offset == per_page * (page - 1)``
    """

    total_count: int
    requested_page: object
    requested_per_page: object
    page: int
    per_page: int
    max_page: int

    @property
    def offset(self) -> int:
        return self.per_page * (self.page - 1)

    @property
    def limit(self) -> int:
        return self.per_page

    def to_dict(self) -> dict[str, int]:
        """转换为分页模板使用的字典(total/page/perPage/maxPages)."""
        return {
            "total": self.total_count,
            "page": self.page,
            "perPage": self.per_page,
            "maxPages": self.max_page,
        }
