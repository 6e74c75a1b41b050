"""排序解析结果类型."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OrderingResolution:
    """排序解析结果.

    ``field``/``direction`` 同时为 None 表示不追加 ORDER BY.
    """

    field: str | None = None
    direction: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.field is None

    def as_tuple(self) -> tuple[str, str] | None:
        if self.field is None or self.direction is None:
            return None
        return (self.field, self.direction)


EMPTY_ORDERING = OrderingResolution()
