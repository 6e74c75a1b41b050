"""列表分页/排序 query 参数 schema.

目标:
- 将浏览器传入的 order/direction/page/per_page 规范化到单入口
- 非法值一律降级(不报 400),具体取值范围由 services/table 判定
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from admin_table.schemas.base import PayloadSchema


def _parse_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text, 10)
    except ValueError:
        # COMPAT: 维持旧行为 - 非法页码降级为默认值,避免接口行为变更为 400.
        return None


def _parse_optional_text(value: Any) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


class TableQueryParams(PayloadSchema):
    """列表 query 参数 schema.

    page/per_page 为 None 表示未传入,由 TableService 使用配置默认值.
    """

    order: str | None = Field(default=None, validation_alias=AliasChoices("order", "sort", "sort_field"))
    direction: str | None = Field(
        default=None,
        validation_alias=AliasChoices("direction", "sort_order", "dir"),
    )
    page: int | None = None
    per_page: int | None = Field(
        default=None,
        validation_alias=AliasChoices("per_page", "perPage", "limit", "page_size"),
    )

    @field_validator("order", mode="before")
    @classmethod
    def _parse_order(cls, value: Any) -> str | None:
        # 字段键大小写敏感,不做 lower()
        return _parse_optional_text(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: Any) -> str | None:
        cleaned = _parse_optional_text(value)
        return cleaned.lower() if cleaned else None

    @field_validator("page", "per_page", mode="before")
    @classmethod
    def _parse_int(cls, value: Any) -> int | None:
        return _parse_optional_int(value)
