"""列表渲染器协议.

HTML/模板输出由调用方实现,这里只约定交接的数据形状.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from admin_table.types.fields import FieldSet


class TableRenderer(Protocol):
    """列表渲染器协议."""

    def render(
        self,
        translation_name: str,
        fields: FieldSet,
        rows: Sequence[object],
        pagination: Mapping[str, int],
        ordering: Mapping[str, str | None],
    ) -> str:
        """渲染整张表格.

        Args:
            translation_name: 字段名称翻译所用的词典名(由调用方显式传入).
            fields: 规范化后的字段集合.
            rows: 当前页行数据.
            pagination: total/page/perPage/maxPages.
            ordering: 浏览器请求的 order/direction 以及实际生效的排序.

        """
        ...
