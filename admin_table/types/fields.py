"""列表字段描述类型定义."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from admin_table.constants.table_constants import SortDirection


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """单列字段描述(规范化后五个派生属性均已填充).

    ``order_policy`` 保留声明中的原始值:
    - ``False``: 不可排序
    - ``True``: 可排序,无默认排序
    - ``"asc"``/``"desc"``: 默认排序字段及方向
    其余取值按"可排序、无默认方向"宽松处理.
    """

    key: str
    source_alias: str
    order_policy: object
    display_name: str
    auto_project: bool
    result_key: str

    @property
    def is_orderable(self) -> bool:
        return self.order_policy is not False

    @property
    def default_direction(self) -> str | None:
        """声明的默认排序方向,未声明时为 None."""
        if SortDirection.is_valid(self.order_policy):
            return str(self.order_policy)
        return None

    @property
    def is_default_order(self) -> bool:
        return self.default_direction is not None

    @property
    def source_expression(self) -> str:
        """``<alias>.<key>`` 形式的数据源表达式."""
        return f"{self.source_alias}.{self.key}"

    def to_template_dict(self) -> dict[str, object]:
        """转换为模板沿用的旧键名字典."""
        return {
            "order": self.order_policy,
            "alias": self.source_alias,
            "name": self.display_name,
            "autoAdd": self.auto_project,
            "fieldAlias": self.result_key,
        }


FieldSet: TypeAlias = Mapping[str, FieldDescriptor]
RawFieldSet: TypeAlias = Mapping[str, Mapping[str, object] | FieldDescriptor | None]
