"""列表(分页/排序)相关常量.

避免在 normalizer/resolver/calculator 中散落魔法字符串与数字.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar


class SortDirection:
    """排序方向常量."""

    ASC: ClassVar[str] = "asc"
    DESC: ClassVar[str] = "desc"

    ALL: ClassVar[tuple[str, ...]] = (ASC, DESC)

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """判断是否为合法的排序方向 token(大小写敏感)."""
        return isinstance(value, str) and value in cls.ALL


class TableDefaults:
    """列表查询默认值.

    分页上下限为开区间: 仅当 ``PER_PAGE_MIN < per_page < PER_PAGE_MAX`` 时采用请求值.
    """

    ALIAS: ClassVar[str] = "a"
    DIRECTION: ClassVar[str] = SortDirection.ASC
    PAGE: ClassVar[int] = 1
    PER_PAGE: ClassVar[int] = 10
    PER_PAGE_MIN: ClassVar[int] = 1
    PER_PAGE_MAX: ClassVar[int] = 1000
    RESULT_KEY_PREFIX: ClassVar[str] = "field_"
    COUNT_COLUMN: ClassVar[str] = "id"


class FieldAttribute:
    """字段声明中的属性键.

    ``LEGACY_ALIASES`` 兼容旧模板使用的 camelCase/短键名.
    """

    SOURCE_ALIAS: ClassVar[str] = "source_alias"
    ORDER_POLICY: ClassVar[str] = "order_policy"
    DISPLAY_NAME: ClassVar[str] = "display_name"
    AUTO_PROJECT: ClassVar[str] = "auto_project"
    RESULT_KEY: ClassVar[str] = "result_key"

    ALL: ClassVar[tuple[str, ...]] = (SOURCE_ALIAS, ORDER_POLICY, DISPLAY_NAME, AUTO_PROJECT, RESULT_KEY)

    LEGACY_ALIASES: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            "alias": SOURCE_ALIAS,
            "order": ORDER_POLICY,
            "name": DISPLAY_NAME,
            "autoAdd": AUTO_PROJECT,
            "fieldAlias": RESULT_KEY,
        },
    )
