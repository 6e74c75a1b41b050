"""列表字段声明规范化.

将稀疏的字段声明展开为完整的 `FieldDescriptor` 集合:
- 声明中已给出的属性原样保留(None 视为未给出)
- 缺失属性按默认值填充: 数据源别名、不可排序、可读名称、自动投影、结果键 ``field_<key>``
- 非字典声明(如 ``"asc"``/``True``)按排序策略简写处理

纯函数,不接触数据源; 对已规范化的集合再次调用结果不变.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping

from admin_table.constants.table_constants import FieldAttribute, TableDefaults
from admin_table.types.fields import FieldDescriptor, FieldSet, RawFieldSet


def humanize_field_key(key: str) -> str:
    """由字段键生成默认展示名称: 下划线转空格、其余小写、首字母大写.

    Example:
        >>> humanize_field_key("is_active")
        'Is active'

    """
    return key.replace("_", " ").capitalize()


def default_result_key(key: str) -> str:
    return f"{TableDefaults.RESULT_KEY_PREFIX}{key}"


def _canonical_attributes(raw: object) -> dict[str, object]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        # 简写: {"name": "asc"} 等价于 {"name": {"order_policy": "asc"}}
        return {FieldAttribute.ORDER_POLICY: raw}

    attributes: dict[str, object] = {}
    for legacy_key, canonical_key in FieldAttribute.LEGACY_ALIASES.items():
        if raw.get(legacy_key) is not None:
            attributes[canonical_key] = raw[legacy_key]
    for canonical_key in FieldAttribute.ALL:
        if raw.get(canonical_key) is not None:
            attributes[canonical_key] = raw[canonical_key]
    return attributes


def normalize_field(key: str, raw: object, default_alias: str) -> FieldDescriptor:
    """规范化单个字段声明."""
    if isinstance(raw, FieldDescriptor):
        return raw if raw.key == key else dataclasses.replace(raw, key=key)

    attributes = _canonical_attributes(raw)
    result_key = attributes.get(FieldAttribute.RESULT_KEY)
    return FieldDescriptor(
        key=key,
        source_alias=str(attributes.get(FieldAttribute.SOURCE_ALIAS, default_alias)),
        order_policy=attributes.get(FieldAttribute.ORDER_POLICY, False),
        display_name=str(attributes.get(FieldAttribute.DISPLAY_NAME, humanize_field_key(key))),
        # 仅字面 True 才自动投影,字符串 "true"/"false" 与 1 均不投影
        auto_project=attributes.get(FieldAttribute.AUTO_PROJECT, True) is True,
        # 空字符串同样视为未配置
        result_key=str(result_key) if result_key else default_result_key(key),
    )


def normalize_fields(raw_fields: RawFieldSet, default_alias: str) -> dict[str, FieldDescriptor]:
    """规范化整个字段集合,保持声明顺序.

    Args:
        raw_fields: 字段键到(部分)属性的映射.
        default_alias: 未声明别名时使用的数据源别名.

    Returns:
        字段键到完整 `FieldDescriptor` 的有序字典.

    """
    return {key: normalize_field(key, raw, default_alias) for key, raw in raw_fields.items()}


def is_normalized(fields: RawFieldSet | FieldSet) -> bool:
    return all(isinstance(value, FieldDescriptor) and value.key == key for key, value in fields.items())
