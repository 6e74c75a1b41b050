"""从 Flask 请求中解析列表参数."""

from __future__ import annotations

from collections.abc import Mapping

from flask import request

from admin_table.schemas.table_query import TableQueryParams
from admin_table.schemas.validation import validate_or_raise


def parse_table_query(args: Mapping[str, object]) -> TableQueryParams:
    """将 query 参数映射解析为 TableQueryParams.

    同名参数重复出现时取第一个值(与 ``request.args.get`` 一致).
    """
    payload = args.to_dict(flat=True) if hasattr(args, "to_dict") else dict(args)
    return validate_or_raise(TableQueryParams, payload, message_key="INVALID_REQUEST")


def current_table_query() -> TableQueryParams:
    """解析当前 Flask 请求的列表参数,需在请求上下文中调用."""
    return parse_table_query(request.args)
