"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadSchema(BaseModel):
    """请求参数的基础 schema.

    约定:
    - 默认忽略未知字段, 列表页的筛选参数与分页/排序参数共用同一 query string.
    """

    model_config = ConfigDict(extra="ignore")
