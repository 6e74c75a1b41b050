"""列表查询编排 Service.

职责:
- 组织 字段规范化 → 基础查询 → 额外过滤 → 排序 → 计数 → 分页 → 投影 → 取数
- 将结果与分页信息交给渲染器
- 不做 Query 细节(由数据源适配器负责)、不做 HTML 输出
"""

from __future__ import annotations

from typing import Generic, TypeVar

from admin_table.errors import ConfigurationError
from admin_table.renderers.base import TableRenderer
from admin_table.repositories.data_source import TableDataSource
from admin_table.schemas.table_query import TableQueryParams
from admin_table.services.table.field_normalizer import is_normalized, normalize_fields
from admin_table.services.table.ordering_resolver import resolve_ordering
from admin_table.services.table.pagination_calculator import calculate_pagination
from admin_table.settings import Settings
from admin_table.types.fields import FieldDescriptor, FieldSet, RawFieldSet
from admin_table.types.table import TableResult
from admin_table.utils.structlog_config import log_debug, log_error, structlog_config

HandleT = TypeVar("HandleT")

MODULE = "table"


def run_table_query(
    data_source: TableDataSource[HandleT],
    fields: FieldSet | RawFieldSet | None,
    order: str | None,
    direction: str | None,
    page: object,
    per_page: object,
    *,
    settings: Settings | None = None,
) -> TableResult[object]:
    """执行一次列表查询.

    Args:
        data_source: 数据源适配器.
        fields: 字段集合; 未规范化时按数据源别名规范化.
        order: 浏览器请求的排序字段.
        direction: 浏览器请求的排序方向.
        page: 浏览器请求的页码.
        per_page: 浏览器请求的每页数量.
        settings: 运行时设置,缺省时从环境变量加载.

    Returns:
        TableResult: 当前页行数据、分页状态与生效排序.

    Raises:
        ConfigurationError: 未配置字段集合.

    """
    if fields is None:
        raise ConfigurationError(extra={"data_source": type(data_source).__name__})

    resolved_settings = settings or Settings.load()
    structlog_config.configure(resolved_settings)
    alias = data_source.alias or resolved_settings.table_default_alias
    field_set: FieldSet = fields if is_normalized(fields) else normalize_fields(fields, alias)  # type: ignore[assignment]

    try:
        handle = data_source.begin_query(alias)
        data_source.apply_supplementary_changes(handle)
        # 计数查询需包含额外过滤,但不包含之后追加的排序/分页/投影
        count_handle = data_source.clone_for_count(handle)

        ordering = resolve_ordering(
            field_set,
            order,
            direction,
            fallback_direction=resolved_settings.table_default_direction,
        )
        if ordering.field is not None and ordering.direction is not None:
            data_source.apply_ordering(handle, ordering.field, ordering.direction)
        log_debug(
            "列表排序已解析",
            module=MODULE,
            requested_order=order,
            requested_direction=direction,
            ordering_field=ordering.field,
            ordering_direction=ordering.direction,
        )

        pagination = calculate_pagination(
            data_source.count(count_handle),
            page,
            per_page,
            per_page_bounds=resolved_settings.per_page_bounds,
            default_per_page=resolved_settings.table_default_per_page,
        )
        data_source.apply_paging(handle, pagination.offset, pagination.limit)
        log_debug(
            "列表分页已计算",
            module=MODULE,
            total=pagination.total_count,
            page=pagination.page,
            per_page=pagination.per_page,
            max_page=pagination.max_page,
        )

        for field in field_set.values():
            if field.auto_project:
                data_source.add_projection(handle, field.source_expression, field.result_key)

        rows = data_source.fetch(handle)
    except Exception as exc:
        log_error(
            "列表查询失败",
            module=MODULE,
            exception=exc,
            data_source=type(data_source).__name__,
        )
        raise

    return TableResult(rows=rows, pagination=pagination, ordering=ordering, fields=field_set)


class TableService(Generic[HandleT]):
    """列表业务编排服务.

    字段集合在 `set_fields` 时规范化一次,之后在本次请求内保持不变.

    Example:
        >>> service = TableService(MemoryDataSource(rows), order="name", direction="desc", page=2)
        >>> service.set_fields({"name": {"order": "asc"}, "slug": {"order": True}})
        >>> result = service.run()

    """

    def __init__(
        self,
        data_source: TableDataSource[HandleT],
        *,
        order: str | None = None,
        direction: str | None = None,
        page: object = None,
        per_page: object = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings.load()
        self._data_source = data_source
        self._fields: dict[str, FieldDescriptor] | None = None
        self.order = order
        self.direction = direction
        self.page = self._settings.table_default_page if page is None else page
        self.per_page = self._settings.table_default_per_page if per_page is None else per_page

    @classmethod
    def from_query_params(
        cls,
        data_source: TableDataSource[HandleT],
        params: TableQueryParams,
        *,
        settings: Settings | None = None,
    ) -> TableService[HandleT]:
        """以解析后的浏览器参数构造服务."""
        return cls(
            data_source,
            order=params.order,
            direction=params.direction,
            page=params.page,
            per_page=params.per_page,
            settings=settings,
        )

    @property
    def data_source(self) -> TableDataSource[HandleT]:
        return self._data_source

    @property
    def fields(self) -> FieldSet:
        """规范化后的字段集合.

        Raises:
            ConfigurationError: 尚未调用 `set_fields`.

        """
        if self._fields is None:
            raise ConfigurationError(extra={"data_source": type(self._data_source).__name__})
        return self._fields

    def set_fields(self, fields: RawFieldSet) -> None:
        alias = self._data_source.alias or self._settings.table_default_alias
        self._fields = normalize_fields(fields, alias)

    def run(self) -> TableResult[object]:
        return run_table_query(
            self._data_source,
            self._fields,
            self.order,
            self.direction,
            self.page,
            self.per_page,
            settings=self._settings,
        )

    def create_table(self, renderer: TableRenderer, translation_name: str) -> str:
        """执行查询并交给渲染器输出.

        Args:
            renderer: 渲染器.
            translation_name: 字段名称翻译词典名,通常为列表类型名的小写形式.

        """
        result = self.run()
        return renderer.render(
            translation_name,
            result.fields,
            result.rows,
            result.pagination_context(),
            result.ordering_context(self.order, self.direction),
        )
