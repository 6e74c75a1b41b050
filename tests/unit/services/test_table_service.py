from collections.abc import Sequence

import pytest

from admin_table.errors import ConfigurationError
from admin_table.repositories.data_source import TableDataSource
from admin_table.repositories.memory_data_source import MemoryDataSource
from admin_table.schemas.table_query import TableQueryParams
from admin_table.services.table import table_service as table_service_module
from admin_table.services.table.field_normalizer import normalize_fields
from admin_table.services.table.table_service import TableService, run_table_query


class RecordingDataSource(TableDataSource[dict]):
    """记录调用顺序的数据源."""

    def __init__(self, total: int = 52, rows: Sequence[object] = ("row",), alias: str | None = None) -> None:
        super().__init__(alias)
        self.total = total
        self.rows = list(rows)
        self.calls: list[tuple] = []

    def begin_query(self, alias: str) -> dict:
        self.calls.append(("begin_query", alias))
        return {"name": "main"}

    def apply_supplementary_changes(self, handle: dict) -> None:
        self.calls.append(("apply_supplementary_changes", handle["name"]))

    def apply_ordering(self, handle: dict, field: str, direction: str) -> None:
        self.calls.append(("apply_ordering", handle["name"], field, direction))

    def clone_for_count(self, handle: dict) -> dict:
        self.calls.append(("clone_for_count", handle["name"]))
        return {"name": "count"}

    def count(self, handle: dict) -> int:
        self.calls.append(("count", handle["name"]))
        return self.total

    def apply_paging(self, handle: dict, offset: int, limit: int) -> None:
        self.calls.append(("apply_paging", handle["name"], offset, limit))

    def add_projection(self, handle: dict, source_expression: str, result_key: str) -> None:
        self.calls.append(("add_projection", handle["name"], source_expression, result_key))

    def fetch(self, handle: dict) -> Sequence[object]:
        self.calls.append(("fetch", handle["name"]))
        return self.rows


class FailingCountDataSource(RecordingDataSource):
    def count(self, handle: dict) -> int:
        raise RuntimeError("db down")


class CapturingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def render(self, translation_name, fields, rows, pagination, ordering) -> str:
        self.calls.append((translation_name, fields, rows, pagination, ordering))
        return "<table></table>"


@pytest.mark.unit
def test_run_table_query_calls_data_source_in_fixed_order(raw_fields, settings) -> None:
    source = RecordingDataSource(total=52)
    fields = normalize_fields({**raw_fields, "secret": {"autoAdd": False}}, "a")

    result = run_table_query(source, fields, "name", "desc", 3, 10, settings=settings)

    assert source.calls == [
        ("begin_query", "a"),
        ("apply_supplementary_changes", "main"),
        ("clone_for_count", "main"),
        ("apply_ordering", "main", "a.name", "desc"),
        ("count", "count"),
        ("apply_paging", "main", 20, 10),
        ("add_projection", "main", "a.name", "field_name"),
        ("add_projection", "main", "a.slug", "field_slug"),
        ("add_projection", "main", "a.is_active", "field_is_active"),
        ("fetch", "main"),
    ]
    assert result.rows == ["row"]
    assert result.ordering.as_tuple() == ("a.name", "desc")
    assert result.pagination.to_dict() == {"total": 52, "page": 3, "perPage": 10, "maxPages": 6}


@pytest.mark.unit
def test_run_table_query_skips_ordering_for_unknown_field(raw_fields, settings) -> None:
    source = RecordingDataSource()

    result = run_table_query(source, raw_fields, "unknown_field", "desc", 1, 10, settings=settings)

    assert result.ordering.is_empty is True
    assert not [call for call in source.calls if call[0] == "apply_ordering"]


@pytest.mark.unit
def test_run_table_query_normalizes_raw_fields_with_data_source_alias(settings) -> None:
    source = RecordingDataSource(alias="u")

    result = run_table_query(source, {"name": {"order": "asc"}}, None, None, 1, 10, settings=settings)

    assert source.calls[0] == ("begin_query", "u")
    assert result.fields["name"].source_alias == "u"
    assert result.ordering.as_tuple() == ("u.name", "asc")


@pytest.mark.unit
def test_run_table_query_without_fields_raises_configuration_error(settings) -> None:
    source = RecordingDataSource()

    with pytest.raises(ConfigurationError) as exc_info:
        run_table_query(source, None, None, None, 1, 10, settings=settings)

    assert exc_info.value.message_key == "TABLE_FIELDS_NOT_CONFIGURED"
    assert source.calls == []


@pytest.mark.unit
def test_run_table_query_propagates_data_source_failure_unmodified(monkeypatch, raw_fields, settings) -> None:
    logged: list[tuple[str, dict[str, object]]] = []

    def _fake_log_error(message: str, **kwargs: object) -> None:
        logged.append((message, dict(kwargs)))

    monkeypatch.setattr(table_service_module, "log_error", _fake_log_error)

    with pytest.raises(RuntimeError, match="db down"):
        run_table_query(FailingCountDataSource(), raw_fields, None, None, 1, 10, settings=settings)

    assert logged
    message, kwargs = logged[0]
    assert message == "列表查询失败"
    assert kwargs.get("module") == "table"
    assert kwargs.get("data_source") == "FailingCountDataSource"


@pytest.mark.unit
def test_run_table_query_uses_settings_for_pagination_defaults(monkeypatch, raw_fields) -> None:
    monkeypatch.setenv("TABLE_DEFAULT_PER_PAGE", "25")
    monkeypatch.setenv("TABLE_PER_PAGE_MAX", "50")
    from admin_table.settings import Settings

    result = run_table_query(RecordingDataSource(total=100), raw_fields, None, None, 1, 60, settings=Settings.load())

    assert result.pagination.per_page == 25
    assert result.pagination.max_page == 4


@pytest.mark.unit
def test_table_service_run_requires_fields(memory_source, settings) -> None:
    service = TableService(memory_source, settings=settings)

    with pytest.raises(ConfigurationError):
        service.run()
    with pytest.raises(ConfigurationError):
        _ = service.fields


@pytest.mark.unit
def test_table_service_defaults_follow_settings(memory_source, settings) -> None:
    service = TableService(memory_source, settings=settings)

    assert service.order is None
    assert service.direction is None
    assert service.page == 1
    assert service.per_page == 10


@pytest.mark.unit
def test_table_service_set_fields_normalizes_once(memory_source, raw_fields, settings) -> None:
    service = TableService(memory_source, settings=settings)
    service.set_fields(raw_fields)
    first = service.fields

    service.run()

    assert service.fields is first
    assert first["is_active"].display_name == "Is active"


@pytest.mark.unit
def test_table_service_runs_against_memory_source(memory_source, settings) -> None:
    service = TableService(memory_source, order="name", direction="desc", page=1, per_page=2, settings=settings)
    service.set_fields({"name": {"order": "asc"}, "slug": {"order": True}})

    result = service.run()

    assert [row["field_name"] for row in result.rows] == ["echo", "delta"]
    assert result.pagination.total_count == 5
    assert result.pagination.max_page == 3


@pytest.mark.unit
def test_table_service_default_sort_applies_without_request(memory_source, settings) -> None:
    service = TableService(memory_source, per_page=3, settings=settings)
    service.set_fields({"name": {"order": "asc"}, "slug": {"order": True}})

    result = service.run()

    assert [row["field_name"] for row in result.rows] == ["alpha", "bravo", "charlie"]


@pytest.mark.unit
def test_table_service_from_query_params(memory_source, settings) -> None:
    params = TableQueryParams.model_validate({"sort": "slug", "dir": "DESC", "perPage": "2"})

    service = TableService.from_query_params(memory_source, params, settings=settings)

    assert service.order == "slug"
    assert service.direction == "desc"
    assert service.page == 1
    assert service.per_page == 2


@pytest.mark.unit
def test_table_service_create_table_hands_result_to_renderer(memory_source, raw_fields, settings) -> None:
    renderer = CapturingRenderer()
    service = TableService(memory_source, order="slug", direction="asc", per_page=2, settings=settings)
    service.set_fields(raw_fields)

    html = service.create_table(renderer, "usertable")

    assert html == "<table></table>"
    translation_name, fields, rows, pagination, ordering = renderer.calls[0]
    assert translation_name == "usertable"
    assert fields is service.fields
    assert [row["field_slug"] for row in rows] == ["alpha-slug", "bravo-slug"]
    assert pagination == {"total": 5, "page": 1, "perPage": 2, "maxPages": 3}
    assert ordering == {
        "order": "slug",
        "direction": "asc",
        "applied_field": "a.slug",
        "applied_direction": "asc",
    }


@pytest.mark.unit
def test_run_table_query_projects_only_literal_true_auto_project(memory_source, settings) -> None:
    fields = {"name": {"order": True}, "slug": {"autoAdd": "false"}, "is_active": {"autoAdd": 1}}

    result = run_table_query(memory_source, fields, None, None, 1, 10, settings=settings)

    assert sorted(result.rows[0]) == ["a", "field_name"]
