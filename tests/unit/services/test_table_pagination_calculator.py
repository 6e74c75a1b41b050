import pytest

from admin_table.services.table.pagination_calculator import (
    calculate_pagination,
    compute_max_page,
    resolve_page,
    resolve_per_page,
)


@pytest.mark.unit
def test_calculate_pagination_first_page() -> None:
    state = calculate_pagination(52, 1, 10)

    assert state.page == 1
    assert state.per_page == 10
    assert state.max_page == 6
    assert state.offset == 0
    assert state.limit == 10
    assert state.to_dict() == {"total": 52, "page": 1, "perPage": 10, "maxPages": 6}


@pytest.mark.unit
def test_calculate_pagination_page_overflow_falls_back_to_first_page() -> None:
    state = calculate_pagination(100, 12, 10)

    assert state.max_page == 10
    assert state.page == 1
    assert state.offset == 0


@pytest.mark.unit
def test_calculate_pagination_per_page_overflow_falls_back_to_default() -> None:
    state = calculate_pagination(100, 1, 10000)

    assert state.per_page == 10
    assert state.max_page == 10


@pytest.mark.unit
@pytest.mark.parametrize(("page", "per_page"), [(1, 10), (5, 20), (0, 0), ("3", "abc")])
def test_calculate_pagination_zero_total(page, per_page) -> None:
    state = calculate_pagination(0, page, per_page)

    assert state.max_page == 0
    assert state.page == 1
    assert state.offset == 0


@pytest.mark.unit
def test_calculate_pagination_uses_requested_middle_page() -> None:
    state = calculate_pagination(101, 5, 20)

    assert state.max_page == 6

    assert state.page == 5
    assert state.offset == 80
    assert state.limit == 20


@pytest.mark.unit
def test_calculate_pagination_last_page_is_not_directly_reachable() -> None:
    # 开区间边界: page == max_page 时回落为 1
    state = calculate_pagination(100, 10, 10)

    assert state.max_page == 10
    assert state.page == 1


@pytest.mark.unit
def test_calculate_pagination_accepts_numeric_strings_and_keeps_raw_request() -> None:
    state = calculate_pagination(95, "3", " 20 ")

    assert state.page == 3
    assert state.per_page == 20
    assert state.max_page == 5
    assert state.requested_page == "3"
    assert state.requested_per_page == " 20 "


@pytest.mark.unit
def test_calculate_pagination_respects_custom_bounds_and_default() -> None:
    state = calculate_pagination(100, 2, 50, per_page_bounds=(1, 25), default_per_page=5)

    assert state.per_page == 5
    assert state.max_page == 20
    assert state.page == 2
    assert state.offset == 5


@pytest.mark.unit
def test_calculate_pagination_clamps_negative_total() -> None:
    state = calculate_pagination(-3, 2, 10)

    assert state.total_count == 0
    assert state.max_page == 0
    assert state.page == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    ("requested", "expected"),
    [(1, 10), (2, 2), (999, 999), (1000, 10), (0, 10), (-5, 10), (None, 10), (True, 10), ("x", 10), ("", 10)],
)
def test_resolve_per_page_exclusive_bounds(requested, expected) -> None:
    assert resolve_per_page(requested) == expected


@pytest.mark.unit
@pytest.mark.parametrize(("requested", "max_page", "expected"), [(1, 5, 1), (2, 5, 2), (4, 5, 4), (5, 5, 1), (0, 5, 1)])
def test_resolve_page_exclusive_bounds(requested, max_page, expected) -> None:
    assert resolve_page(requested, max_page) == expected


@pytest.mark.unit
@pytest.mark.parametrize(("total", "per_page", "expected"), [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (52, 10, 6)])
def test_compute_max_page(total, per_page, expected) -> None:
    assert compute_max_page(total, per_page) == expected


@pytest.mark.unit
def test_offset_invariant_holds_for_all_states() -> None:
    for total in (0, 1, 9, 10, 11, 52, 100, 1001):
        for page in (-1, 0, 1, 2, 3, 7, 50, 200):
            for per_page in (0, 1, 2, 10, 25, 999, 1000):
                state = calculate_pagination(total, page, per_page)
                assert state.offset == state.per_page * (state.page - 1)
                if state.max_page >= 1:
                    assert 1 <= state.page <= state.max_page
                else:
                    assert state.page == 1


@pytest.mark.unit
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_calculate_pagination_non_finite_input_falls_back_to_defaults(value) -> None:
    state = calculate_pagination(100, value, value)

    assert state.page == 1
    assert state.per_page == 10
    assert state.offset == 0
