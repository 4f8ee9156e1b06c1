import pytest

from boilgen.columns import (
    Columns,
    ColumnsKind,
    blacklist,
    greylist,
    infer,
    no_columns,
    set_complement,
    set_merge,
    sort_by_keys,
    whitelist,
)


def test_whitelist_kind_and_cols():
    cols = whitelist("a", "b")
    assert cols.kind is ColumnsKind.WHITELIST
    assert cols.is_whitelist()
    assert list(cols.cols) == ["a", "b"]


def test_blacklist_kind_and_cols():
    cols = blacklist("a", "b")
    assert cols.kind is ColumnsKind.BLACKLIST
    assert cols.is_blacklist()
    assert list(cols.cols) == ["a", "b"]


def test_greylist_kind_and_cols():
    cols = greylist("a", "b")
    assert cols.kind is ColumnsKind.GREYLIST
    assert cols.is_greylist()
    assert list(cols.cols) == ["a", "b"]


def test_infer_has_no_columns():
    cols = infer()
    assert cols.is_infer()
    assert len(cols.cols) == 0


def test_none_is_none():
    cols = no_columns()
    assert cols.is_none()
    assert not cols.is_infer()


COLUMNS = ["a", "b", "c"]
DEFAULTS = ["a", "c"]
NO_DEFAULTS = ["b"]


@pytest.mark.parametrize(
    "columns, defaults, no_defaults, non_zero, expected_set, expected_ret",
    [
        (infer(), None, None, None, ["b"], ["a", "c"]),
        (infer(), [], ["a", "b", "c"], None, ["a", "b", "c"], []),
        (infer(), None, None, ["a"], ["a", "b"], ["c"]),
        (infer(), None, None, ["c"], ["b", "c"], ["a"]),
        (whitelist("a"), None, None, None, ["a"], ["c"]),
        (whitelist("c"), None, None, None, ["c"], ["a"]),
        (whitelist("a", "c"), None, None, None, ["a", "c"], []),
        (whitelist("a", "b", "c"), None, None, None, ["a", "b", "c"], []),
        (whitelist("a"), None, None, ["c"], ["a"], ["c"]),
        (whitelist("c"), None, None, ["b"], ["c"], ["a"]),
        (blacklist("b"), None, None, ["c"], ["c"], ["a"]),
        (blacklist("c"), None, None, ["c"], ["b"], ["a", "c"]),
        (greylist("c"), None, None, [], ["b", "c"], ["a"]),
        (greylist("a"), None, None, [], ["a", "b"], ["c"]),
    ],
)
def test_insert_column_set(
    columns, defaults, no_defaults, non_zero, expected_set, expected_ret
):
    insert, ret = columns.insert_column_set(
        COLUMNS,
        DEFAULTS if defaults is None else defaults,
        NO_DEFAULTS if no_defaults is None else no_defaults,
        non_zero,
    )
    assert insert == expected_set
    assert ret == expected_ret


def test_insert_column_set_none_is_empty():
    assert no_columns().insert_column_set(COLUMNS, DEFAULTS, NO_DEFAULTS, []) == ([], [])


@pytest.mark.parametrize(
    "columns, cols, pkeys, expected",
    [
        (infer(), ["a", "b"], ["a"], ["b"]),
        (whitelist("a"), ["a", "b"], ["a"], ["a"]),
        (whitelist("a", "b"), ["a", "b"], ["a"], ["a", "b"]),
        (blacklist("b"), ["a", "b"], ["a"], []),
        (greylist("a"), ["a", "b"], ["a"], ["a", "b"]),
    ],
)
def test_update_column_set(columns, cols, pkeys, expected):
    assert columns.update_column_set(cols, pkeys) == expected


def test_update_column_set_none_is_empty():
    assert no_columns().update_column_set(["a", "b"], ["a"]) == []


def test_set_complement_keeps_order():
    assert set_complement(["c", "a", "b"], ["a"]) == ["c", "b"]


def test_set_merge_appends_missing():
    assert set_merge(["a", "b"], ["b", "c"]) == ["a", "b", "c"]


def test_sort_by_keys_orders_by_key_position():
    assert sort_by_keys(["a", "b", "c"], ["c", "a"]) == ["a", "c"]


def test_columns_is_immutable():
    cols = whitelist("a")
    with pytest.raises(AttributeError):
        cols.kind = ColumnsKind.NONE  # type: ignore[misc]
    assert isinstance(cols, Columns) and cols.is_whitelist()