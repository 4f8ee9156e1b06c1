import pytest

from boilgen.dbcolumn import Column, ForeignKey, PrimaryKey
from boilgen.schema import (
    DBInfo,
    Dialect,
    Table,
    filter_foreign_keys,
    filter_primary_key,
    known_column,
    set_is_join_table,
)


def _table_one():
    return Table(
        name="one",
        columns=[
            Column(name="id"),
            Column(name="two_id"),
            Column(name="three_id"),
            Column(name="four_id"),
        ],
        f_keys=[
            ForeignKey(table="one", column="two_id", foreign_table="two", foreign_column="id"),
            ForeignKey(table="one", column="three_id", foreign_table="three", foreign_column="id"),
            ForeignKey(table="one", column="four_id", foreign_table="four", foreign_column="id"),
        ],
    )


@pytest.mark.parametrize(
    "whitelist, blacklist, expected",
    [
        ([], [], 3),
        (["one", "two", "three"], [], 2),
        (["one.two_id", "two"], [], 1),
        (["*.two_id", "two"], [], 1),
        ([], ["three", "four"], 1),
        ([], ["three.id"], 2),
        ([], ["one.two_id"], 2),
        ([], ["*.two_id"], 2),
        (["one", "two"], ["two"], 0),
    ],
)
def test_filter_foreign_keys(whitelist, blacklist, expected):
    table = _table_one()
    filter_foreign_keys(table, whitelist, blacklist)
    assert len(table.f_keys) == expected


@pytest.mark.parametrize(
    "table, column, whitelist, blacklist, expected",
    [
        ("one", "id", ["one"], [], True),
        ("one", "id", [], ["one"], False),
        ("one", "id", ["one.id"], [], True),
        ("one", "id", ["one.id"], ["one"], False),
        ("one", "id", ["two"], [], False),
        ("one", "id", ["two"], ["one"], False),
        ("one", "id", ["two.id"], [], False),
        ("one", "id", ["*.id"], [], True),
        ("one", "id", ["*.id"], ["*.id"], False),
    ],
)
def test_known_column(table, column, whitelist, blacklist, expected):
    assert known_column(table, column, whitelist, blacklist) is expected


def test_known_column_accepts_none_lists():
    assert known_column("one", "id", None, None) is True


@pytest.mark.parametrize(
    "pkey, fkey, should",
    [
        (["one", "two"], ["one", "two"], True),
        (["two", "one"], ["one", "two"], True),
        (["one"], ["one"], False),
        (["one", "two", "three"], ["one", "two"], False),
        (["one", "two", "three"], ["one", "two", "three"], False),
        (["one"], ["one", "two"], False),
        (["one", "two"], ["one"], False),
    ],
)
def test_set_is_join_table(pkey, fkey, should):
    table = Table(p_key=PrimaryKey(columns=list(pkey)))
    table.f_keys = [ForeignKey(column=k) for k in fkey]
    set_is_join_table(table)
    assert table.is_join_table is should


def test_set_is_join_table_rejects_extra_columns():
    table = Table(
        columns=[Column(name="one"), Column(name="two"), Column(name="extra")],
        p_key=PrimaryKey(columns=["one", "two"]),
        f_keys=[ForeignKey(column="one"), ForeignKey(column="two")],
    )
    set_is_join_table(table)
    assert table.is_join_table is False


def test_set_is_join_table_without_pkey():
    table = Table(f_keys=[ForeignKey(column="one"), ForeignKey(column="two")])
    set_is_join_table(table)
    assert table.is_join_table is False


def test_filter_primary_key_removes_blacklisted_column():
    table = Table(name="one", p_key=PrimaryKey(name="pk", columns=["id", "other"]))
    filter_primary_key(table, [], ["one.other"])
    assert table.p_key.columns == ["id"]


def test_filter_primary_key_with_whitelist():
    table = Table(name="one", p_key=PrimaryKey(name="pk", columns=["id", "other"]))
    filter_primary_key(table, ["*.other"], [])
    assert table.p_key.columns == ["other"]


def test_filter_primary_key_without_pkey():
    table = Table(name="one")
    filter_primary_key(table, ["x"], ["y"])
    assert table.p_key is None


def test_dialect_from_dict_reads_code_points():
    dialect = Dialect.from_dict({"lq": 91, "rq": 93, "use_last_insert_id": True})
    assert dialect.lq == "["
    assert dialect.rq == "]"
    assert dialect.use_last_insert_id is True
    assert dialect.use_schema is False


def test_dialect_round_trip():
    dialect = Dialect(lq='"', rq='"', use_schema=True, use_top_clause=True)
    data = dialect.to_dict()
    assert data["lq"] == 34
    assert Dialect.from_dict(data) == dialect


def test_dbinfo_from_dict():
    info = DBInfo.from_dict(
        {
            "schema": "public",
            "tables": [
                {
                    "name": "users",
                    "columns": [{"name": "id", "type": "int", "db_type": "integer"}],
                    "p_key": {"name": "pk_users", "columns": ["id"]},
                    "f_keys": [
                        {
                            "table": "users",
                            "name": "fk",
                            "column": "profile_id",
                            "foreign_table": "profiles",
                            "foreign_column": "id",
                        }
                    ],
                }
            ],
            "dialect": {"lq": 96, "rq": 96},
        }
    )
    assert info.schema == "public"
    table = info.tables[0]
    assert table.name == "users"
    assert table.columns[0].db_type == "integer"
    assert table.p_key == PrimaryKey(name="pk_users", columns=["id"])
    assert table.f_keys[0].foreign_table == "profiles"
    assert info.dialect.lq == "`"


def test_dbinfo_from_none_is_empty():
    assert DBInfo.from_dict(None) == DBInfo()


def test_dbinfo_round_trip():
    info = DBInfo(
        schema="dbo",
        tables=[
            Table(
                name="t",
                columns=[Column(name="id", type="int", arr_type="text")],
                p_key=PrimaryKey(name="pk", columns=["id"]),
                is_view=True,
                to_one_relationships=[{"table": "t", "name": "rel"}],
            )
        ],
        dialect=Dialect(lq="[", rq="]", use_output_clause=True),
    )
    assert DBInfo.from_dict(info.to_dict()) == info