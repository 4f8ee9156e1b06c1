"""Tables, dialects and database information, and the filters applied to them."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from boilgen.dbcolumn import Column, ForeignKey, PrimaryKey


def _rune(value: Any) -> str:
    """Read a quote character given as a code point or a one-letter string."""
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value) if value else ""
    if isinstance(value, str):
        return value
    return ""


def _code_point(char: str) -> int:
    return ord(char) if char else 0


@dataclass
class Dialect:
    """The features a database speaks and the quote characters it uses."""

    lq: str = ""
    rq: str = ""
    use_index_placeholders: bool = False
    use_last_insert_id: bool = False
    use_schema: bool = False
    use_default_keyword: bool = False
    use_top_clause: bool = False
    use_output_clause: bool = False
    use_case_when_exists_clause: bool = False
    use_auto_columns: bool = False

    _FLAGS = (
        "use_index_placeholders",
        "use_last_insert_id",
        "use_schema",
        "use_default_keyword",
        "use_top_clause",
        "use_output_clause",
        "use_case_when_exists_clause",
        "use_auto_columns",
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Dialect:
        data = data or {}
        flags = {name: bool(data.get(name, False)) for name in cls._FLAGS}
        return cls(lq=_rune(data.get("lq")), rq=_rune(data.get("rq")), **flags)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "lq": _code_point(self.lq),
            "rq": _code_point(self.rq),
        }
        result.update({name: getattr(self, name) for name in self._FLAGS})
        return result


@dataclass
class Table:
    """A table or view with its columns, keys and relationships."""

    name: str = ""
    schema_name: str = ""
    columns: list[Column] = field(default_factory=list)
    p_key: PrimaryKey | None = None
    f_keys: list[ForeignKey] = field(default_factory=list)
    is_join_table: bool = False
    is_view: bool = False
    view_capabilities: dict[str, Any] = field(default_factory=dict)
    to_one_relationships: list[dict[str, Any]] = field(default_factory=list)
    to_many_relationships: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Table:
        p_key = data.get("p_key")
        return cls(
            name=data.get("name") or "",
            schema_name=data.get("schema_name") or "",
            columns=[Column.from_dict(c) for c in data.get("columns") or []],
            p_key=PrimaryKey.from_dict(p_key) if p_key is not None else None,
            f_keys=[ForeignKey.from_dict(k) for k in data.get("f_keys") or []],
            is_join_table=bool(data.get("is_join_table", False)),
            is_view=bool(data.get("is_view", False)),
            view_capabilities=dict(data.get("view_capabilities") or {}),
            to_one_relationships=[dict(r) for r in data.get("to_one_relationships") or []],
            to_many_relationships=[dict(r) for r in data.get("to_many_relationships") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "schema_name": self.schema_name,
            "columns": [c.to_dict() for c in self.columns],
            "p_key": self.p_key.to_dict() if self.p_key is not None else None,
            "f_keys": [k.to_dict() for k in self.f_keys],
            "is_join_table": self.is_join_table,
            "is_view": self.is_view,
            "view_capabilities": dict(self.view_capabilities),
            "to_one_relationships": [dict(r) for r in self.to_one_relationships],
            "to_many_relationships": [dict(r) for r in self.to_many_relationships],
        }


@dataclass
class DBInfo:
    """The tables of a database schema together with its dialect."""

    schema: str = ""
    tables: list[Table] = field(default_factory=list)
    dialect: Dialect = field(default_factory=Dialect)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> DBInfo:
        data = data or {}
        return cls(
            schema=data.get("schema") or "",
            tables=[Table.from_dict(t) for t in data.get("tables") or []],
            dialect=Dialect.from_dict(data.get("dialect")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema,
            "tables": [t.to_dict() for t in self.tables],
            "dialect": self.dialect.to_dict(),
        }


def known_column(
    table: str,
    column: str,
    whitelist: Sequence[str] | None,
    blacklist: Sequence[str] | None,
) -> bool:
    """Tell whether a column passes the white- and blacklist."""
    whitelist = whitelist or ()
    blacklist = blacklist or ()
    names = (table, f"{table}.{column}", f"*.{column}")
    allowed = not whitelist or any(name in whitelist for name in names)
    denied = any(name in blacklist for name in names)
    return allowed and not denied


def filter_primary_key(
    table: Table, whitelist: Sequence[str] | None, blacklist: Sequence[str] | None
) -> None:
    """Drop primary key columns that the lists exclude."""
    if table.p_key is None:
        return
    table.p_key.columns = [
        col
        for col in table.p_key.columns
        if known_column(table.name, col, whitelist, blacklist)
    ]


def filter_foreign_keys(
    table: Table, whitelist: Sequence[str] | None, blacklist: Sequence[str] | None
) -> None:
    """Drop foreign keys whose local or foreign column the lists exclude."""
    table.f_keys = [
        fk
        for fk in table.f_keys
        if known_column(fk.foreign_table, fk.foreign_column, whitelist, blacklist)
        and known_column(fk.table, fk.column, whitelist, blacklist)
    ]


def set_is_join_table(table: Table) -> None:
    """Mark a table as a join table.

    A join table has a two-column primary key, both columns of which are
    foreign keys, and no more than two columns.
    """
    if (
        table.p_key is None
        or len(table.p_key.columns) != 2
        or len(table.f_keys) < 2
        or len(table.columns) > 2
    ):
        return
    fk_columns = {fk.column for fk in table.f_keys}
    if all(col in fk_columns for col in table.p_key.columns):
        table.is_join_table = True