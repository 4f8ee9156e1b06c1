"""Columns, keys and column definitions as reported by a database driver."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from boilgen.text_helpers import title_case

_ENUM_RE = re.compile(r"enum(\.\w+)?\([^)]+\)", re.ASCII)


def _text(data: Mapping[str, Any], key: str) -> str:
    return data.get(key) or ""


def _flag(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key, False))


@dataclass
class Column:
    """A database column; ``type`` is the generated-code type."""

    name: str = ""
    type: str = ""
    db_type: str = ""
    default: str = ""
    comment: str = ""
    nullable: bool = False
    unique: bool = False
    validated: bool = False
    auto_generated: bool = False
    arr_type: str | None = None
    udt_name: str = ""
    domain_name: str | None = None
    full_db_type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Column:
        return cls(
            name=_text(data, "name"),
            type=_text(data, "type"),
            db_type=_text(data, "db_type"),
            default=_text(data, "default"),
            comment=_text(data, "comment"),
            nullable=_flag(data, "nullable"),
            unique=_flag(data, "unique"),
            validated=_flag(data, "validated"),
            auto_generated=_flag(data, "auto_generated"),
            arr_type=data.get("arr_type"),
            udt_name=_text(data, "udt_name"),
            domain_name=data.get("domain_name"),
            full_db_type=_text(data, "full_db_type"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "db_type": self.db_type,
            "default": self.default,
            "comment": self.comment,
            "nullable": self.nullable,
            "unique": self.unique,
            "validated": self.validated,
            "auto_generated": self.auto_generated,
            "arr_type": self.arr_type,
            "udt_name": self.udt_name,
            "domain_name": self.domain_name,
            "full_db_type": self.full_db_type,
        }


@dataclass
class PrimaryKey:
    """A primary key constraint."""

    name: str = ""
    columns: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrimaryKey:
        return cls(name=_text(data, "name"), columns=list(data.get("columns") or []))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "columns": list(self.columns)}


@dataclass
class ForeignKey:
    """A foreign key constraint."""

    table: str = ""
    name: str = ""
    column: str = ""
    nullable: bool = False
    unique: bool = False
    foreign_table: str = ""
    foreign_column: str = ""
    foreign_column_nullable: bool = False
    foreign_column_unique: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ForeignKey:
        return cls(
            table=_text(data, "table"),
            name=_text(data, "name"),
            column=_text(data, "column"),
            nullable=_flag(data, "nullable"),
            unique=_flag(data, "unique"),
            foreign_table=_text(data, "foreign_table"),
            foreign_column=_text(data, "foreign_column"),
            foreign_column_nullable=_flag(data, "foreign_column_nullable"),
            foreign_column_unique=_flag(data, "foreign_column_unique"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "table": self.table,
            "name": self.name,
            "column": self.column,
            "nullable": self.nullable,
            "unique": self.unique,
            "foreign_table": self.foreign_table,
            "foreign_column": self.foreign_column,
            "foreign_column_nullable": self.foreign_column_nullable,
            "foreign_column_unique": self.foreign_column_unique,
        }


@dataclass(frozen=True)
class SQLColumnDef:
    """A column name and type, rendered like an SQL column definition."""

    name: str = ""
    type: str = ""

    def __str__(self) -> str:
        return f"{self.name} {self.type}"


class SQLColumnDefs(list):
    """A list of column definitions."""

    def names(self) -> list[str]:
        return [definition.name for definition in self]

    def types(self) -> list[str]:
        return [definition.type for definition in self]


def column_names(cols: Iterable[Column]) -> list[str]:
    """The names of the columns, in order."""
    return [col.name for col in cols]


def column_db_types(cols: Iterable[Column]) -> dict[str, str]:
    """Map each column's title-cased name to its database type."""
    return {title_case(col.name): col.db_type for col in cols}


def filter_columns_by_auto(auto: bool, columns: Iterable[Column]) -> list[Column]:
    """Columns whose auto-generated flag equals ``auto``."""
    return [col for col in columns if col.auto_generated == auto]


def filter_columns_by_default(defaults: bool, columns: Iterable[Column]) -> list[Column]:
    """Columns that have a default value (or lack one, if ``defaults`` is false)."""
    return [col for col in columns if bool(col.default) == defaults]


def is_enum_db_type(db_type: str) -> bool:
    """Tell whether a database type is an enum type."""
    return _ENUM_RE.fullmatch(db_type) is not None


def filter_columns_by_enum(columns: Iterable[Column]) -> list[Column]:
    """Columns whose database type is an enum."""
    return [col for col in columns if is_enum_db_type(col.db_type)]


def sql_col_definitions(cols: Iterable[Column], names: Iterable[str]) -> SQLColumnDefs:
    """Definitions for the named columns; unknown names give an empty definition."""
    by_name = {col.name: col for col in cols}
    return SQLColumnDefs(
        SQLColumnDef(name, by_name[name].type) if name in by_name else SQLColumnDef()
        for name in names
    )