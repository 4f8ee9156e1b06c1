"""Generation settings and conversion of loosely typed configuration data."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from boilgen.aliases import Aliases, RelationshipAlias, TableAlias
from boilgen.dbcolumn import Column, ForeignKey
from boilgen.driverconfig import DriverConfig


class TagCase(str, enum.Enum):
    """How struct tag values are cased."""

    CAMEL = "camel"
    SNAKE = "snake"
    TITLE = "title"
    ALIAS = "alias"


@dataclass
class AutoColumns:
    """Column names for automatic timestamps and soft deletes."""

    created: str = ""
    updated: str = ""
    deleted: str = ""


@dataclass
class StructTagCases:
    """The casing of each kind of struct tag."""

    json: TagCase | None = None
    yaml: TagCase | None = None
    toml: TagCase | None = None
    boil: TagCase | None = None


def _string_map(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    return {}


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {type(value).__name__}")
    return value


def _string_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{key} must be a list of strings, got {type(value).__name__}")
    return [_as_str(item, key) for item in value]


@dataclass
class ImportSet:
    """Standard-library and third-party imports."""

    standard: list[str] = field(default_factory=list)
    third_party: list[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Any) -> ImportSet:
        """Build a set from a mapping with ``standard`` and ``third_party`` lists."""
        values = _string_map(data)
        return cls(
            standard=_string_list(values.get("standard"), "standard"),
            third_party=_string_list(values.get("third_party"), "third_party"),
        )


@dataclass
class TypeReplace:
    """Replace the type of every column that matches ``match``."""

    tables: list[str] = field(default_factory=list)
    views: list[str] = field(default_factory=list)
    match: Column = field(default_factory=Column)
    replace: Column = field(default_factory=Column)
    imports: ImportSet = field(default_factory=ImportSet)


@dataclass
class Inflections:
    """Custom inflection rules."""

    plural: dict[str, str] = field(default_factory=dict)
    plural_exact: dict[str, str] = field(default_factory=dict)
    singular: dict[str, str] = field(default_factory=dict)
    singular_exact: dict[str, str] = field(default_factory=dict)
    irregular: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Settings for one generation run."""

    driver_name: str = ""
    driver_config: DriverConfig = field(default_factory=DriverConfig)

    pkg_name: str = ""
    out_folder: str = ""
    template_dirs: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    replacements: list[str] = field(default_factory=list)
    debug: bool = False
    add_global: bool = False
    add_panic: bool = False
    add_soft_deletes: bool = False
    add_enum_types: bool = False
    skip_replaced_enum_types: bool = False
    enum_null_prefix: str = ""
    no_context: bool = False
    no_tests: bool = False
    no_hooks: bool = False
    no_auto_timestamps: bool = False
    no_rows_affected: bool = False
    no_driver_templates: bool = False
    no_back_referencing: bool = False
    no_relation_getters: bool = False
    always_wrap_errors: bool = False
    wipe: bool = False

    struct_tag_cases: StructTagCases = field(default_factory=StructTagCases)
    # Legacy setting, superseded by struct_tag_cases.
    struct_tag_casing: str = ""

    relation_tag: str = ""
    tag_ignore: list[str] = field(default_factory=list)

    imports: dict[str, Any] = field(default_factory=dict)

    discarded_enum_types: list[str] = field(default_factory=list)

    default_templates: Any = None
    custom_template_funcs: dict[str, Callable[..., Any]] = field(default_factory=dict)

    aliases: Aliases = field(default_factory=Aliases)
    type_replaces: list[TypeReplace] = field(default_factory=list)
    auto_columns: AutoColumns = field(default_factory=AutoColumns)
    inflections: Inflections = field(default_factory=Inflections)
    foreign_keys: list[ForeignKey] = field(default_factory=list)

    strict_verify_mod_version: bool = False

    version: str = ""

    def output_dir_depth(self) -> int:
        """How many directories deep the output folder lies."""
        cleaned = os.path.normpath(self.out_folder or ".").replace(os.sep, "/")
        if cleaned == ".":
            return 0
        return cleaned.count("/") + 1


def _iterate_map_or_list(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield (name, entry) from a mapping, or from a list of entries with a name key."""
    if isinstance(value, Mapping):
        yield from _string_map(value).items()
    elif isinstance(value, (list, tuple)):
        for entry in value:
            name = _string_map(entry).get("name")
            if not isinstance(name, str):
                raise TypeError("list entry must have a string name")
            yield name, entry


def _column_alias(value: Any) -> str:
    if isinstance(value, Mapping):
        return _as_str(_string_map(value).get("alias"), "alias")
    if isinstance(value, str):
        return value
    return ""


def _table_alias(value: Any) -> TableAlias:
    data = _string_map(value)
    alias = TableAlias()
    for key in ("up_plural", "up_singular", "down_plural", "down_singular"):
        if data.get(key) is not None:
            setattr(alias, key, _as_str(data[key], key))

    if "columns" in data:
        alias.columns = {
            name: _column_alias(col) for name, col in _iterate_map_or_list(data["columns"])
        }

    if "relationships" in data:
        for name, rel_value in _iterate_map_or_list(data["relationships"]):
            if alias.relationships is None:
                alias.relationships = {}
            rel = _string_map(rel_value)
            local = rel.get("local")
            foreign = rel.get("foreign")
            alias.relationships[name] = RelationshipAlias(
                local=_as_str(local, "local") if local is not None else "",
                foreign=_as_str(foreign, "foreign") if foreign is not None else "",
            )
    return alias


def convert_aliases(value: Any) -> Aliases:
    """Build Aliases from configuration data.

    Tables, columns and relationships may each be given as a mapping keyed
    by name, or as a list of entries carrying a ``name`` key.
    """
    aliases = Aliases()
    if value is None:
        return aliases
    top = _string_map(value)
    for name, table_value in _iterate_map_or_list(top.get("tables")):
        aliases.tables[name] = _table_alias(table_value)
    return aliases


def _column_from_value(value: Any) -> Column:
    data = _string_map(value)
    col = Column()
    for key, attr in (
        ("name", "name"),
        ("type", "type"),
        ("db_type", "db_type"),
        ("udt_name", "udt_name"),
        ("full_db_type", "full_db_type"),
        ("arr_type", "arr_type"),
        ("domain_name", "domain_name"),
    ):
        if data.get(key) is not None:
            setattr(col, attr, _as_str(data[key], key))
    for key in ("auto_generated", "nullable"):
        if data.get(key) is not None:
            setattr(col, key, _as_bool(data[key], key))
    return col


def convert_type_replace(value: Any) -> list[TypeReplace]:
    """Build the list of type replacements from configuration data."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"type replacements must be a list, got {type(value).__name__}")

    replaces = []
    for entry in value:
        data = _string_map(entry)
        if data.get("match") is None or data.get("replace") is None:
            raise ValueError("replace types must specify both match and replace")

        replace = TypeReplace(
            match=_column_from_value(data["match"]),
            replace=_column_from_value(data["replace"]),
            tables=_string_list(_string_map(data["match"]).get("tables"), "tables"),
        )
        if data.get("imports") is not None:
            replace.imports = ImportSet.from_mapping(data["imports"])
        replaces.append(replace)
    return replaces


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


def _validate_foreign_key(fk: ForeignKey) -> None:
    for attr, label in (
        ("name", "a name"),
        ("table", "a table"),
        ("column", "a column"),
        ("foreign_table", "a foreign table"),
        ("foreign_column", "a foreign column"),
    ):
        if not getattr(fk, attr):
            raise ValueError(f"foreign key must have {label}")


def convert_foreign_keys(value: Any) -> list[ForeignKey]:
    """Build foreign keys from configuration data, validating each of them.

    Keys may be given as a mapping keyed by name or as a list of entries
    carrying a ``name`` key. Two keys on the same table column are an error.
    """
    if value is None:
        return []

    keys = []
    for name, entry in _iterate_map_or_list(value):
        data = _string_map(entry)
        fk = ForeignKey(
            table=_to_str(data.get("table")),
            name=name,
            column=_to_str(data.get("column")),
            foreign_table=_to_str(data.get("foreign_table")),
            foreign_column=_to_str(data.get("foreign_column")),
        )
        try:
            _validate_foreign_key(fk)
        except ValueError as exc:
            raise ValueError(f"invalid foreign key {name}: {exc}") from exc
        keys.append(fk)

    seen: set[tuple[str, str]] = set()
    for fk in keys:
        location = (fk.table, fk.column)
        if location in seen:
            raise ValueError(
                f"invalid foreign keys: duplicate foreign key name: {fk.name}"
            )
        seen.add(location)
    return keys