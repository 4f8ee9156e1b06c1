"""Driver configuration: a mapping with validating accessors."""

from __future__ import annotations

import os
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

from boilgen.dbcolumn import ForeignKey

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _coerce_int(value: Any) -> int | None:
    """Convert an int, float or integer string; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    return None


class DriverConfig(dict):
    """Configuration passed to a driver, with typed lookups."""

    def must_string(self, key: str) -> str:
        """A non-empty string that must be present."""
        if key not in self:
            raise KeyError(f"failed to find key {key} in config")
        value = self[key]
        if not isinstance(value, str):
            raise TypeError(
                f"found key {key} in config, but it was not a string ({type(value).__name__})"
            )
        if not value:
            raise ValueError(f"found key {key} in config, but it was an empty string")
        return value

    def must_int(self, key: str) -> int:
        """A non-zero integer that must be present."""
        if key not in self:
            raise KeyError(f"failed to find key {key} in config")
        value = self[key]
        if isinstance(value, str) and not _INT_RE.fullmatch(value):
            raise ValueError(f"failed to parse key {key} ({value}) to int")
        number = _coerce_int(value)
        if number is None:
            raise TypeError(
                f"found key {key} in config, but it was not an int ({type(value).__name__})"
            )
        if number == 0:
            raise ValueError(f"found key {key} in config, but its value was 0")
        return number

    def string(self, key: str) -> str | None:
        """The string at ``key``, or None if absent, not a string or empty."""
        value = self.get(key)
        if isinstance(value, str) and value:
            return value
        return None

    def default_string(self, key: str, default: str) -> str:
        value = self.string(key)
        return default if value is None else value

    def default_bool(self, key: str, default: bool) -> bool:
        value = self.get(key)
        return value if isinstance(value, bool) else default

    def int(self, key: str) -> int | None:
        """The non-zero integer at ``key``, or None; floats and digit strings count."""
        if key not in self:
            return None
        number = _coerce_int(self[key])
        return number or None

    def default_int(self, key: str, default: int) -> int:
        value = self.int(key)
        return default if value is None else value

    def string_slice(self, key: str) -> list[str] | None:
        """The non-empty list of strings at ``key``, or None."""
        value = self.get(key)
        if not isinstance(value, (list, tuple)):
            return None
        for item in value:
            if not isinstance(item, str):
                raise TypeError(f"found key {key} in config, but it held a non-string item")
        return list(value) or None

    def must_foreign_keys(self, key: str) -> list[ForeignKey]:
        """Foreign keys at ``key``: ForeignKey objects or mappings of their fields."""
        value = self.get(key)
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise TypeError(
                f"found key {key} in config, but it was invalid ({type(value).__name__})"
            )
        if all(isinstance(item, ForeignKey) for item in value):
            return list(value)

        keys = []
        for item in value:
            if not isinstance(item, dict):
                raise TypeError(
                    "found item of foreign keys, but it was not a mapping "
                    f"({type(item).__name__})"
                )
            fk = DriverConfig(item)
            keys.append(
                ForeignKey(
                    name=fk.must_string("name"),
                    table=fk.must_string("table"),
                    column=fk.must_string("column"),
                    foreign_table=fk.must_string("foreign_table"),
                    foreign_column=fk.must_string("foreign_column"),
                )
            )
        return keys


def default_env(key: str, default: str) -> str:
    """The environment variable ``key``, or ``default`` if unset or empty."""
    return os.environ.get(key) or default


def tables_from_list(items: Iterable[str] | None) -> list[str]:
    """Entries of a white- or blacklist that name whole tables."""
    return [item for item in items or () if "." not in item]


def columns_from_list(items: Iterable[str] | None, table_name: str) -> list[str]:
    """Columns a white- or blacklist names for ``table_name`` (``*`` matches any table)."""
    columns = []
    for item in items or ():
        parts = item.split(".")
        if len(parts) == 2 and parts[0] in (table_name, "*"):
            columns.append(parts[1])
    return columns


def combine_config_and_db_foreign_keys(
    config_foreign_keys: Sequence[ForeignKey],
    table_name: str,
    db_foreign_keys: Sequence[ForeignKey],
) -> list[ForeignKey]:
    """Merge configured and database keys for one table, one key per column.

    Configured keys win; composite database keys (a name seen more than once)
    are dropped.
    """
    name_count = Counter(fk.name for fk in db_foreign_keys)
    seen: set[str] = set()
    combined = []

    for fk in config_foreign_keys:
        if fk.table != table_name or fk.column in seen:
            continue
        combined.append(fk)
        seen.add(fk.column)

    for fk in db_foreign_keys:
        if fk.column in seen or name_count[fk.name] != 1:
            continue
        combined.append(fk)
        seen.add(fk.column)

    return combined