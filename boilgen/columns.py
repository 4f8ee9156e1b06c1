"""Column lists that steer which columns an insert or update touches."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class ColumnsKind(enum.Enum):
    """How a column list interacts with column inference."""

    NONE = enum.auto()
    INFER = enum.auto()
    WHITELIST = enum.auto()
    GREYLIST = enum.auto()
    BLACKLIST = enum.auto()


def set_complement(a: Iterable[str], b: Iterable[str]) -> list[str]:
    """Return the items of ``a`` that are not in ``b``, keeping the order of ``a``."""
    excluded = set(b)
    return [item for item in a if item not in excluded]


def set_merge(a: Sequence[str], b: Iterable[str]) -> list[str]:
    """Return ``a`` followed by the items of ``b`` that ``a`` lacks."""
    present = set(a)
    return list(a) + [item for item in b if item not in present]


def sort_by_keys(keys: Sequence[str], items: Iterable[str]) -> list[str]:
    """Order ``items`` by their position in ``keys``; unknown items go last."""
    position = {key: index for index, key in enumerate(keys)}
    missing = len(position)
    return sorted(items, key=lambda item: position.get(item, missing))


@dataclass(frozen=True)
class Columns:
    """A list of columns together with the kind of list it is."""

    kind: ColumnsKind
    cols: tuple[str, ...] = ()

    def is_none(self) -> bool:
        return self.kind is ColumnsKind.NONE

    def is_infer(self) -> bool:
        return self.kind is ColumnsKind.INFER

    def is_whitelist(self) -> bool:
        return self.kind is ColumnsKind.WHITELIST

    def is_blacklist(self) -> bool:
        return self.kind is ColumnsKind.BLACKLIST

    def is_greylist(self) -> bool:
        return self.kind is ColumnsKind.GREYLIST

    def insert_column_set(
        self,
        cols: Sequence[str],
        defaults: Sequence[str],
        no_defaults: Sequence[str],
        non_zero_defaults: Sequence[str] | None,
    ) -> tuple[list[str], list[str]]:
        """Return the columns to insert and the columns to read back.

        None:      insert nothing, return nothing.
        Infer:     insert no-default + non-zero-default columns; return defaults - insert.
        Whitelist: insert the whitelist; return defaults - whitelist.
        Blacklist: as infer, minus the blacklist.
        Greylist:  as infer, plus the greylist.
        """
        non_zero = list(non_zero_defaults or ())
        if self.kind is ColumnsKind.NONE:
            return [], []
        if self.kind is ColumnsKind.WHITELIST:
            return list(self.cols), set_complement(defaults, self.cols)

        inferred = list(no_defaults) + non_zero
        if self.kind is ColumnsKind.INFER:
            insert = inferred
        elif self.kind is ColumnsKind.BLACKLIST:
            insert = set_complement(inferred, self.cols)
        elif self.kind is ColumnsKind.GREYLIST:
            insert = set_merge(inferred, self.cols)
        else:
            raise ValueError("not a real column list kind")

        insert = sort_by_keys(cols, insert)
        return insert, set_complement(defaults, insert)

    def update_column_set(
        self, all_columns: Sequence[str], pkey_cols: Sequence[str]
    ) -> list[str]:
        """Return the columns to update.

        None: nothing; Infer: all - pkeys; Whitelist: the whitelist;
        Blacklist: all - pkeys - blacklist; Greylist: all - pkeys + greylist.
        """
        if self.kind is ColumnsKind.NONE:
            return []
        if self.kind is ColumnsKind.INFER:
            return set_complement(all_columns, pkey_cols)
        if self.kind is ColumnsKind.WHITELIST:
            return list(self.cols)
        if self.kind is ColumnsKind.BLACKLIST:
            return set_complement(set_complement(all_columns, pkey_cols), self.cols)
        if self.kind is ColumnsKind.GREYLIST:
            update = set_complement(all_columns, pkey_cols) + list(self.cols)
            return sort_by_keys(all_columns, update)
        raise ValueError("not a real column list kind")


def no_columns() -> Columns:
    """An empty column list: nothing is inferred."""
    return Columns(ColumnsKind.NONE)


def infer() -> Columns:
    """Infer the final list of columns."""
    return Columns(ColumnsKind.INFER)


def whitelist(*args: str) -> Columns:
    """A list that replaces inference entirely."""
    return Columns(ColumnsKind.WHITELIST, tuple(args))


def blacklist(*args: str) -> Columns:
    """A list of columns removed from the inferred list."""
    return Columns(ColumnsKind.BLACKLIST, tuple(args))


def greylist(*args: str) -> Columns:
    """A list of columns added to the inferred list."""
    return Columns(ColumnsKind.GREYLIST, tuple(args))