"""Names used in generated code for tables, columns and relationships."""

from __future__ import annotations

import dataclasses
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field

from boilgen.schema import Table
from boilgen.text_helpers import (
    camel_case,
    plural,
    singular,
    title_case,
    txt_name_to_many,
    txt_name_to_one,
)


@dataclass(frozen=True)
class RelationshipAlias:
    """The names of both sides of a foreign key."""

    local: str = ""
    foreign: str = ""


@dataclass
class TableAlias:
    """The spellings of a table name, and its column and relationship aliases."""

    up_plural: str = ""
    up_singular: str = ""
    down_plural: str = ""
    down_singular: str = ""
    columns: dict[str, str] | None = None
    relationships: dict[str, RelationshipAlias] | None = None

    def column(self, column: str) -> str:
        """The alias of ``column``; KeyError if there is none."""
        try:
            return (self.columns or {})[column]
        except KeyError:
            raise KeyError(
                f"could not find column alias for: {self.up_singular}.{column}"
            ) from None

    def relationship(self, fkey: str) -> RelationshipAlias:
        """The alias of the relationship named ``fkey``; KeyError if there is none."""
        try:
            return (self.relationships or {})[fkey]
        except KeyError:
            raise KeyError(
                f"could not find relationship alias for: {self.up_singular}.{fkey}"
            ) from None


@dataclass
class Aliases:
    """Aliases for every table of a generation run."""

    tables: dict[str, TableAlias] = field(default_factory=dict)

    def table(self, name: str) -> TableAlias:
        """The aliases of table ``name``; KeyError if there are none."""
        try:
            return self.tables[name]
        except KeyError:
            raise KeyError(f"could not find table aliases for: {name}") from None

    def many_relationship(
        self, table: str, fkey: str, join_table: str, join_table_fkey: str
    ) -> RelationshipAlias:
        """Look up a relationship through the join table if one is given,
        otherwise on ``table`` directly."""
        if join_table:
            return self.table(join_table).relationship(join_table_fkey)
        return self.table(table).relationship(fkey)


def _starts_with_number(name: str) -> bool:
    return bool(name) and unicodedata.category(name[0]).startswith("N")


def _fill_table(aliases: Aliases, table: Table) -> None:
    existing = aliases.tables.get(table.name)
    alias = dataclasses.replace(existing) if existing is not None else TableAlias()

    if not alias.up_plural:
        alias.up_plural = title_case(plural(table.name))
    if not alias.up_singular:
        alias.up_singular = title_case(singular(table.name))
    if not alias.down_plural:
        alias.down_plural = camel_case(plural(table.name))
    if not alias.down_singular:
        alias.down_singular = camel_case(singular(table.name))

    if alias.columns is None:
        alias.columns = {}
    if alias.relationships is None:
        alias.relationships = {}

    for col in table.columns:
        name = alias.columns.setdefault(col.name, title_case(col.name))
        if _starts_with_number(name):
            alias.columns[col.name] = "C" + name

    aliases.tables[table.name] = alias

    for fk in table.f_keys:
        rel = alias.relationships.get(fk.name, RelationshipAlias())
        if rel.local and rel.foreign:
            continue
        local, foreign = txt_name_to_one(fk)
        alias.relationships[fk.name] = RelationshipAlias(
            local=rel.local or local, foreign=rel.foreign or foreign
        )


def _fill_join_table(aliases: Aliases, table: Table) -> None:
    alias = aliases.tables[table.name]
    if alias.relationships is None:
        alias.relationships = {}
    rels = alias.relationships

    lhs, rhs = table.f_keys[0], table.f_keys[1]
    lhs_alias = rels.get(lhs.name, RelationshipAlias())
    rhs_alias = rels.get(rhs.name, RelationshipAlias())

    if lhs_alias.local and lhs_alias.foreign and rhs_alias.local and rhs_alias.foreign:
        return

    # Local and foreign are reversed here so that, as for one-to-many
    # relationships, local names the side that would hold the foreign key.
    lhs_name, rhs_name = txt_name_to_many(lhs, rhs)

    if lhs_alias.local:
        rhs_name = lhs_alias.local
    elif rhs_alias.local:
        lhs_name = rhs_alias.local

    if lhs_alias.foreign:
        lhs_name = lhs_alias.foreign
    elif rhs_alias.foreign:
        rhs_name = rhs_alias.foreign

    rels[lhs.name] = RelationshipAlias(
        local=lhs_alias.local or rhs_name, foreign=lhs_alias.foreign or lhs_name
    )
    rels[rhs.name] = RelationshipAlias(
        local=rhs_alias.local or lhs_name, foreign=rhs_alias.foreign or rhs_name
    )


def fill_aliases(aliases: Aliases, tables: Iterable[Table]) -> None:
    """Fill in every alias the user left blank, in place."""
    tables = list(tables)
    if aliases.tables is None:
        aliases.tables = {}

    for table in tables:
        if table.is_join_table:
            existing = aliases.tables.get(table.name)
            if existing is None:
                aliases.tables[table.name] = TableAlias(relationships={})
            elif existing.relationships is None:
                existing.relationships = {}
            continue
        _fill_table(aliases, table)

    for table in tables:
        if table.is_join_table:
            _fill_join_table(aliases, table)