"""Preparation steps for a generation run.

These cover type replacement, validation of keys and tags, template
discovery and grouping, and the output folders.
"""

from __future__ import annotations

import dataclasses
import os
import re
import shutil
from collections.abc import Iterable, Sequence

from boilgen.config import Config, ImportSet, TypeReplace
from boilgen.dbcolumn import Column
from boilgen.output import get_long_ext, output_filename_parts
from boilgen.schema import Table
from boilgen.templates import FileLoader, template_names

_VALID_TAG = re.compile(r"[a-zA-Z_.]+")
_VALID_TABLE_COLUMN = re.compile(r"\w+\.\w+|\w+", re.ASCII)


def match_column(column: Column, matcher: Column) -> bool:
    """Tell whether ``column`` matches every field set on ``matcher``.

    String fields match when the matcher leaves them empty or they are equal.
    The nullable and auto-generated flags must always be equal. Uniqueness is
    not considered.
    """
    for attr in ("name", "type", "db_type", "udt_name", "full_db_type"):
        wanted = getattr(matcher, attr)
        if wanted and wanted != getattr(column, attr):
            return False

    for attr in ("arr_type", "domain_name"):
        wanted = getattr(matcher, attr)
        if wanted is None:
            continue
        actual = getattr(column, attr)
        if actual is None or (wanted and wanted != actual):
            return False

    return (
        matcher.auto_generated == column.auto_generated
        and matcher.nullable == column.nullable
    )


def column_merge(dst: Column, src: Column) -> Column:
    """A copy of ``dst`` with the non-empty type fields of ``src`` applied.

    The name is never replaced.
    """
    changes = {
        attr: getattr(src, attr)
        for attr in ("type", "db_type", "udt_name", "full_db_type", "arr_type")
        if getattr(src, attr)
    }
    return dataclasses.replace(dst, **changes)


def should_replace_in_table(table: Table, replace: TypeReplace) -> bool:
    """Tell whether a replacement applies to ``table``.

    A replacement without tables applies everywhere.
    """
    return not replace.tables or table.name in replace.tables


def process_type_replacements(config: Config, tables: Sequence[Table]) -> None:
    """Apply the configured type replacements to the tables, in place.

    The imports of each replaced type are recorded in
    ``config.imports["based_on_type"]``. When replaced enum types are skipped,
    the original types are added to ``config.discarded_enum_types``, unless
    some replacement produces them.
    """
    mandatory: list[str] = []
    if config.skip_replaced_enum_types:
        for replace in config.type_replaces:
            if replace.replace.type not in mandatory:
                mandatory.append(replace.replace.type)

    based_on_type = config.imports.setdefault("based_on_type", {})

    for replace in config.type_replaces:
        for table in tables:
            if not should_replace_in_table(table, replace):
                continue
            for index, column in enumerate(table.columns):
                if not match_column(column, replace.match):
                    continue
                if (
                    config.skip_replaced_enum_types
                    and column.type not in config.discarded_enum_types
                    and column.type not in mandatory
                ):
                    config.discarded_enum_types.append(column.type)

                merged = column_merge(column, replace.replace)
                table.columns[index] = merged

                if replace.imports.standard or replace.imports.third_party:
                    based_on_type[merged.type] = ImportSet(
                        standard=list(replace.imports.standard),
                        third_party=list(replace.imports.third_party),
                    )


def check_pkeys(tables: Iterable[Table]) -> None:
    """Raise ValueError naming every table (not view) without a primary key."""
    missing = [t.name for t in tables if not t.is_view and t.p_key is None]
    if missing:
        raise ValueError(f"primary key missing in tables ({', '.join(missing)})")


def validate_tags(tags: Iterable[str]) -> list[str]:
    """Remove duplicate tags and check that each is a plain name such as ``xml``."""
    unique = list(dict.fromkeys(tags))
    for tag in unique:
        if not _VALID_TAG.search(tag):
            raise ValueError(
                f"Invalid tag format {tag!r} supplied, only specify name, eg: xml"
            )
    return unique


def validate_tag_ignore(items: Iterable[str]) -> set[str]:
    """Check that each entry is ``column`` or ``table.column``; return them as a set."""
    result = set()
    for item in items:
        if not _VALID_TABLE_COLUMN.fullmatch(item):
            raise ValueError(
                f"Invalid column name {item!r} supplied, only specify column name "
                "or table.column, eg: created_at, user.password"
            )
        result.add(item)
    return result


def normalize_slashes(path: str) -> str:
    """Convert both kinds of slash to the native path separator."""
    return path.replace("/", os.sep).replace("\\", os.sep)


def denormalize_slashes(path: str) -> str:
    """Convert backslashes to forward slashes."""
    return path.replace("\\", "/")


def find_templates(root: str, base: str) -> dict[str, FileLoader]:
    """Map each ``.tpl`` file under ``root/base`` to a loader.

    Keys are paths relative to ``root`` without a leading separator, such as
    ``templates/00_struct.go.tpl``.
    """
    root_base = os.path.join(root, base)
    if not os.path.isdir(root_base):
        raise FileNotFoundError(f"template directory not found: {root_base}")

    templates: dict[str, FileLoader] = {}
    for dirpath, _dirnames, filenames in os.walk(root_base):
        for filename in filenames:
            if os.path.splitext(filename)[1] != ".tpl":
                continue
            path = os.path.join(dirpath, filename)
            relative = os.path.relpath(path, root).lstrip(os.sep)
            templates[relative] = FileLoader(path)
    return templates


def group_templates(names: Iterable[str]) -> dict[str, dict[str, list[str]]]:
    """Group non-singleton templates by output directory, then by extension.

    The top-level directory is ``""`` for templates written into the package
    itself; extensions have ``.tpl`` removed, e.g. ``.go``.
    """
    groups: dict[str, dict[str, list[str]]] = {}
    for name in template_names(names):
        normalized, is_singleton, _is_go, _use_pkg = output_filename_parts(name)
        if is_singleton:
            continue
        directory = os.path.dirname(normalized)
        ext = get_long_ext(name).removesuffix(".tpl")
        groups.setdefault(directory, {}).setdefault(ext, []).append(name)
    return groups


def init_out_folders(
    out_folder: str, template_names: Iterable[str], wipe: bool = False
) -> set[str]:
    """Create the output folder and the subfolders the templates write into.

    With ``wipe`` the output folder is removed first. Returns the relative
    subfolders that were created.
    """
    if wipe:
        shutil.rmtree(out_folder, ignore_errors=True)

    new_dirs: set[str] = set()
    for name in template_names:
        fragments = name.split(os.sep)[1:-1]
        if fragments and fragments[-1] == "singleton":
            fragments = fragments[:-1]
        if fragments:
            new_dirs.add(os.sep.join(fragments))

    os.makedirs(out_folder, exist_ok=True)
    for directory in new_dirs:
        os.makedirs(os.path.join(out_folder, directory), exist_ok=True)
    return new_dirs