"""Output file naming and writing for generated code."""

from __future__ import annotations

import os
import re
from pathlib import Path

_GOOS = frozenset(
    "aix android darwin dragonfly freebsd hurd illumos ios js linux nacl netbsd "
    "openbsd plan9 solaris windows zos".split()
)

_GOARCH = frozenset(
    "386 amd64 amd64p32 arm armbe arm64 arm64be loong64 mips mipsle mips64 "
    "mips64le mips64p32 mips64p32le ppc ppc64 ppc64le riscv riscv64 s390 s390x "
    "sparc sparc64 wasm".split()
)

_NUMBERED_PREFIX = re.compile(r"^[0-9]+_")


def disclaimer(version: str = "") -> str:
    """The do-not-edit notice written at the top of every generated Go file."""
    label = f" {version}" if version else ""
    return (
        f"// Code generated by boilgen{label}. DO NOT EDIT.\n"
        "// This file is meant to be re-generated in place and/or deleted at any time.\n"
        "\n"
    )


def package_header(pkg_name: str) -> str:
    """The package clause of a generated Go file."""
    return f"package {pkg_name}\n\n"


def get_long_ext(filename: str) -> str:
    """Everything from the first dot of ``filename`` on, e.g. ``.go.tpl``."""
    index = filename.find(".")
    if index < 0:
        raise ValueError(f"file name has no extension: {filename}")
    return filename[index:]


def ends_with_special_suffix(table_name: str) -> bool:
    """Tell whether the name ends in ``_test`` or an OS or architecture suffix.

    Such suffixes would turn a Go file into a build-constrained one.
    """
    parts = table_name.split("_")
    if len(parts) < 2:
        return False
    last = parts[-1]
    return last == "test" or last in _GOOS or last in _GOARCH


def get_output_filename(table_name: str, is_test: bool, is_go: bool) -> str:
    """The base name (without extension) of the file generated for a table."""
    name = table_name.replace("/", "_").replace("\\", "_")
    if name.startswith("_"):
        name = "und" + name
    if is_go and ends_with_special_suffix(name):
        name += "_model"
    if is_test:
        name += "_test"
    return name


def output_filename_parts(filename: str) -> tuple[str, bool, bool, bool]:
    """Split a template path into ``(normalized, is_singleton, is_go, use_pkg)``.

    ``templates/singleton/00_struct.go.tpl`` becomes ``struct.go``: the root
    directory, any ``singleton`` directory, the numbered prefix and the
    ``.tpl`` extension are dropped. ``use_pkg`` is true when the output lies
    directly in the package directory.
    """
    fragments = filename.split(os.sep)
    if len(fragments) < 2:
        raise ValueError(f"template path has no root directory: {filename}")
    is_singleton = fragments[-2] == "singleton"

    remaining = [part for part in fragments[1:] if part != "singleton"]
    last = remaining[-1]
    if last.endswith(".tpl"):
        last = last[: -len(".tpl")]
    remaining[-1] = _NUMBERED_PREFIX.sub("", last)

    is_go = os.path.splitext(remaining[-1])[1] == ".go"
    use_pkg = len(remaining) == 1
    return os.sep.join(remaining), is_singleton, is_go, use_pkg


def write_file(out_folder: str, file_name: str, content: str | bytes) -> Path:
    """Write ``content`` to ``out_folder/file_name`` and return the path."""
    path = Path(out_folder) / file_name
    data = content.encode() if isinstance(content, str) else bytes(content)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise OSError(f"failed to write output file {path}: {exc}") from exc
    return path