"""Template loaders and helpers available to templates."""

from __future__ import annotations

import base64
import binascii
import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from boilgen.config import TagCase

_STRUCT_TEMPLATE = "struct.tpl"


@dataclass(frozen=True)
class FileLoader:
    """Loads a template from a file on disk."""

    path: str

    def load(self) -> bytes:
        try:
            return Path(self.path).read_bytes()
        except OSError as exc:
            raise OSError(f"failed to load template: {self.path}: {exc}") from exc

    def __str__(self) -> str:
        return "file:" + self.path


@dataclass(frozen=True)
class Base64Loader:
    """Loads a template handed over base64-encoded, as drivers do."""

    contents: str

    def _decode(self) -> bytes:
        try:
            return base64.b64decode(self.contents, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(
                "failed to decode driver's template, should be base64"
            ) from exc

    def load(self) -> bytes:
        return self._decode()

    def __str__(self) -> str:
        digest = hashlib.sha256(self._decode()).hexdigest()
        return f"base64:(sha256 of content): {digest}"


@dataclass(frozen=True)
class AssetLoader:
    """Loads a template from a directory or package resource tree."""

    root: Any
    name: str

    def load(self) -> bytes:
        root = Path(self.root) if isinstance(self.root, str) else self.root
        return root.joinpath(*self.name.split("/")).read_bytes()

    def __str__(self) -> str:
        return "asset:" + self.name


class Once:
    """A set that remembers names so a template loop emits each only once."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def has(self, name: str) -> bool:
        return name in self._seen

    def put(self, name: str) -> bool:
        """Record ``name``; true if it was not recorded before."""
        if name in self._seen:
            return False
        self._seen.add(name)
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._seen


def sort_template_names(names: Iterable[str]) -> list[str]:
    """Sort names ascending, with ``struct.tpl`` first."""
    return sorted(names, key=lambda name: (name != _STRUCT_TEMPLATE, name))


def template_names(names: Iterable[str]) -> list[str]:
    """The names ending in ``.tpl``, sorted with ``struct.tpl`` first."""
    return sort_template_names(name for name in names if name.endswith(".tpl"))


def generate_tag_with_case(
    tag_name: str,
    tag_value: str,
    alias: str,
    case: TagCase | str | None,
    nullable: bool,
) -> str:
    """A struct tag such as ``json:"name,omitempty" `` with the value cased."""
    # Imported here: text_helpers has no dependency on this module, but keep
    # the casing helpers next to their only use.
    from boilgen.text_helpers import camel_case, title_case

    if case == TagCase.TITLE:
        value = title_case(tag_value)
    elif case == TagCase.CAMEL:
        value = camel_case(tag_value)
    elif case == TagCase.ALIAS:
        value = alias
    else:
        value = tag_value

    suffix = ",omitempty" if nullable else ""
    return f'{tag_name}:"{value}{suffix}" '


def quote(lq: str, rq: str, name: str) -> str:
    """Wrap ``name`` in the dialect's quote characters."""
    return f"{lq}{name}{rq}"