"""Request-scoped values: debugging and hook skipping."""

from __future__ import annotations

import enum
import sys
from typing import Any, TextIO


class _ContextKey(enum.Enum):
    SKIP_HOOKS = enum.auto()
    SKIP_TIMESTAMPS = enum.auto()
    DEBUG = enum.auto()
    DEBUG_WRITER = enum.auto()


class Context:
    """An immutable bag of values; ``with_value`` returns a new context."""

    __slots__ = ("_values",)

    def __init__(self, values: dict[Any, Any] | None = None) -> None:
        self._values: dict[Any, Any] = dict(values or {})

    def with_value(self, key: Any, value: Any) -> Context:
        values = dict(self._values)
        values[key] = value
        return Context(values)

    def value(self, key: Any) -> Any:
        return self._values.get(key)


class HookPoint(enum.IntEnum):
    """The point in time at which a hook runs."""

    BEFORE_INSERT = 1
    BEFORE_UPDATE = 2
    BEFORE_DELETE = 3
    BEFORE_UPSERT = 4
    AFTER_INSERT = 5
    AFTER_SELECT = 6
    AFTER_UPDATE = 7
    AFTER_DELETE = 8
    AFTER_UPSERT = 9


_debug_mode = False
_debug_writer: TextIO | None = None


def set_debug_mode(enabled: bool) -> None:
    """Turn the global debug flag on or off."""
    global _debug_mode
    _debug_mode = bool(enabled)


def set_debug_writer(writer: TextIO | None) -> None:
    """Set the global debug writer; ``None`` means standard output."""
    global _debug_writer
    _debug_writer = writer


def with_debug(ctx: Context, debug: bool) -> Context:
    return ctx.with_value(_ContextKey.DEBUG, debug)


def is_debug(ctx: Context) -> bool:
    """The context's debug flag, or the global one if it has none."""
    debug = ctx.value(_ContextKey.DEBUG)
    if isinstance(debug, bool):
        return debug
    return _debug_mode


def with_debug_writer(ctx: Context, writer: TextIO) -> Context:
    return ctx.with_value(_ContextKey.DEBUG_WRITER, writer)


def debug_writer_from(ctx: Context) -> TextIO:
    """The context's debug writer, or the global one if it has none."""
    writer = ctx.value(_ContextKey.DEBUG_WRITER)
    if writer is not None:
        return writer
    return _debug_writer if _debug_writer is not None else sys.stdout


def skip_hooks(ctx: Context) -> Context:
    return ctx.with_value(_ContextKey.SKIP_HOOKS, True)


def hooks_are_skipped(ctx: Context) -> bool:
    return ctx.value(_ContextKey.SKIP_HOOKS) is True


def skip_timestamps(ctx: Context) -> Context:
    return ctx.with_value(_ContextKey.SKIP_TIMESTAMPS, True)


def timestamps_are_skipped(ctx: Context) -> bool:
    return ctx.value(_ContextKey.SKIP_TIMESTAMPS) is True