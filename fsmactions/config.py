"""Debug configuration and the diagnostic output channel.

Debug output is plain text. Trace lines are printed as ``[FSM L<level> <owner>] ...``
when the configured level is high enough and the owner passes the include
filter. ``print``/``print_event`` actions and ``dump()`` calls write through
:func:`debug_print`, a separate channel that can be redirected with
:func:`set_output`.

Setting ``FSMACTIONS_DEBUG=<level>`` in the environment starts the process at
that level with every owner included.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import Any


def _level_from_env() -> int:
    raw = os.getenv("FSMACTIONS_DEBUG", "")
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


class DebugConfig:
    """Process-wide debug settings."""

    level: int = 0
    include_all: bool = False
    include: set[str] | None = None


_output: Callable[[str], Any] = print
_UNSET: Any = object()


def _owner_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, type):
        return item.__name__
    return type(item).__name__


def set_debug_options(
    *,
    level: int | None = None,
    include_all: bool | None = None,
    include: Iterable[type | str] | None = _UNSET,
) -> None:
    """Configure trace logging.

    Args:
        level: 0 disables tracing, 1 reports bind problems, 2 traces execution.
        include_all: Trace every owner regardless of the include filter.
        include: Owner classes (or class names) to trace; ``None`` clears the
            filter. Leaving it out keeps the current filter.
    """
    if level is not None:
        DebugConfig.level = max(0, int(level))
    if include_all is not None:
        DebugConfig.include_all = bool(include_all)
    if include is _UNSET:
        return
    if include is None:
        DebugConfig.include = None
    else:
        DebugConfig.include = {_owner_name(item) for item in include}


def reset_debug_options() -> None:
    """Restore the settings the process started with (from ``FSMACTIONS_DEBUG``)."""
    level = _level_from_env()
    DebugConfig.level = level
    DebugConfig.include_all = level > 0
    DebugConfig.include = None


def get_debug_options() -> dict[str, Any]:
    return {
        "level": DebugConfig.level,
        "include_all": DebugConfig.include_all,
        "include": sorted(DebugConfig.include) if DebugConfig.include else [],
    }


def observe(*owners: type | str) -> None:
    """Add owners to the include filter without touching the level."""
    names = {_owner_name(owner) for owner in owners}
    if DebugConfig.include is None:
        DebugConfig.include = names
    else:
        DebugConfig.include |= names


def clear_observed() -> None:
    DebugConfig.include = None


def debug_log(owner: Any, level: int, message: str) -> None:
    """Centralized trace logger with level and per-owner filtering.

    Trace lines always go to stdout, never to the diagnostic output channel.
    """
    if DebugConfig.level < level:
        return

    name = _owner_name(owner)
    if not DebugConfig.include_all:
        include = DebugConfig.include
        if not include or name not in include:
            return

    print(f"[FSM L{level} {name}] {message}")

def debug_print(line: str) -> None:
    """Write one line to the diagnostic output channel."""
    _output(line)


def set_output(writer: Callable[[str], Any] | None) -> None:
    """Redirect the diagnostic output channel (``None`` restores ``print``)."""
    global _output
    _output = print if writer is None else writer


reset_debug_options()
