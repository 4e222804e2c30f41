"""Runtime type checks for values decoded from untyped data.

Records loaded from YAML/JSON files are only typed by convention. These helpers
coerce each field to the expected type, reporting anything unexpected to the
error sink and substituting a default instead of raising.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from typing import Any, TypeVar

from . import err

_S = TypeVar("_S", bound=str)


def _report(message: str) -> None:
    # Decoding never raises, even with warnings configured as errors
    with warnings.catch_warnings():
        warnings.simplefilter("default", RuntimeWarning)
        err.emit(message)


def limited_string(value: Any, allowed: Sequence[_S], default: _S, context: str) -> _S:
    """Return ``value`` if it is one of ``allowed``, otherwise ``default``.

    Args:
        value: Raw decoded value.
        allowed: The closed set of acceptable strings.
        default: Replacement used for anything outside ``allowed``.
        context: Label naming the field being checked, used in the error report.
    """
    if isinstance(value, str) and value in allowed:
        return value
    _report(f"{context}: expected one of {list(allowed)}, got {value!r}; using '{default}'")
    return default


def string_val(value: Any, context: str, default: str = "") -> str:
    """Coerce ``value`` to a string. ``None`` quietly becomes ``default``."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    _report(f"{context}: expected a string, got {type(value).__name__} {value!r}; using '{default}'")
    return default


def number_val(value: Any, context: str, default: float = 0.0) -> float:
    """Coerce ``value`` to a float. ``None`` quietly becomes ``default``."""
    if value is None:
        return default
    # bool is an int subclass but never a meaningful coordinate
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    _report(f"{context}: expected a number, got {type(value).__name__} {value!r}; using {default}")
    return default


def record_val(value: Any, context: str) -> dict[str, Any]:
    """Return ``value`` if it is a mapping, otherwise an empty record."""
    if isinstance(value, dict):
        return value
    _report(f"{context}: expected a record, got {type(value).__name__}; using {{}}")
    return {}


def list_val(value: Any, context: str) -> list[Any]:
    """Return ``value`` as a list. ``None`` quietly becomes ``[]``."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    _report(f"{context}: expected a list, got {type(value).__name__}; using []")
    return []
