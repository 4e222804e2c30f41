"""Process-wide sink for non-fatal errors found while loading an FSM.

Problems such as a misspelled region name or a bad action kind in a data file
are authoring mistakes, not runtime faults. They are reported here and loading
carries on.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable


def _warn(message: str) -> None:
    warnings.warn(message, RuntimeWarning, stacklevel=4)


_handler: Callable[[str], None] = _warn
_messages: list[str] = []


def emit(message: str) -> None:
    """Report a non-fatal error message.

    With the default handler and warnings configured as errors this raises
    ``RuntimeWarning``. Reports made while decoding records are shielded from
    that, so decoding still never raises.
    """
    _messages.append(message)
    _handler(message)


def set_handler(handler: Callable[[str], None] | None) -> None:
    """Install a handler for emitted messages (``None`` restores the warning handler)."""
    global _handler
    _handler = _warn if handler is None else handler


def messages() -> list[str]:
    """Messages emitted since the last :func:`clear`."""
    return list(_messages)


def clear() -> None:
    _messages.clear()
