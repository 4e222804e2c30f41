"""Event types that can drive FSM transitions."""

from __future__ import annotations

from typing import Literal

EventType = Literal["nevermind", "press", "release", "release_none", "move_inside", "enter", "exit", "any"]

EVENT_TYPES: tuple[EventType, ...] = (
    "nevermind",
    "press",
    "release",
    "release_none",
    "move_inside",
    "enter",
    "exit",
    "any",
)

# Events that always happen over a particular region
_REGION_EVENTS = frozenset({"press", "release", "move_inside", "enter", "exit"})


def is_region_event(evt_type: str) -> bool:
    return evt_type in _REGION_EVENTS
