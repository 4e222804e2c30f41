"""Transitions between FSM states."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from . import check, err
from .action import Action
from .config import debug_log
from .event import EVENT_TYPES, EventType, is_region_event

if TYPE_CHECKING:
    from .fsm import FSMState
    from .region import Region


class Transition:
    """An edge out of an FSM state.

    A transition fires on an event of type ``on_event`` (``any`` matches every
    event). Region events additionally have to happen over ``on_region`` when the
    transition declares a region. Firing runs ``actions`` in order.
    """

    def __init__(
        self,
        target: str,
        on_event: EventType,
        on_region_name: str = "",
        actions: Iterable[Action] = (),
    ):
        self.target_name = target
        self.on_event = on_event
        self.on_region_name = on_region_name
        self.actions: list[Action] = list(actions)
        self.target: FSMState | None = None
        self.on_region: Region | None = None

    @classmethod
    def from_json(cls, record: Any) -> Transition:
        record = check.record_val(record, "Transition.from_json")
        on_event = check.limited_string(record.get("event"), EVENT_TYPES, "nevermind", "Transition.from_json{event:}")
        actions = [
            Action.from_json(item) for item in check.list_val(record.get("actions"), "Transition.from_json{actions:}")
        ]
        return cls(
            target=check.string_val(record.get("target"), "Transition.from_json{target:}"),
            on_event=on_event,
            on_region_name=check.string_val(record.get("region"), "Transition.from_json{region:}"),
            actions=actions,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "event": self.on_event,
            "region": self.on_region_name,
            "target": self.target_name,
            "actions": [action.to_json() for action in self.actions],
        }

    def bind_target(self, states: Mapping[str, FSMState]) -> None:
        self.target = states.get(self.target_name)
        if self.target is None:
            err.emit(f"Target state '{self.target_name}' in {self.debug_tag()} does not match any state.")

    def bind_regions(self, regions: Iterable[Region]) -> None:
        """Bind the transition's own region and the region of every action."""
        regions = list(regions)
        self.on_region = None
        if self.on_region_name:
            self.on_region = next((r for r in regions if r.name == self.on_region_name), None)
            if self.on_region is None:
                err.emit(f"Region '{self.on_region_name}' in {self.debug_tag()} does not match any region.")
        for action in self.actions:
            action.bind_region(regions)

    def match(self, evt_type: str, region: Region | None = None) -> bool:
        if self.on_event == "any":
            return True
        if evt_type != self.on_event:
            return False
        if is_region_event(evt_type) and self.on_region_name:
            return region is not None and region is self.on_region
        return True

    def fire(self, evt_type: str, region: Region | None = None) -> None:
        debug_log(self, 2, f"firing {self.debug_tag()}")
        for action in self.actions:
            action.execute(evt_type, region)

    def debug_tag(self) -> str:
        return f"Transition({self.on_event} {self.on_region_name} -> {self.target_name})"

    def debug_string(self, indent: int = 0) -> str:
        lines = [f"{'  ' * indent}{self.on_event} {self.on_region_name} -> {self.target_name}"]
        lines.extend(action.debug_string(indent + 1) for action in self.actions)
        return "\n".join(lines)
