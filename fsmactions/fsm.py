"""FSM loading, binding and event dispatch.

An FSM record looks like::

    name: door
    start_state: closed
    regions:
      - {name: Door, x: 0, y: 0, w: 100, h: 200, imageLoc: door_closed.png}
    states:
      - name: closed
        transitions:
          - event: press
            region: Door
            target: open
            actions:
              - {act: set_image, region: Door, param: door_open.png}

Loading happens in two phases. :meth:`FSM.from_json` decodes everything,
leaving names unresolved; :meth:`FSM.bind` then resolves every state, region and
action reference. Events may only be dispatched after binding.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from . import check, err
from .config import debug_log, debug_print
from .event import EventType
from .region import Region
from .transition import Transition


class FSMState:
    """A named state and its outgoing transitions, tried in order."""

    def __init__(self, name: str, transitions: Iterable[Transition] = ()):
        self.name = name
        self.transitions: list[Transition] = list(transitions)

    @classmethod
    def from_json(cls, record: Any) -> FSMState:
        record = check.record_val(record, "FSMState.from_json")
        transitions = [
            Transition.from_json(item)
            for item in check.list_val(record.get("transitions"), "FSMState.from_json{transitions:}")
        ]
        return cls(check.string_val(record.get("name"), "FSMState.from_json{name:}"), transitions)

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "transitions": [t.to_json() for t in self.transitions]}

    def debug_string(self, indent: int = 0) -> str:
        lines = [f"{'  ' * indent}state {self.name}"]
        lines.extend(t.debug_string(indent + 1) for t in self.transitions)
        return "\n".join(lines)


class FSM:
    """A finite state machine driving the images of a set of regions.

    Args:
        name: Name of the machine (debug output only).
        states: States in declaration order.
        regions: Regions the machine's actions may act on.
        start_state: Name of the initial state; defaults to the first state.
    """

    def __init__(
        self,
        name: str = "",
        states: Iterable[FSMState] = (),
        regions: Iterable[Region] = (),
        start_state: str | None = None,
    ):
        self.name = name
        self.states: list[FSMState] = list(states)
        self.regions: list[Region] = list(regions)
        self.start_state_name = start_state or (self.states[0].name if self.states else "")
        self.start_state: FSMState | None = None
        self.current_state: FSMState | None = None
        self._bound = False

    @classmethod
    def from_json(cls, record: Any) -> FSM:
        record = check.record_val(record, "FSM.from_json")
        regions = [Region.from_json(item) for item in check.list_val(record.get("regions"), "FSM.from_json{regions:}")]
        states = [FSMState.from_json(item) for item in check.list_val(record.get("states"), "FSM.from_json{states:}")]
        start = check.string_val(record.get("start_state"), "FSM.from_json{start_state:}")
        return cls(
            name=check.string_val(record.get("name"), "FSM.from_json{name:}"),
            states=states,
            regions=regions,
            start_state=start or None,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start_state": self.start_state_name,
            "regions": [r.to_json() for r in self.regions],
            "states": [s.to_json() for s in self.states],
        }

    @property
    def bound(self) -> bool:
        return self._bound

    def find_region(self, name: str) -> Region | None:
        return next((r for r in self.regions if r.name == name), None)

    def bind(self) -> None:
        """Resolve every name reference now that all states and regions exist."""
        by_name: dict[str, FSMState] = {}
        for state in self.states:
            by_name.setdefault(state.name, state)

        for state in self.states:
            for transition in state.transitions:
                transition.bind_target(by_name)
                transition.bind_regions(self.regions)

        self.start_state = by_name.get(self.start_state_name)
        if self.start_state is None and self.states:
            err.emit(f"Start state '{self.start_state_name}' does not match any state; using '{self.states[0].name}'.")
            self.start_state = self.states[0]
        self.current_state = self.start_state
        self._bound = True
        debug_log(self, 1, f"bound FSM {self.name!r}: {len(self.states)} states, {len(self.regions)} regions")

    def reset(self) -> None:
        self.current_state = self.start_state

    def actuate(self, evt_type: EventType | str, region: Region | None = None) -> bool:
        """Dispatch an event to the current state.

        The first matching transition fires its actions and then moves the
        machine to its target. A transition whose target never bound leaves the
        machine where it is. Returns whether a transition was taken.
        """
        if not self._bound:
            raise RuntimeError("FSM.bind() must be called before events are dispatched")
        if self.current_state is None:
            return False

        for transition in self.current_state.transitions:
            if transition.match(evt_type, region):
                transition.fire(evt_type, region)
                if transition.target is not None:
                    self.current_state = transition.target
                debug_log(self, 2, f"{evt_type} -> state {self.current_state.name!r}")
                return True
        return False

    def debug_string(self, indent: int = 0) -> str:
        pad = "  " * indent
        lines = [f"{pad}FSM {self.name!r} start={self.start_state_name!r}"]
        lines.extend(r.debug_string(indent + 1) for r in self.regions)
        lines.extend(s.debug_string(indent + 1) for s in self.states)
        return "\n".join(lines)

    def dump(self) -> None:
        debug_print(self.debug_string())


def load_fsm(path: str | Path, *, bind: bool = True) -> FSM:
    """Load an FSM from a YAML (or JSON) file and, by default, bind it."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    fsm = FSM.from_json(data)
    if bind:
        fsm.bind()
    return fsm


def save_fsm(fsm: FSM, path: str | Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(fsm.to_json(), f, sort_keys=False)
