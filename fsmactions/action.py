"""Actions performed when an FSM transition is taken.

An action has three parts:

* ``act_type`` - what to do (see :data:`ACTION_TYPES`)
* ``on_region_name`` - name of the region to act on (``""`` if the action uses none)
* ``param`` - string parameter for the action (``""`` if the action uses none)

Supported action types:

* ``set_image`` - set the image location of the region to ``param``. An empty
  ``param`` has the same effect as ``clear_image``.
* ``clear_image`` - set the image location of the region to ``""``.
* ``none`` - do nothing. Also used to patch up records with a bad ``act``.
* ``print`` - write ``param`` to the diagnostic output.
* ``print_event`` - write ``param`` followed by the triggering event.

Actions are built in two steps. Decoding produces an action that only knows its
region by name; once the owning FSM has created all of its regions,
:meth:`Action.bind_region` resolves that name to a :class:`Region`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Literal

from . import check, err
from .config import debug_log, debug_print

if TYPE_CHECKING:
    from .event import EventType
    from .region import Region

ActionType = Literal["set_image", "clear_image", "none", "print", "print_event"]

ACTION_TYPES: tuple[ActionType, ...] = ("set_image", "clear_image", "none", "print", "print_event")

# Action types that act on a region
_REGION_ACTIONS: frozenset[str] = frozenset({"set_image", "clear_image"})


class Action:
    """A single effect tied to an FSM transition."""

    def __init__(self, act_type: ActionType, region_name: str | None = None, param: str | None = None):
        self._act_type = check.limited_string(act_type, ACTION_TYPES, "none", "Action{act_type:}")
        self._on_region_name = region_name or ""
        self._param = param or ""
        # established by bind_region() once the whole FSM exists
        self._on_region: Region | None = None

    @classmethod
    def from_json(cls, record: Any) -> Action:
        """Build an action from a flat ``{act, region, param}`` record.

        The record usually comes straight out of a YAML/JSON file, so every field
        is type checked here. A missing or unrecognized ``act`` becomes ``none``
        and a missing or non-string ``region``/``param`` becomes ``""``. Problems
        are reported to the error sink; nothing is raised.
        """
        record = check.record_val(record, "Action.from_json")
        act_type = check.limited_string(record.get("act"), ACTION_TYPES, "none", "Action.from_json{act:}")
        region_name = check.string_val(record.get("region"), "Action.from_json{region:}")
        param = check.string_val(record.get("param"), "Action.from_json{param:}")
        return cls(act_type, region_name, param)

    def to_json(self) -> dict[str, str]:
        return {"act": self._act_type, "region": self._on_region_name, "param": self._param}

    @property
    def act_type(self) -> ActionType:
        return self._act_type

    @property
    def on_region_name(self) -> str:
        return self._on_region_name

    @property
    def on_region(self) -> Region | None:
        """The region this action acts on.

        ``None`` until :meth:`bind_region` runs, and afterwards if the declared
        name matched no region or the action type does not use a region.
        """
        return self._on_region

    @property
    def param(self) -> str:
        return self._param

    @property
    def uses_region(self) -> bool:
        return self._act_type in _REGION_ACTIONS

    def execute(self, evt_type: EventType | str, evt_region: Region | None = None) -> None:
        """Carry out the action.

        ``evt_type`` and ``evt_region`` describe the event that caused the
        transition; only ``print_event`` looks at them. Image actions whose
        region never bound do nothing; that problem was already reported when
        binding.
        """
        act_type = self._act_type
        if act_type == "none":
            return
        if act_type == "set_image":
            if self._on_region is not None:
                self._on_region.image_loc = self._param
        elif act_type == "clear_image":
            if self._on_region is not None:
                self._on_region.image_loc = ""
        elif act_type == "print":
            debug_print(self._param)
        elif act_type == "print_event":
            region_name = evt_region.name if evt_region is not None else "no region"
            debug_print(f"{self._param} {evt_type} {region_name}")
        debug_log(self, 2, f"executed {self.debug_tag()} on {evt_type}")

    def bind_region(self, regions: Iterable[Region]) -> None:
        """Resolve ``on_region_name`` against the FSM's regions.

        The first region with a matching name wins. Calling this again
        re-resolves from scratch.
        """
        if not self.uses_region:
            self._on_region = None
            return

        self._on_region = next((region for region in regions if region.name == self._on_region_name), None)
        if self._on_region is None:
            err.emit(f"Region '{self._on_region_name}' in {self.debug_tag()} does not match any region.")
            return
        debug_log(self, 2, f"bound {self.debug_tag()} to {self._on_region.debug_tag()}")

    def debug_tag(self) -> str:
        """Short one-line identity string for trace logs."""
        return f'Action({self._act_type} {self._on_region_name} "{self._param}")'

    def debug_string(self, indent: int = 0) -> str:
        """Indented human readable line; ends in ``unbound`` for an unresolved region."""
        result = f'{"  " * indent}{self._act_type} {self._on_region_name} "{self._param}"'
        if self.uses_region and self._on_region is None:
            result += " unbound"
        return result

    def dump(self) -> None:
        debug_print(self.debug_string())

    def __repr__(self) -> str:
        return self.debug_tag()
