"""
FSMActions - data-driven finite state machines for interactive image regions.

Components:
- Action: effect run when a transition is taken (set_image, clear_image, none, print, print_event)
- Region: named screen rectangle showing an image
- Transition / FSMState / FSM: loading, binding and event dispatch
- Debug helpers: set_debug_options, observe, set_output
"""

from . import err
from .action import ACTION_TYPES, Action, ActionType
from .config import (
    clear_observed,
    debug_print,
    get_debug_options,
    observe,
    reset_debug_options,
    set_debug_options,
    set_output,
)
from .event import EVENT_TYPES, EventType, is_region_event
from .fsm import FSM, FSMState, load_fsm, save_fsm
from .region import Region
from .transition import Transition

__all__ = [
    # Core classes
    "Action",
    "ActionType",
    "ACTION_TYPES",
    "Region",
    "Transition",
    "FSMState",
    "FSM",
    # Events
    "EventType",
    "EVENT_TYPES",
    "is_region_event",
    # Loading
    "load_fsm",
    "save_fsm",
    # Diagnostics
    "err",
    "debug_print",
    "set_output",
    "set_debug_options",
    "get_debug_options",
    "reset_debug_options",
    "observe",
    "clear_observed",
]
