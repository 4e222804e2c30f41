"""Tests for transitions and FSM loading, binding and dispatch."""

import textwrap

import pytest

from fsmactions import FSM, Action, FSMState, Region, Transition, err, load_fsm, save_fsm

DOOR_YAML = textwrap.dedent(
    """
    name: door
    start_state: closed
    regions:
      - {name: Door, x: 0, y: 0, w: 100, h: 200, imageLoc: door_closed.png}
      - {name: Bell, x: 120, y: 0, w: 20, h: 20, imageLoc: ""}
    states:
      - name: closed
        transitions:
          - event: press
            region: Door
            target: open
            actions:
              - {act: set_image, region: Door, param: door_open.png}
              - {act: print_event, param: opened by}
          - event: press
            region: Bell
            target: closed
            actions:
              - {act: print, param: ding}
      - name: open
        transitions:
          - event: any
            target: closed
            actions:
              - {act: set_image, region: Door, param: door_closed.png}
    """
)


@pytest.fixture
def door_fsm(tmp_path):
    path = tmp_path / "door.yaml"
    path.write_text(DOOR_YAML)
    return load_fsm(path)


class TestTransition:
    """Test suite for Transition."""

    def test_from_json(self):
        transition = Transition.from_json(
            {"event": "enter", "region": "R", "target": "s2", "actions": [{"act": "print", "param": "hi"}]}
        )
        assert transition.on_event == "enter"
        assert transition.on_region_name == "R"
        assert transition.target_name == "s2"
        assert [a.act_type for a in transition.actions] == ["print"]

    def test_bad_event_and_actions(self):
        transition = Transition.from_json({"event": "click", "target": "s", "actions": "print"})
        assert transition.on_event == "nevermind"
        assert transition.actions == []
        assert len(err.messages()) == 2

    def test_bind_regions_binds_actions(self):
        door = Region(name="Door")
        transition = Transition("s", "press", "Door", [Action("set_image", "Door", "x"), Action("print", "", "p")])
        transition.bind_regions([door])
        assert transition.on_region is door
        assert transition.actions[0].on_region is door
        assert transition.actions[1].on_region is None

    def test_match(self):
        door, bell = Region(name="Door"), Region(name="Bell")
        transition = Transition("s", "press", "Door")
        transition.bind_regions([door, bell])
        assert transition.match("press", door)
        assert not transition.match("press", bell)
        assert not transition.match("press")
        assert not transition.match("release", door)

    def test_match_without_declared_region(self):
        transition = Transition("s", "release_none")
        assert transition.match("release_none")
        assert Transition("s", "enter").match("enter", Region(name="Any"))
        assert Transition("s", "any").match("nevermind")

    def test_fire_runs_actions_in_order(self, output):
        transition = Transition("s", "enter", actions=[Action("print", "", "one"), Action("print", "", "two")])
        transition.fire("enter")
        assert output == ["one", "two"]

    def test_unknown_target_is_reported(self):
        transition = Transition("missing", "press")
        transition.bind_target({"s": FSMState("s")})
        assert transition.target is None
        assert "'missing'" in err.messages()[0]


class TestFSM:
    """Test suite for FSM loading and dispatch."""

    def test_load_binds_everything(self, door_fsm):
        assert door_fsm.bound
        assert door_fsm.current_state.name == "closed"
        door = door_fsm.find_region("Door")
        for state in door_fsm.states:
            for transition in state.transitions:
                for action in transition.actions:
                    if action.uses_region:
                        assert action.on_region is door
        assert err.messages() == []

    def test_press_door_opens_it(self, door_fsm, output):
        door = door_fsm.find_region("Door")
        assert door_fsm.actuate("press", door)
        assert door.image_loc == "door_open.png"
        assert door_fsm.current_state.name == "open"
        assert output == ["opened by press Door"]

    def test_any_event_closes_again(self, door_fsm):
        door = door_fsm.find_region("Door")
        door_fsm.actuate("press", door)
        assert door_fsm.actuate("nevermind")
        assert door.image_loc == "door_closed.png"
        assert door_fsm.current_state.name == "closed"

    def test_unmatched_event_is_ignored(self, door_fsm):
        assert not door_fsm.actuate("release", door_fsm.find_region("Door"))
        assert door_fsm.current_state.name == "closed"

    def test_self_transition(self, door_fsm, output):
        assert door_fsm.actuate("press", door_fsm.find_region("Bell"))
        assert door_fsm.current_state.name == "closed"
        assert output == ["ding"]

    def test_reset(self, door_fsm):
        door_fsm.actuate("press", door_fsm.find_region("Door"))
        door_fsm.reset()
        assert door_fsm.current_state.name == "closed"

    def test_actuate_before_bind_raises(self):
        fsm = FSM.from_json({"states": [{"name": "s"}]})
        with pytest.raises(RuntimeError):
            fsm.actuate("press")

    def test_unresolved_region_leaves_action_unbound(self, output):
        fsm = FSM.from_json(
            {
                "regions": [{"name": "Door", "imageLoc": "a.png"}],
                "states": [
                    {
                        "name": "s",
                        "transitions": [
                            {"event": "nevermind", "target": "s", "actions": [{"act": "set_image", "region": "Dor", "param": "b.png"}]}
                        ],
                    }
                ],
            }
        )
        fsm.bind()
        assert len(err.messages()) == 1
        assert fsm.actuate("nevermind")
        assert fsm.find_region("Door").image_loc == "a.png"
        fsm.dump()
        assert output[-1].endswith('set_image Dor "b.png" unbound')

    def test_bad_start_state_falls_back_to_first(self):
        fsm = FSM.from_json({"start_state": "nowhere", "states": [{"name": "a"}, {"name": "b"}]})
        fsm.bind()
        assert fsm.current_state.name == "a"
        assert len(err.messages()) == 1

    def test_empty_machine(self):
        fsm = FSM.from_json(None)
        fsm.bind()
        assert not fsm.actuate("press")

    def test_save_and_reload(self, door_fsm, tmp_path):
        path = tmp_path / "copy.yaml"
        save_fsm(door_fsm, path)
        reloaded = load_fsm(path)
        assert reloaded.to_json() == door_fsm.to_json()
