"""Tests for create_reducer / on."""

from immutables import Map

from minidux import Action, create_action, create_reducer, init_store, on

bump = create_action("BUMP")


def bump_handler(state, action):
    return state.set("n", state["n"] + 1)


class TestCreateReducer:
    def test_default_state_when_state_is_none(self):
        reducer = create_reducer({"n": 0})
        assert reducer(None, init_store()) == Map(n=0)

    def test_initial_state_is_frozen(self):
        reducer = create_reducer({"n": 0, "tags": ["a"]})
        assert isinstance(reducer.initial_state, Map)
        assert reducer.initial_state["tags"] == ("a",)

    def test_handles_registered_type(self):
        reducer = create_reducer({"n": 0}, on(bump, bump_handler))
        assert reducer(Map(n=1), bump()) == Map(n=2)

    def test_unknown_type_returns_same_reference(self):
        reducer = create_reducer({"n": 0}, on(bump, bump_handler))
        state = Map(n=3)
        assert reducer(state, Action("OTHER")) is state

    def test_tuple_and_string_handlers(self):
        reducer = create_reducer(
            {"n": 0},
            ("BUMP", bump_handler),
            on("RESET", lambda state, action: state.set("n", 0)),
        )
        assert set(reducer.handlers) == {"BUMP", "RESET"}
        assert reducer(Map(n=5), Action("RESET")) == Map(n=0)
        assert reducer(Map(n=5), Action("BUMP")) == Map(n=6)

    def test_does_not_mutate_input(self):
        reducer = create_reducer({"n": 0}, on(bump, bump_handler))
        state = Map(n=1)
        reducer(state, bump())
        assert state == Map(n=1)
