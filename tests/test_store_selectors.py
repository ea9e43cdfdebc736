"""Tests for memoised selectors."""

import pytest
from immutables import Map

from minidux import create_selector


class TestCreateSelector:
    def test_single_selector_returned_unchanged(self):
        get_n = lambda state: state["n"]
        assert create_selector(get_n) is get_n

    def test_requires_input(self):
        with pytest.raises(ValueError):
            create_selector()

    def test_recomputes_only_when_inputs_change(self):
        calls = []

        def combine(items, factor):
            calls.append(1)
            return tuple(i * factor for i in items)

        select = create_selector(
            lambda state: state["items"],
            lambda state: state["factor"],
            result_fn=combine,
        )
        state = Map(items=(1, 2), factor=10)
        assert select(state) == (10, 20)
        assert select(state) == (10, 20)
        assert len(calls) == 1

        select(state.set("items", (3,)))
        assert len(calls) == 2

    def test_default_result_is_tuple_of_inputs(self):
        select = create_selector(lambda s: s["a"], lambda s: s["b"])
        assert select(Map(a=1, b=2)) == (1, 2)
