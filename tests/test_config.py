"""Unit tests for WalkConfig and the persistent PendingWork collection."""

import dataclasses

import pytest

from dirwalklib import (
    CollectErrorsPolicy,
    ConfigurationError,
    Cursor,
    PendingWork,
    WalkConfig,
    WalkOrder,
    iter_walk,
    start,
    walk,
)

from conftest import ROOT, paths_of


class TestWalkConfig:

    def test_defaults(self):
        config = WalkConfig()
        assert config.depth_first is True
        assert config.top_down is True
        assert config.follow_symlinks is False
        assert config.on_error is None
        assert config.order is WalkOrder.TOP_DOWN_DEPTH_FIRST

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            WalkConfig().top_down = False

    @pytest.mark.parametrize("config, order", [
        (WalkConfig(), WalkOrder.TOP_DOWN_DEPTH_FIRST),
        (WalkConfig.breadth_first(), WalkOrder.TOP_DOWN_BREADTH_FIRST),
        (WalkConfig.bottom_up(), WalkOrder.BOTTOM_UP),
        (WalkConfig(top_down=False, depth_first=False), WalkOrder.BOTTOM_UP),
    ])
    def test_order(self, config, order):
        assert config.order is order

    @pytest.mark.parametrize("name, order", [
        ("dfs", WalkOrder.TOP_DOWN_DEPTH_FIRST),
        ("DEPTH_FIRST", WalkOrder.TOP_DOWN_DEPTH_FIRST),
        ("bfs", WalkOrder.TOP_DOWN_BREADTH_FIRST),
        ("breadth_first", WalkOrder.TOP_DOWN_BREADTH_FIRST),
        ("bottom_up", WalkOrder.BOTTOM_UP),
        ("post_order", WalkOrder.BOTTOM_UP),
    ])
    def test_from_strategy(self, name, order):
        assert WalkConfig.from_strategy(name).order is order

    def test_from_strategy_passes_options(self):
        config = WalkConfig.from_strategy("bfs", follow_symlinks=True)
        assert config.follow_symlinks is True

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError, match="Unknown walk strategy"):
            WalkConfig.from_strategy("sideways")

    def test_valid_config_has_no_errors(self):
        assert WalkConfig(on_error=CollectErrorsPolicy()).validate() == []

    def test_validate_reports_every_problem(self):
        errors = WalkConfig(depth_first="yes", on_error="log it").validate()
        assert errors == ["depth_first must be a bool", "on_error must be callable or None"]

    def test_walk_rejects_invalid_config(self, adapter):
        with pytest.raises(ConfigurationError, match="on_error must be callable"):
            walk(ROOT, adapter=adapter, on_error=42)

    def test_iter_walk_rejects_before_iteration(self, adapter):
        with pytest.raises(ConfigurationError):
            iter_walk(ROOT, adapter=adapter, top_down=None)

    def test_cursor_rejects_invalid_config(self, adapter):
        with pytest.raises(ConfigurationError):
            Cursor(ROOT, adapter=adapter, follow_symlinks=1)

    def test_start_with_config(self, adapter):
        entry, _ = start(ROOT, WalkConfig.bottom_up(), adapter=adapter)
        assert entry.path == "testdirs/dogs/wild"

    def test_config_overrides_flags(self, adapter):
        paths = paths_of(iter_walk(ROOT, adapter=adapter, config=WalkConfig.breadth_first()))
        assert paths[:3] == ["testdirs", "testdirs/dogs", "testdirs/cats"]


class TestPendingWork:

    def test_pop_in_order(self):
        work = PendingWork(["a", "b"])
        first, work = work.pop()
        second, work = work.pop()

        assert (first, second) == ("a", "b")
        assert not work
        assert len(work) == 0

    def test_pop_empty(self):
        with pytest.raises(IndexError):
            PendingWork().pop()

    def test_push_front_keeps_order(self):
        work = PendingWork(["x"]).push_front(["a", "b"])
        assert list(work) == ["a", "b", "x"]

    def test_push_back_keeps_order(self):
        work = PendingWork(["x"]).push_back(["a", "b"])
        assert list(work) == ["x", "a", "b"]

    def test_mixed_pushes_and_pops(self):
        work = PendingWork(["root"])
        _, work = work.pop()
        work = work.push_back(["a", "b"]).push_back(["c"]).push_front(["z"])

        popped = []
        while work:
            path, work = work.pop()
            popped.append(path)

        assert popped == ["z", "a", "b", "c"]

    def test_operations_do_not_mutate(self):
        original = PendingWork(["a", "b"])
        original.push_front(["x"])
        original.push_back(["y"])
        original.pop()

        assert list(original) == ["a", "b"]
        assert len(original) == 2

    def test_pop_from_back_only(self):
        work = PendingWork().push_back(["a", "b"])
        first, rest = work.pop()
        again, _ = work.pop()

        assert first == again == "a"
        assert list(rest) == ["b"]

    def test_equality_and_repr(self):
        assert PendingWork(["a", "b"]) == PendingWork().push_back(["a"]).push_back(["b"])
        assert repr(PendingWork(["a"])) == "PendingWork(['a'])"
