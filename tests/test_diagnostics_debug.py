"""Tests for debug mode functionality."""

import pytest

from gtheory.diagnostics import (
    debug_context,
    is_debug_enabled,
    reset_debug_from_env,
    set_debug_enabled,
)
from gtheory.graphs import DirectedGraph, FlowNetwork, ford_fulkerson, tree_to_prufer
from gtheory.errors import InvariantError


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """The previous flag is restored even if the block raises."""
    original = is_debug_enabled()
    with pytest.raises(RuntimeError):
        with debug_context(not original):
            raise RuntimeError("boom")
    assert is_debug_enabled() == original


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("true", True), ("ON", True), ("yes", True), ("0", False), ("off", False)],
)
def test_env_var_controls_debug(monkeypatch, value, expected) -> None:
    """GTHEORY_DEBUG is parsed case-insensitively."""
    original = is_debug_enabled()
    try:
        monkeypatch.setenv("GTHEORY_DEBUG", value)
        assert reset_debug_from_env() is expected
        assert is_debug_enabled() is expected
    finally:
        set_debug_enabled(original)


def test_debug_mode_checks_initial_flow() -> None:
    """In debug mode an unbalanced initial flow is rejected."""
    network = FlowNetwork.from_edges(
        [("s", "a", 2, 5), ("a", "t", 1, 5)],
        "s",
        "t",
    )
    with debug_context(True):
        with pytest.raises(InvariantError, match="not conserved"):
            ford_fulkerson(network)


def test_debug_mode_checks_tree_shape() -> None:
    """In debug mode Prüfer encoding rejects a cycle up front."""
    G = DirectedGraph.from_edges([(1, 2), (2, 3), (3, 1), (3, 4)])
    with debug_context(True):
        with pytest.raises(InvariantError, match="Expected a tree"):
            tree_to_prufer(G)
