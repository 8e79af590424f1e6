"""Debug mode and invariant checks for gtheory."""

from .core import (
    assert_capacity_constraints,
    assert_closure_transitive,
    assert_flow_conservation,
    assert_tree,
    assert_valid_circuit,
    is_tree,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "assert_flow_conservation",
    "assert_capacity_constraints",
    "is_tree",
    "assert_tree",
    "assert_closure_transitive",
    "assert_valid_circuit",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_from_env",
    "debug_context",
]
