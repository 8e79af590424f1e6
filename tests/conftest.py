"""Pytest configuration and shared fixtures for gtheory tests.

This module provides:
- Deterministic RNG fixtures for numpy
- A fixture parametrized over every storage backend
- A fixture that runs a test with debug-mode invariant checks enabled
"""

import os
from typing import Iterator, Type

import numpy as np
import pytest

from gtheory.diagnostics import debug_context
from gtheory.storage import BACKENDS


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.__name__)
def storage_cls(request) -> Type:
    """Each storage backend in turn."""
    return request.param


@pytest.fixture
def debug_mode() -> Iterator[None]:
    """Run the test with debug-mode invariant checks enabled."""
    with debug_context(True):
        yield
