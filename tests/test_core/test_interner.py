"""Tests for the node interner and identifier helpers."""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from gtheory.core import NodeInterner, NodeRecord, zero_weight


class TestNodeInterner:
    """Tests for NodeInterner."""

    def test_ids_follow_insertion_order(self):
        interner = NodeInterner()
        assert interner.intern("b") == 0
        assert interner.intern("a") == 1
        assert interner.intern("c") == 2
        assert len(interner) == 3

    def test_reintern_returns_existing_id(self):
        """Re-interning keeps the id and the original payload."""
        interner = NodeInterner()
        first = interner.intern("x", data="original")
        again = interner.intern("x", data="replacement")

        assert first == again
        assert len(interner) == 1
        assert interner.record(first).data == "original"

    def test_lookup_both_directions(self):
        interner = NodeInterner()
        nid = interner.intern(("tuple", 1), data=42)

        assert interner.id_of(("tuple", 1)) == nid
        assert interner.id_of("missing") is None
        assert interner.record(nid) == NodeRecord(("tuple", 1), 42)
        assert ("tuple", 1) in interner

    def test_record_out_of_range(self):
        interner = NodeInterner()
        interner.intern("a")
        with pytest.raises(IndexError):
            interner.record(5)

    def test_iteration_yields_ids_and_records(self):
        interner = NodeInterner()
        for key in "xyz":
            interner.intern(key)
        assert [(i, rec.key) for i, rec in interner] == [(0, "x"), (1, "y"), (2, "z")]

    def test_copy_is_independent(self):
        interner = NodeInterner()
        interner.intern("a", data=1)
        clone = interner.copy()
        clone.intern("b")

        assert len(interner) == 1
        assert len(clone) == 2
        assert clone.record(0).data == 1

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            NodeInterner(capacity=-1)


class TestZeroWeight:
    """Tests for zero_weight."""

    @pytest.mark.parametrize(
        "sample,expected",
        [(5, 0), (2.5, 0.0), (Fraction(1, 3), Fraction(0)), (Decimal("1.5"), Decimal(0))],
    )
    def test_zero_matches_type(self, sample, expected):
        zero = zero_weight(sample)
        assert zero == expected
        assert type(zero) is type(sample)

    def test_numpy_scalar(self):
        zero = zero_weight(np.float32(1.5))
        assert zero == 0
        assert isinstance(zero, np.float32)

    def test_default_is_int_zero(self):
        assert zero_weight() == 0
