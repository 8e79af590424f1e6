"""Tests for the integer Polynomial type."""

import pytest

from gtheory.graphs import Polynomial


class TestPolynomial:
    """Tests for Polynomial arithmetic and evaluation."""

    def test_normalizes_trailing_zeros(self):
        assert Polynomial([1, 2, 0, 0]).coeffs == [1, 2]
        assert Polynomial([0, 0]).coeffs == [0]
        assert Polynomial([]).is_zero()

    def test_constructors(self):
        assert Polynomial.zero().coeffs == [0]
        assert Polynomial.one().coeffs == [1]
        assert Polynomial.x().coeffs == [0, 1]
        assert Polynomial.monomial(3, 2).coeffs == [0, 0, 0, 2]
        assert Polynomial.monomial(0).coeffs == [1]

    def test_monomial_rejects_negative_power(self):
        with pytest.raises(ValueError, match="non-negative"):
            Polynomial.monomial(-1)

    def test_falling_factorial(self):
        assert Polynomial.falling_factorial(0) == Polynomial.one()
        assert Polynomial.falling_factorial(3).coeffs == [0, 2, -3, 1]
        assert Polynomial.falling_factorial(4).eval(4) == 24
        assert Polynomial.falling_factorial(4).eval(3) == 0

    def test_arithmetic(self):
        p = Polynomial([1, 1])
        q = Polynomial([-1, 1])
        assert (p + q).coeffs == [0, 2]
        assert (p - q).coeffs == [2]
        assert (p * q).coeffs == [-1, 0, 1]
        assert (-p).coeffs == [-1, -1]

    def test_cancellation_lowers_degree(self):
        p = Polynomial([0, 0, 1])
        assert (p - p).is_zero()
        assert (p - p).degree() == 0
        assert (p + Polynomial([1, 0, -1])).degree() == 0

    def test_eval_and_call(self):
        p = Polynomial([1, -3, 0, 2])
        assert p.eval(0) == 1
        assert p.eval(2) == 11
        assert p(-1) == 2

    def test_equality_and_hash(self):
        assert Polynomial([1, 2]) == Polynomial([1, 2, 0])
        assert Polynomial([1, 2]) != Polynomial([2, 1])
        assert len({Polynomial([1, 2]), Polynomial([1, 2, 0])}) == 1

    def test_foreign_operands(self):
        assert Polynomial([1]) != 1
        with pytest.raises(TypeError):
            Polynomial([1]) + 1

    def test_repr(self):
        assert repr(Polynomial([0, -1, 1])) == "Polynomial([0, -1, 1])"
