"""
Integer polynomials in one variable, as used for chromatic polynomials.

Coefficients are stored densely, lowest power first, and normalized after
every operation so that equal polynomials have equal coefficient lists.
"""

from typing import Iterable, List


class Polynomial:
    """
    Dense integer polynomial ``c0 + c1 x + c2 x^2 + ...``.

    Attributes:
        coeffs: Coefficients by power of x. Never empty; the zero
            polynomial is ``[0]`` and no other list ends in 0.

    Example:
        >>> p = Polynomial.x() * (Polynomial.x() - Polynomial.one())
        >>> p.coeffs
        [0, -1, 1]
        >>> p.eval(3)
        6
    """

    __slots__ = ("coeffs",)

    def __init__(self, coeffs: Iterable[int] = (0,)):
        self.coeffs: List[int] = [int(c) for c in coeffs] or [0]
        self._normalize()

    def _normalize(self) -> None:
        while len(self.coeffs) > 1 and self.coeffs[-1] == 0:
            self.coeffs.pop()

    @classmethod
    def zero(cls) -> "Polynomial":
        return cls([0])

    @classmethod
    def one(cls) -> "Polynomial":
        return cls([1])

    @classmethod
    def x(cls) -> "Polynomial":
        return cls([0, 1])

    @classmethod
    def monomial(cls, power: int, coeff: int = 1) -> "Polynomial":
        """Return ``coeff * x^power``."""
        if power < 0:
            raise ValueError(f"power must be non-negative, got {power}")
        return cls([0] * power + [coeff])

    @classmethod
    def falling_factorial(cls, n: int) -> "Polynomial":
        """Return ``x (x - 1) ... (x - n + 1)``; 1 for n = 0."""
        result = cls.one()
        for i in range(n):
            result = result * cls([-i, 1])
        return result

    def degree(self) -> int:
        """Degree, with the zero polynomial reported as degree 0."""
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return self.coeffs == [0]

    def eval(self, x: int) -> int:
        """Evaluate at ``x`` with Horner's scheme."""
        acc = 0
        for c in reversed(self.coeffs):
            acc = acc * x + c
        return acc

    def __call__(self, x: int) -> int:
        return self.eval(x)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(len(self.coeffs), len(other.coeffs))
        a = self.coeffs + [0] * (size - len(self.coeffs))
        b = other.coeffs + [0] * (size - len(other.coeffs))
        return Polynomial(x + y for x, y in zip(a, b))

    def __neg__(self) -> "Polynomial":
        return Polynomial(-c for c in self.coeffs)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        out = [0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == 0:
                continue
            for j, b in enumerate(other.coeffs):
                out[i + j] += a * b
        return Polynomial(out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash(tuple(self.coeffs))

    def __repr__(self) -> str:
        return f"Polynomial({self.coeffs})"
