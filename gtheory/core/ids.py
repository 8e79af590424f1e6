"""
Identifier handles and the weight contract.

Node and edge ids are dense, zero-based integers handed out by a storage
in insertion order. They are only meaningful for the storage that issued
them.
"""

from typing import Any, NewType, Optional, Protocol, TypeVar

NodeId = NewType("NodeId", int)
EdgeId = NewType("EdgeId", int)


class Weight(Protocol):
    """Minimal numeric capability required of edge weights.

    Weights must be totally ordered and closed under addition. The additive
    identity is obtained with :func:`zero_weight`. ``int``, ``float``,
    ``fractions.Fraction``, ``decimal.Decimal`` and numpy scalars all qualify.
    """

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...


W = TypeVar("W", bound=Weight)


def zero_weight(sample: Optional[Any] = None) -> Any:
    """
    Return the additive identity for the type of ``sample``.

    Args:
        sample: Any weight of the desired type. If None, returns int 0.

    Returns:
        Zero of the same numeric type.

    Example:
        >>> from fractions import Fraction
        >>> zero_weight(Fraction(1, 3))
        Fraction(0, 1)
    """
    if sample is None:
        return 0
    return type(sample)(0)
