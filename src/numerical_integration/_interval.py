"""Closed integration interval."""

import struct
from dataclasses import dataclass


def _bits(x: float) -> bytes:
    return struct.pack("<d", x)


@dataclass
class Interval:
    """Integration interval [left, right].

    Bounds are stored as given. No ordering is enforced, so ``left > right``
    describes a reversed interval whose integral carries the opposite sign.

    Parameters
    ----------
    left : float
        Left integration bound.
    right : float
        Right integration bound.

    Notes
    -----
    Equality compares the IEEE 754 bit patterns of the bounds, so
    ``Interval(0.0, 1.0) != Interval(-0.0, 1.0)`` and an interval with a NaN
    bound equals its copy.

    Examples
    --------
    >>> from numerical_integration import Interval
    >>> interval = Interval(0.0, 3.0)
    >>> interval.width
    3.0
    >>> interval == Interval(0, 3)
    True
    """

    left: float
    right: float

    def __post_init__(self):
        self.left = float(self.left)
        self.right = float(self.right)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (
            _bits(self.left) == _bits(other.left)
            and _bits(self.right) == _bits(other.right)
        )

    @property
    def width(self) -> float:
        """Signed width ``right - left``."""
        return self.right - self.left

    def set(self, left: float, right: float) -> None:
        self.left = float(left)
        self.right = float(right)
