"""Elliptic curve point type."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """
    Point on a short Weierstrass curve in Jacobian coordinates.

    A finite point (x, y, z) with z != 0 stands for the affine point
    (x / z^2, y / z^3). z == 0 is the point at infinity.
    """
    x: int
    y: int
    z: int = 1

    @classmethod
    def from_affine(cls, x: int, y: int) -> "Point":
        """Build a finite point from affine coordinates"""
        return cls(x, y, 1)

    @property
    def is_infinity(self) -> bool:
        """Check if this is the point at infinity"""
        return self.z == 0

    @property
    def is_affine(self) -> bool:
        return self.z == 1

    def xy(self) -> Tuple[int, int]:
        """Return (x, y) of an affine point"""
        if not self.is_affine:
            raise ValueError("Point is not in affine form")
        return self.x, self.y

    def __str__(self) -> str:
        if self.is_infinity:
            return "Point(infinity)"
        return f"Point(x={self.x:#x}, y={self.y:#x}, z={self.z:#x})"


INFINITY = Point(0, 1, 0)
