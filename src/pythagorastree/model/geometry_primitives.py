"""
Geometric Primitives for the tree construction.

All coordinates are in surface (screen) space: x grows to the right and
y grows downward.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Vector:
    """
    A vector in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    def perpendicular(self) -> Vector:
        """
        Rotate by 90 degrees, counter-clockwise on screen (y down).

        A vector pointing right turns to point up.
        """
        return Vector(self.y, -self.x)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in 2D space."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

@dataclass(frozen=True)
class Line:
    """A straight stroke between two points."""
    start: Point
    end: Point
