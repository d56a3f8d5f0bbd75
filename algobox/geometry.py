"""Areas of common plane shapes."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = ["Shape", "area", "PI"]

PI = 3.14


class Shape(IntEnum):
    """Shapes whose area can be computed, numbered as in the menu."""

    CIRCLE = 1
    TRIANGLE = 2
    RECTANGLE = 3
    RHOMBUS = 4
    SQUARE = 5
    PENTAGON = 6
    HEXAGON = 7


_DIMENSIONS = {
    Shape.CIRCLE: ("radius",),
    Shape.TRIANGLE: ("base", "height"),
    Shape.RECTANGLE: ("length", "breadth"),
    Shape.RHOMBUS: ("first diagonal", "second diagonal"),
    Shape.SQUARE: ("side",),
    Shape.PENTAGON: ("side",),
    Shape.HEXAGON: ("side",),
}


def area(shape: Shape | int, *args: float) -> float:
    """Return the area of ``shape`` given its dimensions.

    Circle: radius. Triangle: base, height. Rectangle: length, breadth.
    Rhombus: both diagonals. Square, regular pentagon and hexagon: side.
    """
    kind = Shape(shape)
    expected = _DIMENSIONS[kind]
    if len(args) != len(expected):
        raise TypeError(
            f"{kind.name.lower()} needs {len(expected)} dimension(s) "
            f"({', '.join(expected)}), got {len(args)}"
        )
    if kind is Shape.CIRCLE:
        (radius,) = args
        return radius * radius * PI
    if kind in (Shape.TRIANGLE, Shape.RHOMBUS):
        first, second = args
        return 0.5 * first * second
    if kind is Shape.RECTANGLE:
        length, breadth = args
        return length * breadth
    (side,) = args
    if kind is Shape.SQUARE:
        return side * side
    if kind is Shape.PENTAGON:
        return 0.25 * math.sqrt(5 * (5 + 2 * math.sqrt(5))) * side * side
    return 3 * math.sqrt(3) / 2 * side * side