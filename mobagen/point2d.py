"""Integer grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

INT32_MAX = 2147483647


@dataclass(frozen=True)
class Point2D:
    """An immutable, hashable pair of integer coordinates.

    The y axis grows downwards, so ``UP`` is ``(0, -1)``.
    """

    x: int = 0
    y: int = 0

    UP: ClassVar[Point2D]
    DOWN: ClassVar[Point2D]
    LEFT: ClassVar[Point2D]
    RIGHT: ClassVar[Point2D]
    INFINITE: ClassVar[Point2D]

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{{{self.x}, {self.y}}}"

    def up(self) -> Point2D:
        """The neighbouring point above this one."""
        return self + Point2D.UP

    def down(self) -> Point2D:
        """The neighbouring point below this one."""
        return self + Point2D.DOWN

    def left(self) -> Point2D:
        """The neighbouring point to the left of this one."""
        return self + Point2D.LEFT

    def right(self) -> Point2D:
        """The neighbouring point to the right of this one."""
        return self + Point2D.RIGHT


Point2D.UP = Point2D(0, -1)
Point2D.DOWN = Point2D(0, 1)
Point2D.LEFT = Point2D(-1, 0)
Point2D.RIGHT = Point2D(1, 0)
Point2D.INFINITE = Point2D(INT32_MAX, INT32_MAX)