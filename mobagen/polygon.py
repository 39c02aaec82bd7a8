"""Simple outline shapes made of points around the origin."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.transform import Transform
from mobagen.vector2 import Vector2

Segment = tuple[tuple[int, int], tuple[int, int]]


@dataclass
class Polygon:
    """A closed outline defined by its vertices in local space."""

    points: list[Vector2] = field(default_factory=list)

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """Vertices scaled, rotated and moved into place by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle)
            + transform.position
            for p in self.points
        ]

    def edges(self, transform: Transform) -> list[Segment]:
        """Integer line segments outlining the placed polygon, closing the loop."""
        placed = [(int(p.x), int(p.y)) for p in self.drawable_points(transform)]
        return list(zip(placed, placed[1:] + placed[:1]))


def circle(sample: int) -> Polygon:
    """A circle approximated by ``sample`` points, starting from up."""
    return Polygon([Vector2.up().rotate(360.0 * i / sample) for i in range(sample)])


def square() -> Polygon:
    """A unit square standing on one edge."""
    return Polygon([Vector2.up().rotate(angle) for angle in (45, 135, 225, 315)])


def hexagon() -> Polygon:
    """A unit hexagon with one vertex pointing up."""
    return Polygon([Vector2.up().rotate(angle) for angle in range(0, 360, 60)])