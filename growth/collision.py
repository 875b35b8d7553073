"""
Collision detection between growing lines.

A line collides when its tip leaves the canvas or when its segment
intersects any other line in the forest, except the lines it is joined to
(its parent and its own children share an endpoint with it).
"""

from dataclasses import dataclass
from typing import Callable

from .line import Line
from .vector import Vector2D

COLLINEAR = 0
CLOCKWISE = 1
ANTICLOCKWISE = 2


@dataclass(frozen=True)
class Canvas:
    width: float
    height: float

    def is_visible(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def orientation(p: Vector2D, q: Vector2D, r: Vector2D) -> int:
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val > 0:
        return CLOCKWISE
    if val < 0:
        return ANTICLOCKWISE
    return COLLINEAR


def on_segment(p: Vector2D, q: Vector2D, r: Vector2D) -> bool:
    """True if q lies within the bounding box of segment p-r."""
    return (min(p.x, r.x) <= q.x <= max(p.x, r.x)
            and min(p.y, r.y) <= q.y <= max(p.y, r.y))


def segments_intersect(p1: Vector2D, q1: Vector2D, p2: Vector2D, q2: Vector2D) -> bool:
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    if o1 == COLLINEAR and on_segment(p1, p2, q1):
        return True
    if o2 == COLLINEAR and on_segment(p1, q2, q1):
        return True
    if o3 == COLLINEAR and on_segment(p2, p1, q2):
        return True
    if o4 == COLLINEAR and on_segment(p2, q1, q2):
        return True

    return False


def lines_intersect(l1: Line, l2: Line) -> bool:
    return segments_intersect(l1.origin, l1.tip, l2.origin, l2.tip)


def are_adjacent(l1: Line, l2: Line) -> bool:
    """Same line, or a direct parent/child pair."""
    return (l1.key == l2.key
            or l1.parent_key == l2.key
            or l2.parent_key == l1.key)


class CollisionDetector:
    def __init__(self, is_visible: Callable[[float, float], bool]):
        self.is_visible = is_visible

    def is_offscreen(self, line: Line) -> bool:
        return not self.is_visible(line.tip.x, line.tip.y)

    def check_for_collisions(self, line: Line, for_each_line_until_true) -> bool:
        if self.is_offscreen(line):
            return True

        def collides_with(other: Line, *_) -> bool:
            if are_adjacent(line, other):
                return False
            return lines_intersect(line, other)

        return bool(for_each_line_until_true(collides_with))
