"""
Line record - a single straight growth unit of a seed's branch tree.

Lines are plain data; growth is done by the free functions below so that
every call receives the generator and config it depends on explicitly.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import GrowthConfig
from .vector import Vector2D

GROWTH_RATE = 1.0

GROWING = 'growing'
EXPIRED = 'expired'
COLLIDED = 'collided'


@dataclass(eq=False)
class Line:
    origin: Vector2D
    tip: Vector2D
    angle: float
    seed_id: int
    index: int
    generation: int = 0
    parent: Optional[int] = None  # index of the parent line in the same seed
    active: bool = True
    expired: bool = False
    pending_split: bool = False
    steps: int = 0
    tag: float = 0.0

    @property
    def key(self) -> Tuple[int, int]:
        return (self.seed_id, self.index)

    @property
    def parent_key(self) -> Optional[Tuple[int, int]]:
        if self.parent is None:
            return None
        return (self.seed_id, self.parent)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def state(self) -> str:
        if self.active:
            return GROWING
        return EXPIRED if self.expired else COLLIDED

    @property
    def length(self) -> float:
        return self.origin.distance_to(self.tip)

    def __repr__(self) -> str:
        return f"Line({self.key}, gen={self.generation}, {self.origin} -> {self.tip}, {self.state})"


def expiry_probability(generation: int, expiry_threshold: float) -> float:
    return min(1.0, max(0.0, generation * expiry_threshold))


def grow_line(line: Line, *, rnd, config: GrowthConfig) -> None:
    """Advance the tip one unit and draw the split and expiry outcomes for this step."""
    line.tip = line.tip + Vector2D.from_angle(line.angle, GROWTH_RATE)
    line.steps += 1
    line.pending_split = rnd() < config.p_bifurcation
    if rnd() < line.generation * config.expiry_threshold:
        line.expired = True


def retract_line(line: Line) -> None:
    """Undo the last step; approximates clipping at a collision."""
    line.tip = line.tip - Vector2D.from_angle(line.angle, GROWTH_RATE)


def create_line(
    origin: Vector2D,
    angle: float,
    *,
    rnd,
    config: GrowthConfig,
    seed_id: int,
    index: int,
    parent: Optional[Line] = None
) -> Line:
    line = Line(
        origin=origin.copy(),
        tip=origin.copy(),
        angle=angle,
        seed_id=seed_id,
        index=index,
        generation=parent.generation + 1 if parent is not None else 0,
        parent=parent.index if parent is not None else None,
    )
    line.tag = rnd()
    grow_line(line, rnd=rnd, config=config)
    return line
