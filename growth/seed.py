"""
Seed - an independently growing branch tree: one root line plus every line
that has split off from it.
"""

import math
from dataclasses import dataclass, field
from typing import List

from .config import GrowthConfig
from .line import Line, create_line, grow_line, retract_line
from .profiling import COLLISION_SCAN, profile_block
from .vector import Vector2D

TWO_PI = math.pi * 2
SPLIT_ANGLE = math.pi / 2


@dataclass(eq=False)
class Seed:
    seed_id: int
    angle: float
    lines: List[Line] = field(default_factory=list)

    @property
    def root(self) -> Line:
        return self.lines[0]

    @property
    def active_lines(self) -> List[Line]:
        return [line for line in self.lines if line.active]

    def __repr__(self) -> str:
        return f"Seed({self.seed_id}, angle={self.angle:.3f}, lines={len(self.lines)})"


def build_seed(seed_id: int, *, rnd, config: GrowthConfig, width: float, height: float) -> Seed:
    angle = rnd(0, TWO_PI)
    origin = Vector2D(rnd(0, width), rnd(0, height))
    seed = Seed(seed_id=seed_id, angle=angle)
    seed.lines.append(create_line(
        origin, angle, rnd=rnd, config=config, seed_id=seed_id, index=0
    ))
    return seed


def spawn_child(seed: Seed, parent: Line, *, rnd, config: GrowthConfig) -> Line:
    """Append a new line at the parent's tip, turned a quarter turn either way."""
    direction = 1 if rnd() < 0.5 else -1
    child = create_line(
        parent.tip,
        parent.angle + SPLIT_ANGLE * direction,
        rnd=rnd,
        config=config,
        seed_id=seed.seed_id,
        index=len(seed.lines),
        parent=parent,
    )
    seed.lines.append(child)
    return child


def grow_seed(seed: Seed, lines: List[Line], ctx) -> None:
    """
    Run one tick for the given lines of a seed.

    `lines` is the seed's share of the model's tick snapshot; children added
    here are left for the next tick. `ctx` is the owning GrowthModel, which
    supplies the generator, config, collision detector and forest traversal.
    """
    for line in lines:
        grow_line(line, rnd=ctx.rnd, config=ctx.config)

        if line.expired:
            ctx.deactivate(line)
            continue

        with profile_block(COLLISION_SCAN):
            collided = ctx.collision_detector.check_for_collisions(line, ctx.for_each_line_until_true)
        if collided:
            retract_line(line)
            ctx.deactivate(line)
            continue

        if line.pending_split:
            line.pending_split = False
            spawn_child(seed, line, rnd=ctx.rnd, config=ctx.config)
            ctx.active_line_count += 1
