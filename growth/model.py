"""
GrowthModel - owns every seed and drives the forest one tick at a time.

Each tick grows every line that was active when the tick started. A line
stops for good when it expires or when it collides with the canvas edge or
another line; growing lines occasionally split off a perpendicular child.
The caller keeps calling grow() while is_active() is true.
"""

from typing import Callable, Iterator, List, Optional

from .config import GrowthConfig
from .collision import CollisionDetector
from .line import Line
from .seed import Seed, build_seed, grow_seed
from .profiling import profile


class GrowthModel:
    def __init__(
        self,
        config: GrowthConfig,
        rnd,
        collision_detector: CollisionDetector,
        width: float,
        height: float
    ):
        self.config = config
        self.rnd = rnd
        self.collision_detector = collision_detector
        self.width = width
        self.height = height
        self.active_line_count = 0
        self.tick = 0
        self._seeds: Optional[List[Seed]] = None

    def generate(self):
        self.active_line_count = 0
        self.tick = 0
        self._seeds = []
        for seed_id in range(max(0, self.config.seed_count)):
            seed = build_seed(
                seed_id,
                rnd=self.rnd,
                config=self.config,
                width=self.width,
                height=self.height
            )
            self._seeds.append(seed)
            self.active_line_count += len(seed.lines)

    @profile
    def grow(self):
        snapshot = [(seed, seed.active_lines) for seed in self.seeds]
        for seed, lines in snapshot:
            grow_seed(seed, lines, self)
        self.tick += 1

    def deactivate(self, line: Line):
        line.active = False
        self.active_line_count -= 1

    def is_active(self) -> bool:
        return self.active_line_count > 0

    def for_each_line_until_true(self, visitor: Callable[[Line, GrowthConfig], object]) -> bool:
        """
        Visit lines in seed order, then creation order within each seed.
        Stops at the first truthy visitor result and returns True.
        """
        for seed in self.seeds:
            for line in seed.lines:
                if visitor(line, self.config):
                    return True
        return False

    @property
    def seeds(self) -> List[Seed]:
        return self._seeds or []

    def lines(self) -> Iterator[Line]:
        for seed in self.seeds:
            yield from seed.lines

    @property
    def line_count(self) -> int:
        return sum(len(seed.lines) for seed in self.seeds)

    @property
    def max_generation(self) -> int:
        return max((line.generation for line in self.lines()), default=0)
