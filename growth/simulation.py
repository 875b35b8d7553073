"""
Simulation driver: builds a model from an integer seed and ticks it until
growth is exhausted.

This is the frame-loop side of the system. It owns the scheduling of ticks,
pausing and resuming, and completion callbacks; the model itself never loops.
"""

import time
from typing import Callable, Optional

from tqdm import tqdm

from .config import GrowthConfig, build_random_config
from .collision import Canvas, CollisionDetector
from .model import GrowthModel
from .prng import SeededRandom


def default_seed() -> int:
    """Time-derived seed, limited to 20 bits so it is easy to note down."""
    return int(time.time() * 1000) & 0xFFFFF


class Simulation:
    def __init__(
        self,
        seed: Optional[int] = None,
        config: Optional[GrowthConfig] = None,
        canvas: Optional[Canvas] = None
    ):
        self.seed = default_seed() if seed is None else seed
        self.canvas = canvas or Canvas(800, 800)
        self._fixed_config = config
        self.config: Optional[GrowthConfig] = None
        self.rnd: Optional[SeededRandom] = None
        self.model: Optional[GrowthModel] = None
        self.finished = False
        self._stop_requested = False

    def init(self) -> GrowthModel:
        self.rnd = SeededRandom(self.seed)
        if self._fixed_config is None:
            self.config = build_random_config(self.rnd)
        else:
            self.config = self._fixed_config
        collision_detector = CollisionDetector(self.canvas.is_visible)
        self.model = GrowthModel(
            self.config,
            self.rnd,
            collision_detector,
            self.canvas.width,
            self.canvas.height
        )
        self.model.generate()
        self.finished = False
        self._stop_requested = False
        return self.model

    def step(self) -> bool:
        """
        Perform one growth tick.
        Returns True once growth is exhausted.
        """
        if self.model is None:
            self.init()
        self.model.grow()
        return not self.model.is_active()

    def stop(self):
        """Pause after the tick in progress; run() resumes."""
        self._stop_requested = True

    def run(
        self,
        max_ticks: Optional[int] = None,
        callback: Optional[Callable[[GrowthModel, int], None]] = None,
        on_finished: Optional[Callable[[GrowthModel], None]] = None,
        verbose: bool = True
    ) -> int:
        """
        Tick until growth is exhausted, max_ticks is reached, or stop() is called.
        Optional callback is called after each tick with (model, tick).
        Returns the number of ticks completed so far.
        """
        if self.model is None:
            self.init()
        self._stop_requested = False

        if verbose:
            print(f"Growing seed {self.seed}: {self.config.seed_count} seeds, "
                  f"p_bifurcation={self.config.p_bifurcation:.4f}, "
                  f"expiry_threshold={self.config.expiry_threshold:.6f}")

        progress = tqdm(total=max_ticks, desc="Growing", unit="tick", disable=not verbose)
        try:
            while not self.finished and self.model.is_active():
                if max_ticks is not None and self.model.tick >= max_ticks:
                    if verbose:
                        tqdm.write(f"Stopped at tick cap ({max_ticks}) with "
                                   f"{self.model.active_line_count} lines still growing")
                    break

                complete = self.step()
                progress.update(1)

                if callback:
                    callback(self.model, self.model.tick)

                if complete:
                    break
                if self._stop_requested:
                    self._stop_requested = False
                    break
        finally:
            progress.close()

        if not self.finished and not self.model.is_active():
            self.finished = True
            if verbose:
                print(f"Growth complete after {self.model.tick} ticks")
                print(f"  Lines: {self.model.line_count}")
                print(f"  Deepest generation: {self.model.max_generation}")
            if on_finished:
                on_finished(self.model)

        return self.model.tick
