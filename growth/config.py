"""
Configuration for line-forest growth.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GrowthConfig:
    seed_count: int = 5
    p_bifurcation: float = 0.03    # chance per tick that a growing line spawns a child
    expiry_threshold: float = 0.0005  # expiry chance per tick, per generation of depth

    def __post_init__(self):
        if isinstance(self.seed_count, bool) or not float(self.seed_count).is_integer():
            raise ValueError(f"seed_count must be a whole number, got {self.seed_count!r}")
        object.__setattr__(self, 'seed_count', int(self.seed_count))
        for name in ('p_bifurcation', 'expiry_threshold'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative finite number, got {value!r}")

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'GrowthConfig':
        """Create GrowthConfig from PipelineConfig."""
        return cls(
            seed_count=pipeline_config.seed_count,
            p_bifurcation=pipeline_config.p_bifurcation,
            expiry_threshold=pipeline_config.expiry_threshold,
        )


def build_random_config(rnd) -> GrowthConfig:
    """Draw growth parameters from the run's generator (consumes three draws)."""
    seed_count = int(rnd(1, 10) + 0.5)  # halves round up
    p_bifurcation = rnd(0.02, 0.05)
    expiry_threshold = rnd(0.001)
    return GrowthConfig(
        seed_count=seed_count,
        p_bifurcation=p_bifurcation,
        expiry_threshold=expiry_threshold,
    )
