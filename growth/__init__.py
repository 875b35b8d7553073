"""
Seeded growth of branching line forests on a 2D canvas.

Each seed grows a root line in a random direction; growing lines split off
perpendicular children at random and stop when they expire or collide with
the canvas edge or another line.
"""

from .prng import SeededRandom
from .vector import Vector2D
from .config import GrowthConfig, build_random_config
from .line import Line, create_line, grow_line, retract_line, expiry_probability
from .collision import Canvas, CollisionDetector, lines_intersect, segments_intersect
from .seed import Seed
from .model import GrowthModel
from .simulation import Simulation, default_seed

__all__ = [
    'SeededRandom',
    'Vector2D',
    'GrowthConfig',
    'build_random_config',
    'Line',
    'create_line',
    'grow_line',
    'retract_line',
    'expiry_probability',
    'Canvas',
    'CollisionDetector',
    'lines_intersect',
    'segments_intersect',
    'Seed',
    'GrowthModel',
    'Simulation',
    'default_seed'
]
