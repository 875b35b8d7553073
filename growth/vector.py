"""
Simple 2D Vector class for line growth.
"""

import math

import numpy as np


class Vector2D:
    __slots__ = ('x', 'y')
    
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)
    
    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)
    
    def __repr__(self) -> str:
        return f"Vector2D({self.x:.2f}, {self.y:.2f})"
    
    def __eq__(self, other: 'Vector2D') -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return bool(np.isclose(self.x, other.x) and np.isclose(self.y, other.y))

    __hash__ = None
    
    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)
    
    def distance_to(self, other: 'Vector2D') -> float:
        return (self - other).magnitude
    
    def to_tuple(self) -> tuple:
        return (self.x, self.y)
    
    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> 'Vector2D':
        """Unit step for a heading; angle 0 points along +y."""
        return cls(math.sin(angle) * length, math.cos(angle) * length)
    
    def copy(self) -> 'Vector2D':
        return Vector2D(self.x, self.y)
