"""
Configuration for forest plots.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ForestRenderConfig:
    figsize: Tuple[int, int] = (12, 12)
    dpi: int = 150
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    
    line_color: Tuple[float, float, float, float] = (0.15, 0.15, 0.15, 1.0)
    line_width: float = 0.8
    
    # Colour lines by generation instead of using line_color
    color_by_generation: bool = False
    generation_cmap: str = 'viridis'
    
    show_active_tips: bool = False
    tip_color: str = 'crimson'
    tip_size: float = 4.0
