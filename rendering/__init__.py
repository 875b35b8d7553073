"""
Export of grown forests for rendering outside the simulation.
"""

from .exporters import (
    export_forest_data,
    load_forest_data,
    forest_segments
)

__all__ = [
    'export_forest_data',
    'load_forest_data',
    'forest_segments'
]
