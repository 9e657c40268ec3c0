"""
MATRIXtools Shapes Module

Reference shapes, grid and axis segments, eigenvector arrows and the
unit-to-pixel mapping handed to a rendering front end.
"""

# Import main classes
from .operations import ShapeOperations

from .constants import SHAPE_NAMES

# Import core functions for advanced users
from .core_functions import (
    grid_points_np_core,
    grid_lines_np_core,
    axis_lines_np_core,
    to_canvas_np_core
)

# Define public API
__all__ = [
    'ShapeOperations',
    'SHAPE_NAMES',
    # Core functions for advanced use
    'grid_points_np_core',
    'grid_lines_np_core',
    'axis_lines_np_core',
    'to_canvas_np_core'
]
