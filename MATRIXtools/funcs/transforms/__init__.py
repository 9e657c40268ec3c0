"""
MATRIXtools Transform Generators Module

Rotation, scale and shear factories, the named preset catalogue and the
left-multiplication composition of a preset with the current matrix.
"""

# Import main classes
from .operations import TransformOperations

from .constants import PRESET_TRANSFORMS, PRESET_NAMES

# Import core functions for advanced users
from .core_functions import (
    rotation_matrix_np_core,
    scale_matrix_np_core,
    shear_matrix_np_core
)

# Define public API
__all__ = [
    'TransformOperations',
    'PRESET_TRANSFORMS',
    'PRESET_NAMES',
    # Core functions for advanced use
    'rotation_matrix_np_core',
    'scale_matrix_np_core',
    'shear_matrix_np_core'
]
