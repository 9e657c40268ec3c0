"""
MATRIXtools Tensor Operations Module

Provides the 2x2 and 3x3 matrix primitives: determinant, trace, transpose,
matrix products and identities.
"""

# Import main classes
from .operations import TensorOperations


# Import core functions for advanced users
from .core_functions import (
    determinant_2D_nb_core,
    determinant_3D_nb_core,
    trace_nb_core,
    transpose_nb_core,
    matrix_multiply_nb_core,
    determinant_np_core,
    trace_np_core,
    transpose_np_core,
    matrix_multiply_np_core
)

# Define public API
__all__ = [
    'TensorOperations',
    # Core functions for advanced use
    'determinant_2D_nb_core',
    'determinant_3D_nb_core',
    'trace_nb_core',
    'transpose_nb_core',
    'matrix_multiply_nb_core',
    'determinant_np_core',
    'trace_np_core',
    'transpose_np_core',
    'matrix_multiply_np_core'
]
