"""
MATRIXtools Vector Operations Module

Provides the vector primitives used across the toolkit: matrix-vector
products for 2D and 3D maps, transformation of ordered point sequences,
vector magnitude and normalisation.
"""

# Import main classes
from .operations import VectorOperations


# Import core functions for advanced users
from .core_functions import (
    matrix_vector_2D_nb_core,
    matrix_vector_3D_nb_core,
    transform_points_2D_nb_core,
    vector_magnitude_nb_core,
    vector_normalize_2D_nb_core,
    matrix_vector_np_core,
    transform_points_np_core,
    vector_magnitude_np_core,
    vector_normalize_np_core
)

# Define public API
__all__ = [
    'VectorOperations',
    # Core functions for advanced use
    'matrix_vector_2D_nb_core',
    'matrix_vector_3D_nb_core',
    'transform_points_2D_nb_core',
    'vector_magnitude_nb_core',
    'vector_normalize_2D_nb_core',
    'matrix_vector_np_core',
    'transform_points_np_core',
    'vector_magnitude_np_core',
    'vector_normalize_np_core'
]
