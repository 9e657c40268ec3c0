"""
MATRIXtools Classification Module

Symmetry, orthogonality and positive-definiteness predicates, plus the
simplified (approximate) diagonalisation and congruence transforms of
symmetric 3x3 matrices.
"""

# Import main classes
from .operations import ClassifyOperations


# Import core functions for advanced users
from .core_functions import (
    is_symmetric_nb_core,
    is_orthogonal_nb_core,
    is_positive_definite_nb_core,
    is_symmetric_np_core,
    is_orthogonal_np_core,
    is_positive_definite_np_core
)

# Define public API
__all__ = [
    'ClassifyOperations',
    # Core functions for advanced use
    'is_symmetric_nb_core',
    'is_orthogonal_nb_core',
    'is_positive_definite_nb_core',
    'is_symmetric_np_core',
    'is_orthogonal_np_core',
    'is_positive_definite_np_core'
]
