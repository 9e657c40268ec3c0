"""
MATRIXtools Eigenvalue Operations Module

Provides eigen-analysis for the toolkit's fixed-size matrices.

Features:
- Closed-form eigenvalues of general 2x2 matrices, real or complex-conjugate
- Real eigenvectors of 2x2 matrices (None when the eigenvalues are complex)
- Approximate 3x3 eigenvalues (sorted diagonal, exact for diagonal input only)
"""

# Import main classes
from .operations import EigenvalueOperations


# Import core functions for advanced users
from .core_functions import (
    eigenvalues_general_2x2_nb_core,
    eigenvectors_general_2x2_nb_core,
    eigenvalues_approx_3x3_nb_core,
    eigenvalues_general_2x2_np_core,
    eigenvectors_general_2x2_np_core,
    eigenvalues_approx_3x3_np_core
)

# Define public API
__all__ = [
    'EigenvalueOperations',
    # Core functions for advanced use
    'eigenvalues_general_2x2_nb_core',
    'eigenvectors_general_2x2_nb_core',
    'eigenvalues_approx_3x3_nb_core',
    'eigenvalues_general_2x2_np_core',
    'eigenvectors_general_2x2_np_core',
    'eigenvalues_approx_3x3_np_core'
]
