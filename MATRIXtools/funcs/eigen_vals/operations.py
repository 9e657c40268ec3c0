"""
MATRIXtools: Eigenvalue Operations

This module provides the eigen-analysis of the toolkit: closed-form
eigenvalues and eigenvectors of general 2x2 matrices, and an approximate
eigenvalue estimate for 3x3 matrices.

The 3x3 routine is deliberately NOT a general eigensolver. It returns the
diagonal entries of the input sorted in descending order, which is exact
only for diagonal matrices. Displays built on top of it rely on that
documented behaviour, so it must not be swapped for a correct solver
without changing its name and contract.

"""

import numpy as np
from typing import Optional, Tuple
from .constants import *
from .core_functions import *
from ...matrix_types import EigenPair, freeze, matrix2x2, matrix3x3


class EigenvalueOperations:
    """
    A class to perform eigenvalue and eigenvector operations on matrices.

    This class provides methods for:
    - Computing the (possibly complex) eigenvalues of 2x2 matrices
    - Computing real eigenvectors of 2x2 matrices
    - Estimating eigenvalues of 3x3 matrices (approximation, see module docs)
    """

    def __init__(
        self,
        use_numba: bool = True):
        """
        Initialize the EigenvalueOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions. Defaults to True.
        """
        self.use_numba = use_numba


    def _eigenvalue_array(
        self,
        matrix: np.ndarray) -> np.ndarray:
        if self.use_numba:
            return eigenvalues_general_2x2_nb_core(matrix)
        return eigenvalues_general_2x2_np_core(matrix)


    def eigenvalues(
        self,
        matrix: np.ndarray) -> Tuple[EigenPair, EigenPair]:
        """
        Compute both eigenvalues of a 2x2 matrix.

        Args:
            matrix: 2x2 matrix

        Returns:
            Two EigenPairs. Real case: (trace + √Δ)/2 then (trace - √Δ)/2.
            Complex case: conjugate pair, positive imaginary part first.
        """
        matrix = matrix2x2(matrix)
        values = self._eigenvalue_array(matrix)
        return (EigenPair(float(values[0, REAL]), float(values[0, IMAG])),
                EigenPair(float(values[1, REAL]), float(values[1, IMAG])))


    def eigenvectors(
        self,
        matrix: np.ndarray,
        epsilon: float = EPSILON) -> Optional[Tuple[np.ndarray, np.ndarray]]:
        """
        Compute the real eigenvectors of a 2x2 matrix.

        Args:
            matrix: 2x2 matrix
            epsilon: tolerance for treating an off-diagonal entry as zero

        Returns:
            One unnormalised direction per eigenvalue, in eigenvalue order,
            or None when the eigenvalues are complex (a rotation-like map
            has no real invariant direction).
        """
        matrix = matrix2x2(matrix)
        values = self._eigenvalue_array(matrix)
        if values[0, IMAG] != 0.0:
            return None

        eigenvalues_real = np.ascontiguousarray(values[:, REAL])
        if self.use_numba:
            vectors = eigenvectors_general_2x2_nb_core(matrix, eigenvalues_real, epsilon)
        else:
            vectors = eigenvectors_general_2x2_np_core(matrix, eigenvalues_real, epsilon)
        return (freeze(vectors[0].copy()), freeze(vectors[1].copy()))


    def eigenvalues_3x3_approx(
        self,
        matrix: np.ndarray) -> np.ndarray:
        """
        APPROXIMATE eigenvalues of a 3x3 matrix.

        Returns the diagonal entries sorted in descending order. Exact only
        when the input is diagonal; for any other matrix it is a placeholder
        estimate, not the true spectrum.

        Args:
            matrix: 3x3 matrix

        Returns:
            np.ndarray: (3,) descending
        """
        matrix = matrix3x3(matrix)
        if self.use_numba:
            return freeze(eigenvalues_approx_3x3_nb_core(matrix))
        return freeze(eigenvalues_approx_3x3_np_core(matrix))
