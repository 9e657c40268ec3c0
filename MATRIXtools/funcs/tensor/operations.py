"""
MATRIXtools: Tensor Operations

This module provides the fixed-size matrix primitives of the toolkit:
determinant, trace, transpose, matrix products and identities for 2x2 and
3x3 matrices. Numba kernels are used by default with NumPy fallbacks.

"""

import numpy as np
from .constants import *
from .core_functions import *
from ...matrix_types import freeze, matrix_of_dims


class TensorOperations:
    """
    A class to perform operations on 2x2 or 3x3 matrices.
    No data objects. Only methods.

    """
    def __init__(
        self,
        num_of_dims: int = 2,
        use_numba: bool = True):
        """
        Initialize the TensorOperations class.

        Args:
            num_of_dims (int, optional): 2 for 2x2 matrices, 3 for 3x3. Defaults to 2.
            use_numba (bool, optional): use Numba core functions. Defaults to True.
        """
        if num_of_dims not in SUPPORTED_DIMS:
            raise ValueError(f"Unsupported matrix dimension: {num_of_dims}x{num_of_dims}")
        self.num_of_dims = num_of_dims
        self.use_numba = use_numba


    def _matrix(
        self,
        matrix: np.ndarray) -> np.ndarray:
        return matrix_of_dims(matrix, self.num_of_dims)


    def determinant(
        self,
        matrix: np.ndarray) -> float:
        """Determinant (closed form for 2x2, row-0 cofactor expansion for 3x3)"""
        matrix = self._matrix(matrix)
        if self.use_numba:
            if self.num_of_dims == 2:
                return float(determinant_2D_nb_core(matrix))
            return float(determinant_3D_nb_core(matrix))
        return float(determinant_np_core(matrix))


    def trace(
        self,
        matrix: np.ndarray) -> float:
        """Sum of diagonal elements"""
        matrix = self._matrix(matrix)
        if self.use_numba:
            return float(trace_nb_core(matrix))
        return float(trace_np_core(matrix))


    def transpose(
        self,
        matrix: np.ndarray) -> np.ndarray:
        """Transpose, returned as a new matrix"""
        matrix = self._matrix(matrix)
        if self.use_numba:
            return freeze(transpose_nb_core(matrix))
        return freeze(transpose_np_core(matrix))


    def matrix_multiply(
        self,
        matrix_0: np.ndarray,
        matrix_1: np.ndarray) -> np.ndarray:
        """
        Matrix product matrix_0 . matrix_1.

        As a composition of maps, matrix_1 acts first and matrix_0 second.
        """
        matrix_0 = self._matrix(matrix_0)
        matrix_1 = self._matrix(matrix_1)
        if self.use_numba:
            return freeze(matrix_multiply_nb_core(matrix_0, matrix_1))
        return freeze(matrix_multiply_np_core(matrix_0, matrix_1))


    def identity(self) -> np.ndarray:
        """Fresh read-only identity matrix"""
        return freeze(np.eye(self.num_of_dims, dtype=np.float64))
