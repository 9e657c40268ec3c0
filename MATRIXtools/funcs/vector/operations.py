"""
    MATRIXtools Vector Operations Module

    This module provides the vector primitives of the toolkit: applying a
    matrix to a vector, transforming an ordered sequence of points,
    magnitudes and normalisation. Numba kernels are used by default and the
    NumPy implementations are used when Numba is switched off.

    The dimension is an explicit tag (num_of_dims) chosen by the caller, it
    is never inferred from the length of the input.

"""

import numpy as np
from .constants import *
from .core_functions import *
from ...matrix_types import (
    Points2,
    Vector2,
    freeze,
    matrix2x2,
    matrix_of_dims,
    points2,
    vector2,
    vector_of_dims)


class VectorOperations():
    """
    Vector Operations using Numba kernels
    """

    def __init__(
        self,
        num_of_dims: int = 2,
        use_numba: bool = True) -> None:

        if num_of_dims not in (2, 3):
            raise ValueError(f"Unsupported vector dimension: {num_of_dims}")
        self.num_of_dims = num_of_dims
        self.use_numba = use_numba


    def multiply(
        self,
        matrix: np.ndarray,
        vector: np.ndarray) -> np.ndarray:
        """
        Standard matrix-vector product A v
        """
        matrix = matrix_of_dims(matrix, self.num_of_dims)
        vector = vector_of_dims(vector, self.num_of_dims)
        if self.use_numba:
            if self.num_of_dims == 2:
                out = matrix_vector_2D_nb_core(matrix, vector)
            else:
                out = matrix_vector_3D_nb_core(matrix, vector)
        else:
            out = matrix_vector_np_core(matrix, vector)
        return freeze(out)


    def transform_points(
        self,
        matrix: np.ndarray,
        points: np.ndarray) -> Points2:
        """
        Apply a 2x2 map to each point of an ordered sequence.

        The result is a new (N, 2) array in the same order as the input;
        the input sequence is left untouched.
        """
        if self.num_of_dims != 2:
            raise ValueError("Point sequences are only defined for 2D maps.")
        matrix = matrix2x2(matrix)
        points = points2(points)
        if self.use_numba:
            out = transform_points_2D_nb_core(matrix, points)
        else:
            out = transform_points_np_core(matrix, points)
        return freeze(np.ascontiguousarray(out))


    def vector_magnitude(
        self,
        vector: np.ndarray) -> float:
        """
        Euclidean length of a vector
        """
        vector = vector_of_dims(vector, self.num_of_dims)
        if self.use_numba:
            return float(vector_magnitude_nb_core(vector))
        return float(vector_magnitude_np_core(vector))


    def vector_normalize(
        self,
        vector: np.ndarray,
        epsilon: float = DEFAULT_EPS) -> Vector2:
        """
        Normalise a 2D vector to unit length.
        Returns the zero vector when |v| < epsilon (no direction).
        """
        vector = vector2(vector)
        if self.use_numba:
            out = vector_normalize_2D_nb_core(vector, epsilon)
        else:
            out = vector_normalize_np_core(vector, epsilon)
        return freeze(out)
