from numba import njit, prange
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for vector operations
##########################################################################################


@njit(cache=True)
def matrix_vector_2D_nb_core(
    matrix,
    vector):
    """
    Matrix-vector product for a 2x2 map
    matrix: shape (2, 2)
    vector: shape (2,)
    returns: shape (2,)
    """
    out = np.empty(2, dtype=np.float64)
    out[X] = matrix[0, 0] * vector[X] + matrix[0, 1] * vector[Y]
    out[Y] = matrix[1, 0] * vector[X] + matrix[1, 1] * vector[Y]
    return out


@njit(cache=True)
def matrix_vector_3D_nb_core(
    matrix,
    vector):
    """
    Matrix-vector product for a 3x3 map
    matrix: shape (3, 3)
    vector: shape (3,)
    returns: shape (3,)
    """
    out = np.empty(3, dtype=np.float64)
    for m in range(3):
        out[m] = (matrix[m, 0] * vector[X] +
                  matrix[m, 1] * vector[Y] +
                  matrix[m, 2] * vector[Z])
    return out


@njit(parallel=True, cache=True)
def transform_points_2D_nb_core(
    matrix,
    points):
    """
    Apply a 2x2 map to every point of an ordered sequence
    matrix: shape (2, 2)
    points: shape (N, 2)
    returns: shape (N, 2), same order as the input
    """
    N = points.shape[0]
    out = np.empty((N, 2), dtype=np.float64)

    for n in prange(N):
        x = points[n, X]
        y = points[n, Y]
        out[n, X] = matrix[0, 0] * x + matrix[0, 1] * y
        out[n, Y] = matrix[1, 0] * x + matrix[1, 1] * y

    return out


@njit(cache=True)
def vector_magnitude_nb_core(
    vector):
    """
    Euclidean length of a single 2D or 3D vector
    """
    total = 0.0
    for m in range(vector.shape[0]):
        total += vector[m] * vector[m]
    return np.sqrt(total)


@njit(cache=True)
def vector_normalize_2D_nb_core(
    vector,
    epsilon=DEFAULT_EPS):
    """
    Unit vector in the direction of a 2D vector.
    A vector shorter than epsilon has no direction and maps to (0, 0).
    """
    out = np.zeros(2, dtype=np.float64)
    length = np.sqrt(vector[X] * vector[X] + vector[Y] * vector[Y])
    if length < epsilon:
        return out
    out[X] = vector[X] / length
    out[Y] = vector[Y] / length
    return out


##########################################################################################
# NumPy fallbacks (also accept stacks of vectors along the leading axes)
##########################################################################################


def matrix_vector_np_core(
    matrix: np.ndarray,
    vector: np.ndarray) -> np.ndarray:
    """
    Matrix-vector product, vector: shape (..., n)
    """
    return np.einsum('ij,...j->...i', matrix, vector)


def transform_points_np_core(
    matrix: np.ndarray,
    points: np.ndarray) -> np.ndarray:
    """
    Apply a 2x2 map to points of shape (N, 2) (row-vector convention: P A^T)
    """
    return points @ matrix.T


def vector_magnitude_np_core(
    vector: np.ndarray) -> np.ndarray:
    """
    Euclidean length along the last axis
    """
    return np.sqrt(np.sum(vector**2, axis=-1))


def vector_normalize_np_core(
    vector: np.ndarray,
    epsilon: float = DEFAULT_EPS) -> np.ndarray:
    """
    Normalise along the last axis; vectors shorter than epsilon become zero.
    """
    length = vector_magnitude_np_core(vector)[..., np.newaxis]
    safe = np.where(length < epsilon, 1.0, length)
    return np.where(length < epsilon, 0.0, vector / safe)
