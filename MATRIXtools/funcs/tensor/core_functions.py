from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for matrix operations
##########################################################################################


@njit(cache=True)
def determinant_2D_nb_core(
    matrix):
    """
    Determinant of a 2x2 matrix: a*d - b*c
    """
    return matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]


@njit(cache=True)
def determinant_3D_nb_core(
    matrix):
    """
    Determinant of a 3x3 matrix by cofactor expansion along row 0:
    a(ei - fh) - b(di - fg) + c(dh - eg)
    """
    a, b, c = matrix[0, 0], matrix[0, 1], matrix[0, 2]
    d, e, f = matrix[1, 0], matrix[1, 1], matrix[1, 2]
    g, h, i = matrix[2, 0], matrix[2, 1], matrix[2, 2]
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@njit(cache=True)
def trace_nb_core(
    matrix):
    """
    Sum of the diagonal of an n x n matrix
    """
    total = 0.0
    for m in range(matrix.shape[0]):
        total += matrix[m, m]
    return total


@njit(cache=True)
def transpose_nb_core(
    matrix):
    """
    Transpose into a freshly allocated matrix
    """
    n = matrix.shape[0]
    out = np.empty((n, n), dtype=np.float64)
    for m in range(n):
        for k in range(n):
            out[m, k] = matrix[k, m]
    return out


@njit(cache=True)
def matrix_multiply_nb_core(
    matrix_0,
    matrix_1):
    """
    Matrix product C_ij = A_ik B_kj of two n x n matrices.

    Every output cell is accumulated into a new result array so the inputs
    are only ever read.
    """
    n = matrix_0.shape[0]
    out = np.zeros((n, n), dtype=np.float64)
    for m in range(n):
        for k in range(n):
            total = 0.0
            for l in range(n):
                total += matrix_0[m, l] * matrix_1[l, k]
            out[m, k] = total
    return out


##########################################################################################
# NumPy fallbacks
##########################################################################################


def determinant_np_core(
    matrix: np.ndarray) -> float:
    """
    Closed-form determinant for 2x2 and 3x3 matrices.
    The 3x3 case is the row-0 cofactor expansion written as r0 . (r1 x r2).
    """
    if matrix.shape[0] == 2:
        return matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]
    return np.dot(matrix[0], np.cross(matrix[1], matrix[2]))


def trace_np_core(
    matrix: np.ndarray) -> float:
    return np.trace(matrix)


def transpose_np_core(
    matrix: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(matrix.T)


def matrix_multiply_np_core(
    matrix_0: np.ndarray,
    matrix_1: np.ndarray) -> np.ndarray:
    return np.einsum('ik,kj->ij', matrix_0, matrix_1)
