from numba import njit
import numpy as np
from .constants import *
from ..tensor.core_functions import (
    determinant_2D_nb_core,
    determinant_3D_nb_core,
    determinant_np_core)

##########################################################################################
# Core numba JIT functions for matrix classification
##########################################################################################


@njit(cache=True)
def is_symmetric_nb_core(
    matrix,
    epsilon=EPSILON):
    """
    True iff |M_ij - M_ji| <= epsilon for every i <= j (NaN anywhere gives False)
    """
    n = matrix.shape[0]
    for i in range(n):
        for j in range(i, n):
            if not abs(matrix[i, j] - matrix[j, i]) <= epsilon:
                return False
    return True


@njit(cache=True)
def is_orthogonal_nb_core(
    matrix,
    epsilon=EPSILON):
    """
    True iff M^T M equals the identity to within epsilon in every cell
    """
    n = matrix.shape[0]
    for i in range(n):
        for j in range(n):
            # (M^T M)_ij = sum_k M_ki M_kj
            total = 0.0
            for k in range(n):
                total += matrix[k, i] * matrix[k, j]
            expected = 1.0 if i == j else 0.0
            if not abs(total - expected) <= epsilon:
                return False
    return True


@njit(cache=True)
def is_positive_definite_nb_core(
    matrix,
    epsilon=EPSILON):
    """
    Sylvester's criterion on a symmetric 2x2 or 3x3 matrix: every leading
    principal minor must be strictly positive. Non-symmetric input is never
    positive definite.
    """
    if not is_symmetric_nb_core(matrix, epsilon):
        return False

    # first order minor
    if matrix[0, 0] <= 0.0:
        return False

    # second order minor
    if determinant_2D_nb_core(matrix[:2, :2]) <= 0.0:
        return False

    # third order minor (the determinant)
    if matrix.shape[0] == 3 and determinant_3D_nb_core(matrix) <= 0.0:
        return False

    return True


##########################################################################################
# NumPy fallbacks
##########################################################################################


def is_symmetric_np_core(
    matrix: np.ndarray,
    epsilon: float = EPSILON) -> bool:
    return bool(np.all(np.abs(matrix - matrix.T) <= epsilon))


def is_orthogonal_np_core(
    matrix: np.ndarray,
    epsilon: float = EPSILON) -> bool:
    gram = matrix.T @ matrix
    return bool(np.all(np.abs(gram - np.eye(matrix.shape[0])) <= epsilon))


def is_positive_definite_np_core(
    matrix: np.ndarray,
    epsilon: float = EPSILON) -> bool:
    if not is_symmetric_np_core(matrix, epsilon):
        return False
    for order in range(1, matrix.shape[0] + 1):
        minor = matrix[:order, :order]
        value = minor[0, 0] if order == 1 else determinant_np_core(minor)
        if value <= 0.0:
            return False
    return True
