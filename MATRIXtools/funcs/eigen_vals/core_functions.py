from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for eigenvalue operations
##########################################################################################


@njit(cache=True)
def eigenvalues_general_2x2_nb_core(
    matrix):
    """
    Compute eigenvalues of a general (non-symmetric) 2x2 matrix.

    Characteristic polynomial: λ² - trace*λ + det = 0
    Discriminant:              Δ = trace² - 4*det

    Δ >= 0: real pair (trace ± √Δ)/2, the + root listed first
    Δ <  0: complex conjugate pair trace/2 ± i√(-Δ)/2, positive imaginary first

    Args:
        matrix: Input matrix (2, 2)

    Returns:
        eigenvalues: (2, 2) array, row n holds (real, imag) of eigenvalue n
    """
    a11 = matrix[0, 0]
    a12 = matrix[0, 1]
    a21 = matrix[1, 0]
    a22 = matrix[1, 1]

    trace = a11 + a22
    det = a11 * a22 - a12 * a21
    discriminant = trace * trace - 4.0 * det

    eigenvalues = np.zeros((2, 2), dtype=np.float64)
    if discriminant >= 0:
        sqrt_disc = np.sqrt(discriminant)
        eigenvalues[0, REAL] = 0.5 * (trace + sqrt_disc)
        eigenvalues[1, REAL] = 0.5 * (trace - sqrt_disc)
    else:
        real_part = 0.5 * trace
        imag_part = 0.5 * np.sqrt(-discriminant)
        eigenvalues[0, REAL] = real_part
        eigenvalues[1, REAL] = real_part
        eigenvalues[0, IMAG] = imag_part   # positive first
        eigenvalues[1, IMAG] = -imag_part
    return eigenvalues


@njit(cache=True)
def eigenvectors_general_2x2_nb_core(
    matrix,
    eigenvalues_real,
    epsilon=EPSILON):
    """
    Compute eigenvectors of a 2x2 matrix for real eigenvalues.

    Solves (A - λI)v = 0 from whichever row of A - λI is non-degenerate:
        |b| > eps : v = (b, λ - a)
        |c| > eps : v = (λ - d, c)
        otherwise the matrix is diagonal: (1, 0) if λ ≈ a else (0, 1)

    The vectors are directions only and are not normalised.

    Args:
        matrix: Input matrix (2, 2)
        eigenvalues_real: the two real eigenvalues (2,)

    Returns:
        eigenvectors: (2, 2), row n is the eigenvector of eigenvalue n
    """
    a = matrix[0, 0]
    b = matrix[0, 1]
    c = matrix[1, 0]
    d = matrix[1, 1]

    eigenvectors = np.zeros((2, 2), dtype=np.float64)
    for n in range(2):
        lam = eigenvalues_real[n]
        if abs(b) > epsilon:
            eigenvectors[n, X] = b
            eigenvectors[n, Y] = lam - a
        elif abs(c) > epsilon:
            eigenvectors[n, X] = lam - d
            eigenvectors[n, Y] = c
        elif abs(lam - a) < epsilon:
            eigenvectors[n, X] = 1.0
        else:
            eigenvectors[n, Y] = 1.0
    return eigenvectors


@njit(cache=True)
def eigenvalues_approx_3x3_nb_core(
    matrix):
    """
    APPROXIMATE eigenvalues of a 3x3 matrix: the diagonal entries sorted in
    descending order. Exact only when the matrix is already diagonal.

    Args:
        matrix: Input matrix (3, 3)

    Returns:
        eigenvalues: (3,) descending
    """
    diagonal = np.empty(3, dtype=np.float64)
    for m in range(3):
        diagonal[m] = matrix[m, m]
    return np.sort(diagonal)[::-1].copy()


##########################################################################################
# NumPy fallbacks (also accept stacks of matrices of shape (..., 2, 2))
##########################################################################################


def eigenvalues_general_2x2_np_core(
    matrix: np.ndarray) -> np.ndarray:
    """
    NumPy version of eigenvalues_general_2x2_nb_core.

    Args:
        matrix: Input matrix field of shape (..., 2, 2)

    Returns:
        eigenvalues: Array of shape (..., 2, 2), [..., n, (real, imag)]
    """
    a11 = matrix[..., 0, 0]
    a12 = matrix[..., 0, 1]
    a21 = matrix[..., 1, 0]
    a22 = matrix[..., 1, 1]

    trace = a11 + a22
    det = a11 * a22 - a12 * a21
    discriminant = trace**2 - 4.0 * det

    is_real = discriminant >= 0
    sqrt_abs = np.sqrt(np.abs(discriminant))

    eigenvalues = np.zeros(matrix.shape, dtype=np.float64)
    eigenvalues[..., 0, REAL] = np.where(is_real, 0.5 * (trace + sqrt_abs), 0.5 * trace)
    eigenvalues[..., 1, REAL] = np.where(is_real, 0.5 * (trace - sqrt_abs), 0.5 * trace)
    eigenvalues[..., 0, IMAG] = np.where(is_real, 0.0, 0.5 * sqrt_abs)
    eigenvalues[..., 1, IMAG] = np.where(is_real, 0.0, -0.5 * sqrt_abs)
    return eigenvalues


def eigenvectors_general_2x2_np_core(
    matrix: np.ndarray,
    eigenvalues_real: np.ndarray,
    epsilon: float = EPSILON) -> np.ndarray:
    """
    NumPy version of eigenvectors_general_2x2_nb_core for a single matrix.
    """
    a, b = matrix[0]
    c, d = matrix[1]
    lam = np.asarray(eigenvalues_real, dtype=np.float64)

    if abs(b) > epsilon:
        return np.stack([np.full(2, b), lam - a], axis=-1)
    elif abs(c) > epsilon:
        return np.stack([lam - d, np.full(2, c)], axis=-1)
    on_first_axis = np.abs(lam - a) < epsilon
    return np.stack([on_first_axis, ~on_first_axis], axis=-1).astype(np.float64)


def eigenvalues_approx_3x3_np_core(
    matrix: np.ndarray) -> np.ndarray:
    """
    NumPy version of eigenvalues_approx_3x3_nb_core (diagonal, descending).

    Args:
        matrix: Input matrix field of shape (..., 3, 3)

    Returns:
        eigenvalues: Array of shape (..., 3)
    """
    diagonal = np.diagonal(matrix, axis1=-2, axis2=-1)
    return np.sort(diagonal, axis=-1)[..., ::-1].copy()
