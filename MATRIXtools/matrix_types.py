"""
MATRIXtools: value types

Vectors and matrices are plain float64 numpy arrays of fixed shape that are
marked read-only on construction. Every operation in the toolkit allocates
a new array for its result, so a value handed out can never change under a
caller's feet.

"""

import numpy as np
from typing import NamedTuple, Optional, Sequence, Union

ArrayLike = Union[np.ndarray, Sequence]

# aliases used in signatures
Vector2 = np.ndarray      # shape (2,)
Vector3 = np.ndarray      # shape (3,)
Matrix2x2 = np.ndarray    # shape (2, 2)
Matrix3x3 = np.ndarray    # shape (3, 3)
Points2 = np.ndarray      # shape (N, 2)


class EigenPair(NamedTuple):
    """
    One eigenvalue, split into real and imaginary parts.
    imag == 0 denotes a real eigenvalue.
    """
    real: float
    imag: float = 0.0

    @property
    def is_real(self) -> bool:
        return self.imag == 0.0


class DecompositionResult(NamedTuple):
    """
    Outcome of the simplified 3x3 decompositions.

    Attributes:
        success: False when the input was rejected (non-symmetric matrix).
        result: the diagonal matrix D (diagonalize) or the unchanged input
            (congruence transform). None on failure.
        transform: P (diagonalize) or C (congruence transform). None on failure.
        message: human-readable status.
        approximate: the 3x3 routines are placeholders, exact only for
            diagonal input.
    """
    success: bool
    result: Optional[Matrix3x3]
    transform: Optional[Matrix3x3]
    message: str
    approximate: bool = True


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    array.flags.writeable = False
    return array


def _as_fixed(values: ArrayLike,
              shape: tuple,
              name: str) -> np.ndarray:
    out = np.array(values, dtype=np.float64)
    if out.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {out.shape}")
    return freeze(out)


def vector2(values: ArrayLike) -> Vector2:
    """Build a read-only 2-vector."""
    return _as_fixed(values, (2,), "Vector2")


def vector3(values: ArrayLike) -> Vector3:
    """Build a read-only 3-vector."""
    return _as_fixed(values, (3,), "Vector3")


def matrix2x2(values: ArrayLike) -> Matrix2x2:
    """Build a read-only row-major 2x2 matrix, e.g. matrix2x2([[a, b], [c, d]])."""
    return _as_fixed(values, (2, 2), "Matrix2x2")


def matrix3x3(values: ArrayLike) -> Matrix3x3:
    """Build a read-only row-major 3x3 matrix."""
    return _as_fixed(values, (3, 3), "Matrix3x3")


def points2(values: ArrayLike) -> Points2:
    """
    Build a read-only ordered sequence of 2-vectors of shape (N, 2).
    An empty sequence gives an array of shape (0, 2).
    """
    out = np.array(values, dtype=np.float64)
    if out.size == 0:
        out = out.reshape(0, 2)
    if out.ndim != 2 or out.shape[1] != 2:
        raise ValueError(f"Points2 must have shape (N, 2), got {out.shape}")
    return freeze(out)


def matrix_of_dims(values: ArrayLike,
                   num_of_dims: int) -> np.ndarray:
    """Build a matrix for the explicit dimension tag (2 or 3)."""
    if num_of_dims == 2:
        return matrix2x2(values)
    elif num_of_dims == 3:
        return matrix3x3(values)
    raise ValueError(f"Unsupported matrix dimension: {num_of_dims}x{num_of_dims}")


def vector_of_dims(values: ArrayLike,
                   num_of_dims: int) -> np.ndarray:
    """Build a vector for the explicit dimension tag (2 or 3)."""
    if num_of_dims == 2:
        return vector2(values)
    elif num_of_dims == 3:
        return vector3(values)
    raise ValueError(f"Unsupported vector dimension: {num_of_dims}")
