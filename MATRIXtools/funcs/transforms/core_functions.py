import numpy as np
from .constants import *

##########################################################################################
# Core numpy functions for generating transform matrices
##########################################################################################


def rotation_matrix_np_core(
    degrees: float) -> np.ndarray:
    """
    Counter-clockwise rotation by an angle in degrees.

    Args:
        degrees (float): rotation angle, θ = degrees * π / 180

    Returns:
        np.ndarray: [[cos θ, -sin θ], [sin θ, cos θ]]
    """
    theta = degrees * np.pi / 180.0
    cos, sin = np.cos(theta), np.sin(theta)
    return np.array([[cos, -sin],
                     [sin,  cos]], dtype=np.float64)


def scale_matrix_np_core(
    sx: float,
    sy: float) -> np.ndarray:
    """
    Axis-aligned scaling: [[sx, 0], [0, sy]]
    """
    return np.array([[sx, 0.0],
                     [0.0, sy]], dtype=np.float64)


def shear_matrix_np_core(
    shx: float,
    shy: float) -> np.ndarray:
    """
    Shear: [[1, shx], [shy, 1]]
    """
    return np.array([[1.0, shx],
                     [shy, 1.0]], dtype=np.float64)
