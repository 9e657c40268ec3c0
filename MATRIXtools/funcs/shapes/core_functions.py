import numpy as np
from .constants import *

##########################################################################################
# Core numpy functions for reference shapes and view geometry
##########################################################################################


def grid_points_np_core(
    start: float = GRID_START,
    stop: float = GRID_STOP,
    step: float = GRID_STEP) -> np.ndarray:
    """
    Lattice of points over [start, stop]^2, x-major order.

    Returns:
        np.ndarray: (N, 2)
    """
    ticks = np.arange(start, stop + 0.5 * step, step)
    xx, yy = np.meshgrid(ticks, ticks, indexing='ij')
    return np.stack([xx.ravel(), yy.ravel()], axis=-1)


def grid_lines_np_core(
    extent: int = GRID_EXTENT) -> np.ndarray:
    """
    Segments of the background grid, one vertical and one horizontal line
    per integer from -extent to extent.

    Returns:
        np.ndarray: (2 * (2 * extent + 1), 2, 2), [line, endpoint, (x, y)]
    """
    ticks = np.arange(-extent, extent + 1, dtype=np.float64)
    lines = np.empty((2 * ticks.size, 2, 2), dtype=np.float64)
    lines[0::2, 0] = np.stack([ticks, np.full_like(ticks, -extent)], axis=-1)
    lines[0::2, 1] = np.stack([ticks, np.full_like(ticks, extent)], axis=-1)
    lines[1::2, 0] = np.stack([np.full_like(ticks, -extent), ticks], axis=-1)
    lines[1::2, 1] = np.stack([np.full_like(ticks, extent), ticks], axis=-1)
    return lines


def axis_lines_np_core(
    extent: int = GRID_EXTENT) -> np.ndarray:
    """
    The x axis and the y axis as two segments, shape (2, 2, 2)
    """
    return np.array([[[-extent, 0.0], [extent, 0.0]],
                     [[0.0, -extent], [0.0, extent]]], dtype=np.float64)


def to_canvas_np_core(
    points: np.ndarray,
    size: int = CANVAS_SIZE,
    units: int = CANVAS_UNITS) -> np.ndarray:
    """
    Map unit coordinates to pixel coordinates: origin at the centre of a
    size x size canvas, y pointing up.
    """
    scale = size / units
    centre = size / 2
    out = np.empty_like(points, dtype=np.float64)
    out[..., 0] = centre + points[..., 0] * scale
    out[..., 1] = centre - points[..., 1] * scale
    return out
