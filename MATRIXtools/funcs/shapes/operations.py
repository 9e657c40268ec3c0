"""
MATRIXtools: Shape Operations

Coordinate sequences a rendering front end needs to show a transform: the
reference shape before and after the map, the background grid and axes,
eigenvector arrows and the unit-to-pixel mapping. Nothing here paints.

"""

import numpy as np
from typing import List, Tuple
from .constants import *
from .core_functions import *
from ..eigen_vals.operations import EigenvalueOperations
from ..vector.operations import VectorOperations
from ...matrix_types import Points2, freeze, points2


class ShapeOperations:
    """
    A class to produce the coordinates of reference shapes and their images
    under a 2x2 map.
    """

    def __init__(
        self,
        use_numba: bool = True) -> None:
        """
        Initialize the ShapeOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions. Defaults to True.
        """
        self.vector_ops = VectorOperations(
            num_of_dims=2,
            use_numba=use_numba)
        self.eigen_ops = EigenvalueOperations(
            use_numba=use_numba)


    def shape_points(
        self,
        name: str = DEFAULT_SHAPE) -> Points2:
        """
        Points of a reference shape: 'square' (closed unit square), 'F'
        (closed outline of the letter F) or 'grid' (5x5 lattice over
        [0, 2]^2). Unknown names give the square.
        """
        if name == "F":
            return points2(LETTER_F)
        elif name == "grid":
            return points2(grid_points_np_core())
        return points2(SQUARE)


    def transformed_shape(
        self,
        matrix: np.ndarray,
        name: str = DEFAULT_SHAPE) -> Tuple[Points2, Points2]:
        """
        Returns:
            (original, transformed) point sequences of the same length
        """
        original = self.shape_points(name)
        return original, self.vector_ops.transform_points(matrix, original)


    def grid_lines(
        self,
        extent: int = GRID_EXTENT) -> np.ndarray:
        """Background grid segments, shape (lines, 2, 2)"""
        return freeze(grid_lines_np_core(extent))


    def axis_lines(
        self,
        extent: int = GRID_EXTENT) -> np.ndarray:
        """x and y axes as two segments, shape (2, 2, 2)"""
        return freeze(axis_lines_np_core(extent))


    def eigenvector_arrows(
        self,
        matrix: np.ndarray,
        length: float = ARROW_LENGTH) -> List[np.ndarray]:
        """
        Tips of the eigenvector arrows drawn from the origin, each the
        normalised eigenvector scaled to `length`. Empty when the
        eigenvalues are complex.
        """
        vectors = self.eigen_ops.eigenvectors(matrix)
        if vectors is None:
            return []
        return [freeze(self.vector_ops.vector_normalize(vector) * length)
                for vector in vectors]


    def to_canvas(
        self,
        points: np.ndarray,
        size: int = CANVAS_SIZE,
        units: int = CANVAS_UNITS) -> np.ndarray:
        """Pixel coordinates of unit-space points (origin centred, y up)"""
        return freeze(to_canvas_np_core(np.asarray(points, dtype=np.float64), size, units))
