"""
MATRIXtools: Transform Operations

Factories for the elementary 2x2 transforms (rotation, scale, shear), the
catalogue of named presets and the composition of a preset with the
current matrix.

"""

import numpy as np
from typing import Union
from .constants import *
from .core_functions import *
from ..tensor.operations import TensorOperations
from ...matrix_types import Matrix2x2, freeze, matrix_of_dims


class TransformOperations:
    """
    A class to generate and compose 2x2 transform matrices.

    """

    def __init__(
        self,
        use_numba: bool = True) -> None:
        """
        Initialize the TransformOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions for the
                matrix products. Defaults to True.
        """
        self.tensor_ops = TensorOperations(
            num_of_dims=2,
            use_numba=use_numba)


    def rotation_matrix(
        self,
        degrees: float) -> Matrix2x2:
        """Counter-clockwise rotation by `degrees`"""
        return freeze(rotation_matrix_np_core(degrees))


    def scale_matrix(
        self,
        sx: float,
        sy: float) -> Matrix2x2:
        """Scaling by sx along x and sy along y"""
        return freeze(scale_matrix_np_core(sx, sy))


    def shear_matrix(
        self,
        shx: float,
        shy: float) -> Matrix2x2:
        """Shear with x-shift shx*y and y-shift shy*x"""
        return freeze(shear_matrix_np_core(shx, shy))


    def preset(
        self,
        name: str) -> Matrix2x2:
        """
        Look up a named preset.

        Raises:
            KeyError: unknown preset name
        """
        try:
            return PRESET_TRANSFORMS[name]
        except KeyError:
            raise KeyError(
                f"Unknown preset '{name}'. Valid presets: {', '.join(PRESET_NAMES)}") from None


    def apply_preset(
        self,
        preset: Union[str, np.ndarray],
        current: np.ndarray) -> Matrix2x2:
        """
        Compose a preset with the current matrix as preset . current.

        The preset is applied on the left, i.e. after the current transform
        in function-composition order. The operand order matters for
        non-commuting maps (shear then rotate is not rotate then shear).

        Args:
            preset: preset name or a 2x2 matrix
            current: the current 2x2 matrix

        Returns:
            A new 2x2 matrix; `current` is left untouched.

        Raises:
            ValueError: `current` is not a 2x2 matrix (presets are 2x2 only)
        """
        current = np.asarray(current, dtype=np.float64)
        if current.shape != (2, 2):
            raise ValueError(
                f"Preset transforms only apply to 2x2 matrices, got shape {current.shape}")
        if isinstance(preset, str):
            preset = self.preset(preset)
        preset = matrix_of_dims(preset, 2)
        return self.tensor_ops.matrix_multiply(preset, current)
