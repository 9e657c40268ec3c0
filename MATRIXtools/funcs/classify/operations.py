"""
MATRIXtools: Classification Operations

Predicates that classify a matrix (symmetric, orthogonal, positive definite)
and the simplified decompositions built on them.

The decompositions are placeholders and are labelled as such in every
result they return:

- diagonalize returns D = diag(sorted diagonal entries) and P = I
- congruence_transform returns the matrix unchanged and C = I

Both are exact only for diagonal input. A non-symmetric matrix is an
expected input, reported through DecompositionResult(success=False), never
raised.

"""

import numpy as np
from .constants import *
from .core_functions import *
from ..eigen_vals.operations import EigenvalueOperations
from ..tensor.operations import TensorOperations
from ...matrix_types import DecompositionResult, freeze, matrix_of_dims


class ClassifyOperations:
    """
    A class to classify and (approximately) decompose 2x2 or 3x3 matrices.
    """

    def __init__(
        self,
        num_of_dims: int = 3,
        use_numba: bool = True):
        """
        Initialize the ClassifyOperations class.

        Args:
            num_of_dims (int, optional): 2 or 3. Defaults to 3.
            use_numba (bool, optional): Use Numba core functions. Defaults to True.
        """
        self.num_of_dims = num_of_dims
        self.use_numba = use_numba
        self.tensor_ops = TensorOperations(
            num_of_dims=num_of_dims,
            use_numba=use_numba)
        self.eigen_ops = EigenvalueOperations(
            use_numba=use_numba)


    def is_symmetric(
        self,
        matrix: np.ndarray,
        epsilon: float = EPSILON) -> bool:
        """True iff M_ij and M_ji agree to within epsilon for all i < j"""
        matrix = matrix_of_dims(matrix, self.num_of_dims)
        if self.use_numba:
            return bool(is_symmetric_nb_core(matrix, epsilon))
        return is_symmetric_np_core(matrix, epsilon)


    def is_orthogonal(
        self,
        matrix: np.ndarray,
        epsilon: float = EPSILON) -> bool:
        """True iff M^T M is the identity to within epsilon per cell"""
        matrix = matrix_of_dims(matrix, self.num_of_dims)
        if self.use_numba:
            return bool(is_orthogonal_nb_core(matrix, epsilon))
        return is_orthogonal_np_core(matrix, epsilon)


    def is_positive_definite(
        self,
        matrix: np.ndarray,
        epsilon: float = EPSILON) -> bool:
        """
        Sylvester's criterion. False for any non-symmetric matrix, otherwise
        True iff every leading principal minor is strictly positive.
        """
        matrix = matrix_of_dims(matrix, self.num_of_dims)
        if self.use_numba:
            return bool(is_positive_definite_nb_core(matrix, epsilon))
        return is_positive_definite_np_core(matrix, epsilon)


    def diagonalize(
        self,
        matrix: np.ndarray) -> DecompositionResult:
        """
        Simplified similarity diagonalisation of a symmetric 3x3 matrix.

        Returns:
            DecompositionResult with result = D, a diagonal matrix holding the
            approximate eigenvalues in descending order, and transform = P,
            the identity standing in for the eigenvector basis.
        """
        self._require_3x3()
        matrix = matrix_of_dims(matrix, 3)
        if not self.is_symmetric(matrix):
            return DecompositionResult(
                success=False,
                result=None,
                transform=None,
                message=MSG_DIAGONALIZE_NOT_SYMMETRIC)

        eigenvalues = self.eigen_ops.eigenvalues_3x3_approx(matrix)
        return DecompositionResult(
            success=True,
            result=freeze(np.diag(eigenvalues)),
            transform=self.tensor_ops.identity(),
            message=MSG_DIAGONALIZE_OK)


    def congruence_transform(
        self,
        matrix: np.ndarray) -> DecompositionResult:
        """
        Simplified congruence transform C^T A C of a symmetric 3x3 matrix.

        No diagonalising sweep is performed: the result is the input matrix
        unchanged and C is the identity.
        """
        self._require_3x3()
        matrix = matrix_of_dims(matrix, 3)
        if not self.is_symmetric(matrix):
            return DecompositionResult(
                success=False,
                result=None,
                transform=None,
                message=MSG_CONGRUENCE_NOT_SYMMETRIC)

        return DecompositionResult(
            success=True,
            result=matrix,
            transform=self.tensor_ops.identity(),
            message=MSG_CONGRUENCE_OK)


    def _require_3x3(self) -> None:
        if self.num_of_dims != 3:
            raise ValueError("Decompositions are only defined for 3x3 matrices.")
