import numpy as np
import pytest
from MATRIXtools import DecompositionResult
from MATRIXtools.funcs.classify import ClassifyOperations
from MATRIXtools.funcs.transforms import TransformOperations

backends = pytest.mark.parametrize("use_numba", [True, False])

SYMMETRIC = [[1, 2, 3], [2, 1, 4], [3, 4, 1]]
NON_SYMMETRIC = [[2, 1, 0], [0, 2, 0], [0, 0, 2]]


def rotation_3x3(degrees):
    out = np.eye(3)
    out[:2, :2] = TransformOperations().rotation_matrix(degrees)
    return out


@backends
def test_is_symmetric(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    assert ops.is_symmetric(SYMMETRIC)
    assert not ops.is_symmetric(NON_SYMMETRIC)
    # within tolerance
    assert ops.is_symmetric([[1, 2 + 1e-12, 0], [2, 1, 0], [0, 0, 1]])
    assert not ops.is_symmetric([[1, 2 + 1e-6, 0], [2, 1, 0], [0, 0, 1]])


@backends
def test_is_orthogonal(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    assert ops.is_orthogonal(np.eye(3))
    for degrees in (0, 30, 45, 90, 137.5, 270, -60):
        assert ops.is_orthogonal(rotation_3x3(degrees))
    assert not ops.is_orthogonal(np.diag([2., 2., 2.]))


@backends
def test_is_orthogonal_2x2(use_numba):
    ops = ClassifyOperations(num_of_dims=2, use_numba=use_numba)
    transform_ops = TransformOperations()
    for degrees in (15, 45, 90, 200):
        assert ops.is_orthogonal(transform_ops.rotation_matrix(degrees))
    assert ops.is_orthogonal([[1, 0], [0, -1]])
    assert not ops.is_orthogonal(transform_ops.shear_matrix(1, 0))


@backends
def test_is_positive_definite(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    assert ops.is_positive_definite(np.eye(3))
    assert ops.is_positive_definite([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
    # non-positive leading entry
    assert not ops.is_positive_definite([[0, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert not ops.is_positive_definite([[-1, 0, 0], [0, 1, 0], [0, 0, 1]])
    # non-symmetric, even though all leading minors are positive
    assert not ops.is_positive_definite(NON_SYMMETRIC)
    # second minor 1 - 4 < 0
    assert not ops.is_positive_definite(SYMMETRIC)
    # first two minors positive, determinant negative
    assert not ops.is_positive_definite([[1, 0, 0], [0, 1, 0], [0, 0, -1]])


@backends
def test_diagonalize_non_symmetric(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    result = ops.diagonalize(NON_SYMMETRIC)
    assert isinstance(result, DecompositionResult)
    assert result.success is False
    assert result.message
    assert result.result is None
    assert result.transform is None


@backends
def test_diagonalize_symmetric_is_approximate(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    result = ops.diagonalize(SYMMETRIC)
    assert result.success
    assert result.approximate
    assert "approximate" in result.message
    assert np.array_equal(result.result, np.diag([1., 1., 1.]))
    assert np.array_equal(result.transform, np.eye(3))

    result = ops.diagonalize(np.diag([1., 4., 2.]))
    assert np.array_equal(result.result, np.diag([4., 2., 1.]))


@backends
def test_congruence_transform(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    result = ops.congruence_transform(SYMMETRIC)
    assert result.success
    assert np.array_equal(result.result, SYMMETRIC)
    assert np.array_equal(result.transform, np.eye(3))
    assert "simplified" in result.message

    failed = ops.congruence_transform(NON_SYMMETRIC)
    assert not failed.success
    assert failed.message
    assert failed.result is None and failed.transform is None


def test_decompositions_do_not_mutate_input():
    ops = ClassifyOperations()
    matrix = np.array(SYMMETRIC, dtype=float)
    before = matrix.copy()
    ops.diagonalize(matrix)
    result = ops.congruence_transform(matrix)
    assert np.array_equal(matrix, before)
    assert result.result is not matrix


def test_decompositions_need_3x3():
    with pytest.raises(ValueError):
        ClassifyOperations(num_of_dims=2).diagonalize(np.eye(2))


@backends
def test_non_finite_input_is_never_classified(use_numba):
    ops = ClassifyOperations(use_numba=use_numba)
    for bad in (np.nan, np.inf):
        off_diagonal = np.eye(3)
        off_diagonal[0, 1] = off_diagonal[1, 0] = bad
        on_diagonal = np.eye(3)
        on_diagonal[2, 2] = bad
        for matrix in (off_diagonal, on_diagonal):
            assert not ops.is_symmetric(matrix)
            assert not ops.is_orthogonal(matrix)
            assert not ops.is_positive_definite(matrix)
