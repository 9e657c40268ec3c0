import numpy as np
import pytest
from MATRIXtools import EigenPair
from MATRIXtools.funcs.eigen_vals import EigenvalueOperations
from MATRIXtools.funcs.tensor import TensorOperations
from MATRIXtools.funcs.transforms import TransformOperations

backends = pytest.mark.parametrize("use_numba", [True, False])


def random_matrices(n_samples=200, seed=42):
    rng = np.random.default_rng(seed)
    return rng.uniform(-5, 5, size=(n_samples, 2, 2))


@backends
def test_identity(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    assert ops.eigenvalues([[1, 0], [0, 1]]) == (EigenPair(1.0, 0.0), EigenPair(1.0, 0.0))


@backends
def test_rotation_90_has_complex_pair(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    rotation = TransformOperations().rotation_matrix(90)
    first, second = ops.eigenvalues(rotation)

    assert first.real == pytest.approx(0.0, abs=1e-12)
    assert first.imag == pytest.approx(1.0)
    assert second.real == pytest.approx(0.0, abs=1e-12)
    assert second.imag == pytest.approx(-1.0)
    assert not first.is_real
    assert ops.eigenvectors(rotation) is None


@backends
def test_squeeze(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    squeeze = [[2, 0], [0, 0.5]]
    assert ops.eigenvalues(squeeze) == (EigenPair(2.0, 0.0), EigenPair(0.5, 0.0))

    v1, v2 = ops.eigenvectors(squeeze)
    assert np.array_equal(v1, [1, 0])
    assert np.array_equal(v2, [0, 1])


@backends
def test_real_pair_ordering(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    # trace 0, det -1: roots +1 and -1, plus root first
    first, second = ops.eigenvalues([[0, 1], [1, 0]])
    assert first == EigenPair(1.0, 0.0)
    assert second == EigenPair(-1.0, 0.0)


@backends
def test_diagonal_case_picks_axis_by_lambda(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    # larger eigenvalue sits on the second axis
    v1, v2 = ops.eigenvectors([[1, 0], [0, 3]])
    assert np.array_equal(v1, [0, 1])
    assert np.array_equal(v2, [1, 0])


@backends
def test_lower_triangular_uses_second_row(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    matrix = np.array([[2., 0.], [1., 3.]])
    vectors = ops.eigenvectors(matrix)
    (l1, _), (l2, _) = ops.eigenvalues(matrix)
    # (λ - d, c)
    assert np.allclose(vectors[0], [l1 - 3, 1])
    assert np.allclose(vectors[1], [l2 - 3, 1])


@backends
def test_determinant_is_product_of_eigenvalues(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    tensor_ops = TensorOperations(num_of_dims=2, use_numba=use_numba)
    for matrix in random_matrices():
        first, second = ops.eigenvalues(matrix)
        product = complex(*first) * complex(*second)
        assert product.real == pytest.approx(tensor_ops.determinant(matrix), abs=1e-9)
        assert product.imag == pytest.approx(0.0, abs=1e-9)


@backends
def test_trace_is_sum_of_eigenvalues(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    for matrix in random_matrices():
        first, second = ops.eigenvalues(matrix)
        assert first.real + second.real == pytest.approx(matrix[0, 0] + matrix[1, 1], abs=1e-9)
        assert first.imag + second.imag == pytest.approx(0.0, abs=1e-12)


@backends
def test_eigenvectors_satisfy_eigen_equation(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    checked = 0
    for matrix in random_matrices():
        vectors = ops.eigenvectors(matrix)
        if vectors is None:
            continue
        for pair, v in zip(ops.eigenvalues(matrix), vectors):
            assert np.allclose(matrix @ v, pair.real * v, atol=1e-6)
        checked += 1
    assert checked > 0


@backends
def test_eigenvalues_3x3_approx_is_sorted_diagonal(use_numba):
    ops = EigenvalueOperations(use_numba=use_numba)
    out = ops.eigenvalues_3x3_approx([[1, 2, 3], [2, 5, 4], [3, 4, -2]])
    assert np.array_equal(out, [5, 1, -2])
    # exact for diagonal input
    assert np.array_equal(ops.eigenvalues_3x3_approx(np.diag([3., 7., 1.])), [7, 3, 1])
