import numpy as np
import pytest
from MATRIXtools.funcs.shapes import ShapeOperations

backends = pytest.mark.parametrize("use_numba", [True, False])


def test_reference_shapes():
    ops = ShapeOperations()
    square = ops.shape_points("square")
    assert square.shape == (5, 2)
    assert np.array_equal(square[0], square[-1])

    letter_f = ops.shape_points("F")
    assert letter_f.shape == (11, 2)
    assert np.array_equal(letter_f[0], letter_f[-1])

    grid = ops.shape_points("grid")
    assert grid.shape == (25, 2)
    assert np.array_equal(grid[:2], [[0, 0], [0, 0.5]])
    assert np.array_equal(grid[-1], [2, 2])


def test_unknown_shape_is_square():
    ops = ShapeOperations()
    assert np.array_equal(ops.shape_points("hexagon"), ops.shape_points("square"))


@backends
def test_transformed_shape(use_numba):
    ops = ShapeOperations(use_numba=use_numba)
    original, transformed = ops.transformed_shape([[2, 0], [0, 2]], "F")
    assert original.shape == transformed.shape
    assert np.allclose(transformed, 2 * original)


def test_grid_and_axis_lines():
    ops = ShapeOperations()
    lines = ops.grid_lines()
    assert lines.shape == (22, 2, 2)
    # first pair: vertical then horizontal line at -5
    assert np.array_equal(lines[0], [[-5, -5], [-5, 5]])
    assert np.array_equal(lines[1], [[-5, -5], [5, -5]])

    axes = ops.axis_lines()
    assert np.array_equal(axes, [[[-5, 0], [5, 0]], [[0, -5], [0, 5]]])


@backends
def test_eigenvector_arrows(use_numba):
    ops = ShapeOperations(use_numba=use_numba)
    arrows = ops.eigenvector_arrows([[2, 0], [0, 0.5]])
    assert len(arrows) == 2
    assert np.allclose(arrows[0], [2, 0])
    assert np.allclose(arrows[1], [0, 2])

    sheared = ops.eigenvector_arrows([[1, 1], [0.5, 1]])
    for tip in sheared:
        assert np.linalg.norm(tip) == pytest.approx(2.0)

    assert ops.eigenvector_arrows([[0, -1], [1, 0]]) == []


def test_to_canvas():
    ops = ShapeOperations()
    out = ops.to_canvas([[0, 0], [1, 1], [-5, 5]])
    assert np.allclose(out, [[300, 300], [360, 240], [0, 0]])
