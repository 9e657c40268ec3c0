"""
MATRIXtools: analysis functions

Property reports for a 2x2 or 3x3 matrix, with values formatted the way
the lab view prints them (4 decimal digits).

"""

import numpy as np
from typing import Optional
from .funcs.classify.operations import ClassifyOperations
from .funcs.eigen_vals.operations import EigenvalueOperations
from .funcs.tensor.operations import TensorOperations
from .funcs.vector.operations import VectorOperations
from .matrix_types import EigenPair, matrix2x2, matrix3x3

DIGITS = 4


def format_value(value: float,
                 digits: int = DIGITS) -> str:
    """Fixed-point text with `digits` decimals; -0.0000 is printed as 0.0000"""
    text = f"{value:.{digits}f}"
    if float(text) == 0.0:
        text = f"{0.0:.{digits}f}"
    return text


def format_eigenvalue(pair: EigenPair,
                      digits: int = DIGITS) -> str:
    """
    "2.0000" for a real eigenvalue, "0.0000 +1.0000i" / "0.0000 -1.0000i"
    for a complex one.
    """
    if pair.is_real:
        return format_value(pair.real, digits)
    # sign from the raw value, so a tiny negative part keeps its minus
    sign = "-" if pair.imag < 0 else "+"
    return f"{format_value(pair.real, digits)} {sign}{format_value(abs(pair.imag), digits)}i"


def format_matrix(matrix: np.ndarray,
                  digits: int = 2) -> str:
    """Rows as [ a,  b] lines, right-aligned to 6 characters"""
    return "\n".join(
        "[" + ", ".join(format_value(v, digits).rjust(6) for v in row) + "]"
        for row in matrix)


def matrix_properties_2x2(matrix,
                          use_numba: bool = True) -> dict:
    """
    Determinant, trace, eigenvalues and (normalised) eigenvectors of a 2x2
    matrix, with their formatted text.

    Parameters
    ----------
    matrix : array_like
        2x2 matrix
    use_numba : bool
        use the Numba kernels

    Returns
    -------
    dict
        keys: matrix, determinant, trace, eigenvalues, eigenvectors and
        formatted (a dict of strings). eigenvectors is None when the
        eigenvalues are complex.
    """
    matrix = matrix2x2(matrix)
    tensor_ops = TensorOperations(num_of_dims=2, use_numba=use_numba)
    eigen_ops = EigenvalueOperations(use_numba=use_numba)
    vector_ops = VectorOperations(num_of_dims=2, use_numba=use_numba)

    determinant = tensor_ops.determinant(matrix)
    trace = tensor_ops.trace(matrix)
    eigenvalues = eigen_ops.eigenvalues(matrix)
    vectors = eigen_ops.eigenvectors(matrix)
    eigenvectors = None
    if vectors is not None:
        eigenvectors = tuple(vector_ops.vector_normalize(v) for v in vectors)

    formatted = {
        "determinant": format_value(determinant),
        "trace": format_value(trace),
        "eigenvalues": [format_eigenvalue(pair) for pair in eigenvalues],
        "eigenvectors": None if eigenvectors is None else [
            f"({format_value(v[0])}, {format_value(v[1])})" for v in eigenvectors],
    }
    return {
        "matrix": matrix,
        "determinant": determinant,
        "trace": trace,
        "eigenvalues": eigenvalues,
        "eigenvectors": eigenvectors,
        "formatted": formatted,
    }


def matrix_properties_3x3(matrix,
                          use_numba: bool = True) -> dict:
    """
    Determinant, trace, classification and approximate eigenvalues of a
    3x3 matrix, with their formatted text.

    is_positive_definite is None for a non-symmetric matrix, where the
    question is not asked. The eigenvalues are the sorted diagonal
    entries (exact only for diagonal input).
    """
    matrix = matrix3x3(matrix)
    tensor_ops = TensorOperations(num_of_dims=3, use_numba=use_numba)
    eigen_ops = EigenvalueOperations(use_numba=use_numba)
    classify_ops = ClassifyOperations(num_of_dims=3, use_numba=use_numba)

    determinant = tensor_ops.determinant(matrix)
    trace = tensor_ops.trace(matrix)
    symmetric = classify_ops.is_symmetric(matrix)
    orthogonal = classify_ops.is_orthogonal(matrix)
    positive_definite: Optional[bool] = None
    if symmetric:
        positive_definite = classify_ops.is_positive_definite(matrix)
    eigenvalues = eigen_ops.eigenvalues_3x3_approx(matrix)

    formatted = {
        "determinant": format_value(determinant),
        "trace": format_value(trace),
        "eigenvalues": [format_value(v) for v in eigenvalues],
        "is_symmetric": "yes" if symmetric else "no",
        "is_orthogonal": "yes" if orthogonal else "no",
        "is_positive_definite": (
            None if positive_definite is None
            else "positive definite" if positive_definite
            else "not positive definite"),
    }
    return {
        "matrix": matrix,
        "determinant": determinant,
        "trace": trace,
        "is_symmetric": symmetric,
        "is_orthogonal": orthogonal,
        "is_positive_definite": positive_definite,
        "eigenvalues": eigenvalues,
        "formatted": formatted,
    }


def format_report(properties: dict) -> str:
    """Multi-line text of a matrix_properties_2x2 / _3x3 result"""
    formatted = properties["formatted"]
    lines = [format_matrix(properties["matrix"]),
             f"determinant: {formatted['determinant']}",
             f"trace:       {formatted['trace']}"]
    for n, text in enumerate(formatted["eigenvalues"], start=1):
        lines.append(f"lambda_{n}:    {text}")

    if "eigenvectors" in formatted:
        if formatted["eigenvectors"] is None:
            lines.append("eigenvectors: none (complex eigenvalues)")
        else:
            for n, text in enumerate(formatted["eigenvectors"], start=1):
                lines.append(f"v_{n}:         {text}")
    else:
        lines.append("(3x3 eigenvalues are approximate: sorted diagonal entries)")
        lines.append(f"symmetric:   {formatted['is_symmetric']}")
        lines.append(f"orthogonal:  {formatted['is_orthogonal']}")
        if formatted["is_positive_definite"] is not None:
            lines.append(f"definiteness: {formatted['is_positive_definite']}")
    return "\n".join(lines)
