import json
import math
import numbers
from typing import Optional
from .constants import *
from ...exceptions import MatrixParseError

##########################################################################################
# Core functions for reading matrices out of text
##########################################################################################


def contains_any(
    text: str,
    keywords: tuple) -> bool:
    return any(keyword in text for keyword in keywords)


def first_integer(
    text: str) -> Optional[int]:
    """First run of digits in the text, as an int"""
    match = INTEGER_PATTERN.search(text)
    return int(match.group(1)) if match else None


def first_number(
    text: str) -> Optional[float]:
    """First integer or decimal in the text, as a float"""
    match = NUMBER_PATTERN.search(text)
    return float(match.group(1)) if match else None


def strip_code_fence(
    content: str) -> str:
    match = CODE_FENCE_PATTERN.match(content.strip())
    return match.group(1) if match else content.strip()


def parse_matrix_reply_core(
    content: str) -> list:
    """
    Decode a reply holding a JSON 2x2 nested list and validate its shape.

    Args:
        content (str): reply text, e.g. "[[0, -1], [1, 0]]"

    Returns:
        list: [[a, b], [c, d]] with every entry a finite float

    Raises:
        MatrixParseError: invalid JSON, wrong shape, non-numeric or non-finite entries
    """
    try:
        matrix = json.loads(strip_code_fence(content), parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise MatrixParseError(f"Failed to parse matrix: invalid JSON ({error.msg})") from error
    except MatrixParseError:
        raise
    except ValueError as error:
        # integer literals past the interpreter's digit limit
        raise MatrixParseError(f"Failed to parse matrix: {error}") from error

    if not isinstance(matrix, list) or len(matrix) != 2:
        raise MatrixParseError("Failed to parse matrix: expected a 2x2 matrix")
    rows = []
    for row in matrix:
        if not isinstance(row, list) or len(row) != 2:
            raise MatrixParseError("Failed to parse matrix: expected a 2x2 matrix")
        rows.append([_finite_entry(value) for value in row])
    return rows


def _reject_constant(
    name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise MatrixParseError(f"Failed to parse matrix: invalid JSON constant {name}")


def _finite_entry(
    value) -> float:
    # bool is an int subclass but not a matrix entry
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MatrixParseError(
            f"Failed to parse matrix: entries must be numbers, got {value!r}")
    try:
        entry = float(value)
    except OverflowError as error:
        raise MatrixParseError(
            "Failed to parse matrix: entry too large for a float") from error
    if not math.isfinite(entry):
        raise MatrixParseError(
            f"Failed to parse matrix: entries must be finite, got {entry!r}")
    return entry
