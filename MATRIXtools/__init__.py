"""
MATRIXtools

A toolkit for exploring linear transformations of the plane (and of space):
determinants, traces, 2x2 eigen-analysis, 3x3 classification with
simplified decompositions, transform generators and presets, reference
shapes for display, and a natural-language front end.
"""

from .matrix_types import (
    DecompositionResult,
    EigenPair,
    matrix2x2,
    matrix3x3,
    points2,
    vector2,
    vector3
)
from .exceptions import MatrixToolsError, MatrixParseError, RemoteServiceError
from .funcs.vector import VectorOperations
from .funcs.tensor import TensorOperations
from .funcs.eigen_vals import EigenvalueOperations
from .funcs.classify import ClassifyOperations
from .funcs.transforms import TransformOperations, PRESET_TRANSFORMS, PRESET_NAMES
from .funcs.shapes import ShapeOperations
from .funcs.natural_language import (
    AIConfig,
    NaturalLanguageOperations,
    mock_parse_natural_language,
    parse_natural_language_with_ai
)

# Version info
__version__ = "0.1.0"

# Define public API
__all__ = [
    'DecompositionResult',
    'EigenPair',
    'matrix2x2',
    'matrix3x3',
    'points2',
    'vector2',
    'vector3',
    'MatrixToolsError',
    'MatrixParseError',
    'RemoteServiceError',
    'VectorOperations',
    'TensorOperations',
    'EigenvalueOperations',
    'ClassifyOperations',
    'TransformOperations',
    'PRESET_TRANSFORMS',
    'PRESET_NAMES',
    'ShapeOperations',
    'AIConfig',
    'NaturalLanguageOperations',
    'mock_parse_natural_language',
    'parse_natural_language_with_ai'
]
