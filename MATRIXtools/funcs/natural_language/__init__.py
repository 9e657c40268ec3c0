"""
MATRIXtools Natural Language Module

Maps free text onto 2x2 matrices: a local English/Chinese keyword mapper
and an OpenAI-compatible remote mapper with strict reply validation.
"""

# Import main classes
from .operations import (
    NaturalLanguageOperations,
    mock_parse_natural_language,
    parse_natural_language_with_ai
)
from .config import AIConfig

# Import core functions for advanced users
from .core_functions import (
    first_integer,
    first_number,
    parse_matrix_reply_core
)

# Define public API
__all__ = [
    'NaturalLanguageOperations',
    'AIConfig',
    'mock_parse_natural_language',
    'parse_natural_language_with_ai',
    # Core functions for advanced use
    'first_integer',
    'first_number',
    'parse_matrix_reply_core'
]
