"""
MATRIXtools: exceptions

The numerical core never raises for expected outcomes (complex eigenvalues,
non-symmetric input to a decomposition). These types cover the
natural-language boundary only.

"""


class MatrixToolsError(Exception):
    """Base class for MATRIXtools errors."""


class MatrixParseError(MatrixToolsError, ValueError):
    """A reply could not be read as a 2x2 matrix of numbers."""


class RemoteServiceError(MatrixToolsError, RuntimeError):
    """The text-completion service failed, returned nothing, or is not configured."""
