"""
E-OBS Reader Custom Exception Classes

This module defines all custom exception classes for better error handling
and more informative error messages.
"""

from typing import Optional, Sequence, Tuple

# ============================================================================
# Base Exception
# ============================================================================

class EOBSReaderError(Exception):
    """Base exception class for all E-OBS Reader related errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = f"{message}\nDetails: {details}" if details else message
        super().__init__(full_message)

# ============================================================================
# Validation Errors (raised before any I/O)
# ============================================================================

class ValidationError(EOBSReaderError):
    """User input rejected before the dataset is opened."""

class ParameterError(ValidationError):
    """Parameter validation errors."""

    def __init__(self, parameter: str, value: str, reason: str):
        super().__init__(f"Invalid parameter '{parameter}': {value}", reason)
        self.parameter = parameter
        self.value = value

class VariableNotFoundError(ValidationError):
    """Variable is not known or not present in the dataset."""

    def __init__(self, variable: str, available_variables: Optional[Sequence[str]] = None):
        super().__init__(
            f"Variable {variable} not known.",
            f"Available variables: {', '.join(sorted(available_variables))}" if available_variables else None
        )
        self.variable = variable
        self.available_variables = list(available_variables) if available_variables else None

class UnsupportedVariableError(ValidationError):
    """Variable is known but cannot be read yet."""

    def __init__(self, variable: str, reason: str = "Standard error of variables not yet implemented."):
        super().__init__(f"Variable {variable} is not supported", reason)
        self.variable = variable

class PeriodFormatError(ValidationError):
    """Period cannot be interpreted."""

    def __init__(self, period: str, reason: Optional[str] = None):
        super().__init__(
            f"Invalid period: {period}",
            reason or "Period should be either numeric, date based or ISO-8601 style."
        )
        self.period = period

class AreaTypeError(ValidationError):
    """Area argument of the wrong kind."""

    def __init__(self, area_type: str):
        super().__init__(
            f"Unsupported area type: {area_type}",
            "Area should be a bounding box, a 2x2 matrix or polygonal geometries."
        )
        self.area_type = area_type

class GridNotFoundError(ValidationError):
    """Unrecognized grid identifier."""

    def __init__(self, grid: str, available_grids: Sequence[str]):
        super().__init__(
            f"Grid should be specified correctly, got: {grid}",
            f"Available grids: {', '.join(available_grids)}"
        )
        self.grid = grid
        self.available_grids = list(available_grids)

# ============================================================================
# Selection Errors
# ============================================================================

class EmptySelectionError(EOBSReaderError):
    """Requested region or period does not intersect the dataset."""

    def __init__(self, dimension: str, bound: Tuple, axis_range: Optional[Tuple] = None):
        super().__init__(
            f"No '{dimension}' values selected by {bound}",
            f"Axis covers [{axis_range[0]}, {axis_range[1]}]" if axis_range else None
        )
        self.dimension = dimension
        self.bound = bound

# ============================================================================
# Resource Errors
# ============================================================================

class ResourceError(EOBSReaderError):
    """Failure opening, reading or closing the underlying dataset."""

    def __init__(self, source: str, operation: str, reason: str):
        super().__init__(f"Failed to {operation} dataset: {source}", reason)
        self.source = source
        self.operation = operation

class CoordinateError(ResourceError):
    """Coordinate system related errors."""

    def __init__(self, source: str, coord_name: str, issue: str):
        super().__init__(source, "read coordinates of", f"'{coord_name}': {issue}")
        self.coord_name = coord_name

# ============================================================================
# Utility Functions
# ============================================================================

def check_variable_supported(variable: str, known: Sequence[str], unsupported: Sequence[str]) -> None:
    """
    Check that a variable name can be read.

    Raises:
        UnsupportedVariableError: If the variable is recognised but not implemented
        VariableNotFoundError: If the variable is unknown
    """
    if variable in unsupported:
        raise UnsupportedVariableError(variable)
    if variable not in known:
        raise VariableNotFoundError(variable, list(known))
