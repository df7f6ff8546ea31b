"""
E-OBS Reader Utilities

This package provides utility functions for dataset information queries
and area/period to index conversions.
"""

# Information functions
from .info import get_coordinate_info

# Conversion functions
from .conversion import (
    convert_area_to_indices,
    convert_period_to_indices,
)

__all__ = [
    # Information functions
    "get_coordinate_info",
    # Conversion functions
    "convert_area_to_indices",
    "convert_period_to_indices",
]
