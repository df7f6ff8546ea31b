"""
E-OBS Reader Table Processing

This package turns grid slices into long-form tables and filters them.
"""

from .melt import (
    assign_point_ids,
    drop_empty_points,
    melt_grid_slice,
)

from .filters import (
    remove_na_rows,
    select_contained_points,
    remove_outside_points,
)

from .augment import add_calendar_fields

__all__ = [
    # Melting
    "assign_point_ids",
    "drop_empty_points",
    "melt_grid_slice",
    # Filters
    "remove_na_rows",
    "select_contained_points",
    "remove_outside_points",
    # Output
    "add_calendar_fields",
]
