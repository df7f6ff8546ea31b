"""
E-OBS Reader Coordinate Handling

This package converts spatial areas and time periods into index ranges
over the axes of a gridded dataset.
"""

# Axis indexing
from .indexing import (
    compute_index_range,
    spatial_bound,
    full_index_range,
    check_index_range,
)

# Spatial selection
from .spatial_handler import (
    normalize_area,
    is_polygon_area,
    resolve_spatial_ranges,
)

# Time coordinate functions
from .time_handler import (
    parse_time_origin,
    normalize_time_value,
    days_to_dates,
    dates_to_days,
    parse_interval,
    normalize_period,
    is_daily_axis,
    interval_bound,
    resolve_time_range,
)

__all__ = [
    # Axis indexing
    "compute_index_range",
    "spatial_bound",
    "full_index_range",
    "check_index_range",
    # Spatial selection
    "normalize_area",
    "is_polygon_area",
    "resolve_spatial_ranges",
    # Time coordinate functions
    "parse_time_origin",
    "normalize_time_value",
    "days_to_dates",
    "dates_to_days",
    "parse_interval",
    "normalize_period",
    "is_daily_axis",
    "interval_bound",
    "resolve_time_range",
]
