"""
E-OBS Reader Conversion Utilities

This module exposes the index ranges the loader would read for an area or a
period, without reading any variable values.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.config import LAT_DIM, LON_DIM
from ..core.core_types import IndexRange
from ..coordinates.spatial_handler import normalize_area, resolve_spatial_ranges
from ..coordinates.time_handler import normalize_period, resolve_time_range
from ..io.grid_reader import open_grid, read_axes


def convert_area_to_indices(
    source: Union[str, Path],
    area: Any,
    crs: Any = None,
    engine: Optional[str] = None
) -> Dict[str, IndexRange]:
    """
    Convert an area to longitude and latitude index ranges.

    Args:
        source: Local file path or OPeNDAP URL
        area: Any area form accepted by import_eobs
        crs: CRS of a bare shapely geometry area
        engine: xarray backend engine

    Returns:
        Dict: 'longitude' and 'latitude' index ranges

    Examples:
        >>> ranges = convert_area_to_indices("tg.nc", [[4.0, 6.0], [51.0, 53.0]])
        >>> print(ranges['longitude'].start, ranges['longitude'].count)
    """
    normalized = normalize_area(area, crs=crs)
    with open_grid(source, engine=engine) as dataset:
        axes = read_axes(dataset, str(source))

    lon_range, lat_range = resolve_spatial_ranges(axes, normalized)
    return {LON_DIM: lon_range, LAT_DIM: lat_range}


def convert_period_to_indices(
    source: Union[str, Path],
    period: Any,
    engine: Optional[str] = None
) -> IndexRange:
    """
    Convert a period to a time index range.

    Args:
        source: Local file path or OPeNDAP URL
        period: Any period form accepted by import_eobs
        engine: xarray backend engine

    Returns:
        IndexRange: Selected time indices
    """
    selection = normalize_period(period)
    with open_grid(source, engine=engine) as dataset:
        axes = read_axes(dataset, str(source))

    return resolve_time_range(axes, selection)
