"""
E-OBS Reader Spatial Selection

This module normalizes the supported area arguments and converts them into
index ranges over the longitude and latitude axes.
"""

from typing import Any, Optional, Tuple, Union
import numpy as np
import geopandas as gpd
from shapely.geometry.base import BaseGeometry

from ..core.config import LAT_DIM, LON_DIM
from ..core.core_types import AreaPolygon, AxisSet, BoundingBox, IndexRange
from ..core.exceptions import AreaTypeError
from .indexing import compute_index_range, full_index_range, spatial_bound

Area = Union[BoundingBox, AreaPolygon]


def normalize_area(area: Any, crs: Any = None) -> Optional[Area]:
    """
    Normalize an area argument.

    Supported forms:
    - None: the full spatial domain
    - BoundingBox or a 2x2 matrix ``[[lon_min, lon_max], [lat_min, lat_max]]``:
      a plain rectangle, no polygon containment test
    - AreaPolygon, GeoDataFrame, GeoSeries or a shapely (Multi)Polygon:
      polygons, points outside them are removed

    Args:
        area: Area argument
        crs: CRS for a bare shapely geometry (GeoPandas objects carry their own)

    Returns:
        Optional[Area]: Normalized area

    Raises:
        AreaTypeError: If the area has an unsupported type
    """
    if area is None or isinstance(area, (BoundingBox, AreaPolygon)):
        return area

    if isinstance(area, gpd.GeoDataFrame):
        return AreaPolygon(area.geometry)

    if isinstance(area, gpd.GeoSeries):
        return AreaPolygon(area)

    if isinstance(area, BaseGeometry):
        return AreaPolygon(gpd.GeoSeries([area], crs=crs))

    if isinstance(area, (np.ndarray, list, tuple)):
        try:
            np.asarray(area, dtype=float)
        except (TypeError, ValueError) as e:
            raise AreaTypeError(type(area).__name__) from e
        return BoundingBox.from_matrix(area)

    raise AreaTypeError(type(area).__name__)


def is_polygon_area(area: Optional[Area]) -> bool:
    """Check whether points must be tested against polygons."""
    return isinstance(area, AreaPolygon)


def resolve_spatial_ranges(axes: AxisSet, area: Optional[Area]) -> Tuple[IndexRange, IndexRange]:
    """
    Compute longitude and latitude index ranges for an area.

    Polygons are reduced to their bounding box here.

    Returns:
        Tuple[IndexRange, IndexRange]: (longitude range, latitude range)

    Raises:
        EmptySelectionError: If the area misses the grid along either axis
    """
    if area is None:
        return full_index_range(axes.lon, LON_DIM), full_index_range(axes.lat, LAT_DIM)

    box = area.bounds if isinstance(area, AreaPolygon) else area
    lon_range = compute_index_range(axes.lon, spatial_bound(box.lon_range), LON_DIM)
    lat_range = compute_index_range(axes.lat, spatial_bound(box.lat_range), LAT_DIM)
    return lon_range, lat_range
