"""
E-OBS Reader Type Definitions and Data Classes

This module defines all data structures and type aliases used throughout the codebase
for better type safety and code clarity.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union, Any
from datetime import date, datetime
import numpy as np
import pandas as pd
import geopandas as gpd

from .config import DEFAULT_CHUNKS
from .exceptions import ParameterError

# ============================================================================
# Type Aliases
# ============================================================================

TimeValue = Union[str, date, datetime, np.datetime64, pd.Timestamp]
TimeRange = Tuple[TimeValue, TimeValue]
IndexPair = Tuple[int, int]
CoordinateRange = Tuple[float, float]
BoundRange = Tuple[float, float]
ChunkSetting = Optional[Union[str, dict]]

# ============================================================================
# Validation Utilities (Module Level)
# ============================================================================

def _validate_coordinate_range(name: str, range_val: Optional[CoordinateRange]) -> None:
    """Validate a coordinate range (lon/lat)."""
    if range_val is not None:
        if len(range_val) != 2:
            raise ParameterError(name, str(range_val), "Must contain exactly 2 values")
        if range_val[0] > range_val[1]:
            raise ParameterError(name, str(range_val), f"{name}[0] must be <= {name}[1]")

def _validate_index_range(name: str, range_val: Optional[IndexPair]) -> None:
    """Validate an inclusive, non-negative index pair."""
    if range_val is not None:
        if len(range_val) != 2:
            raise ParameterError(name, str(range_val), "Must contain exactly 2 values")
        if range_val[0] < 0:
            raise ParameterError(name, str(range_val), f"{name}[0] must be non-negative")
        if range_val[0] > range_val[1]:
            raise ParameterError(name, str(range_val), f"{name}[0] must be <= {name}[1]")

# ============================================================================
# Axis Selection
# ============================================================================

@dataclass(frozen=True)
class IndexRange:
    """
    Contiguous run of positions along one axis.

    Attributes:
        start: First selected index (0-based)
        count: Number of selected indices
    """
    start: int
    count: int

    @property
    def stop(self) -> int:
        """Index one past the last selected position."""
        return self.start + self.count

    def to_slice(self) -> slice:
        return slice(self.start, self.stop)

# ============================================================================
# Spatial Area
# ============================================================================

@dataclass
class BoundingBox:
    """
    Rectangular spatial selection.

    Attributes:
        lon_range: Longitude range (min_lon, max_lon) in degrees
        lat_range: Latitude range (min_lat, max_lat) in degrees
    """
    lon_range: CoordinateRange
    lat_range: CoordinateRange

    def __post_init__(self):
        """Validate box parameters."""
        _validate_coordinate_range("lon_range", self.lon_range)
        _validate_coordinate_range("lat_range", self.lat_range)

    @classmethod
    def from_matrix(cls, matrix: Any) -> BoundingBox:
        """
        Build a box from a 2x2 matrix.

        Rows are the x (longitude) and y (latitude) axes, columns are min and max:
        ``[[lon_min, lon_max], [lat_min, lat_max]]``.
        """
        values = np.asarray(matrix, dtype=float)
        if values.shape != (2, 2):
            raise ParameterError("area", str(matrix), f"Expected a 2x2 matrix, got shape {values.shape}")
        return cls(
            lon_range=(float(values[0, 0]), float(values[0, 1])),
            lat_range=(float(values[1, 0]), float(values[1, 1]))
        )


@dataclass
class AreaPolygon:
    """
    Polygonal spatial selection.

    The bounding box of the polygons drives the read; points outside the
    polygons are removed from the table afterwards.

    Attributes:
        geometry: Polygon or MultiPolygon geometries with their CRS
    """
    geometry: gpd.GeoSeries

    def __post_init__(self):
        """Validate polygon geometries."""
        if len(self.geometry) == 0:
            raise ParameterError("area", "empty", "At least one polygon is required")
        geom_types = set(self.geometry.geom_type.dropna())
        if not geom_types or not geom_types <= {"Polygon", "MultiPolygon"}:
            raise ParameterError(
                "area", ", ".join(sorted(geom_types)) or "missing geometry",
                "Only Polygon and MultiPolygon geometries are supported"
            )

    @property
    def crs(self):
        return self.geometry.crs

    @property
    def bounds(self) -> BoundingBox:
        """Bounding box enclosing all polygons."""
        min_x, min_y, max_x, max_y = self.geometry.total_bounds
        return BoundingBox(
            lon_range=(float(min_x), float(max_x)),
            lat_range=(float(min_y), float(max_y))
        )

    def union(self):
        """Single geometry covering every polygon."""
        return self.geometry.union_all()

# ============================================================================
# Time Selection
# ============================================================================

@dataclass
class TimeSelection:
    """
    Time selection parameters for data loading.

    Exactly one kind of selection may be given:

    Attributes:
        time_index_range: Inclusive 0-based index pair (start, end), used without axis lookup
        time_range: Date pair (start, end); the end date is exclusive
        interval: ISO-8601 style expression, e.g. "2010", "2010-01/2010-03",
            "2010-01-01::2010-01-03"; every date it names is selected
    """
    time_index_range: Optional[IndexPair] = None
    time_range: Optional[TimeRange] = None
    interval: Optional[str] = None

    def __post_init__(self):
        """Validate time selection parameters."""
        _validate_index_range("time_index_range", self.time_index_range)

        if self.time_range is not None and len(self.time_range) != 2:
            raise ParameterError("time_range", str(self.time_range), "Must contain exactly 2 values")

        given = [name for name, value in (
            ("time_index_range", self.time_index_range),
            ("time_range", self.time_range),
            ("interval", self.interval),
        ) if value is not None]
        if len(given) > 1:
            raise ParameterError("period", ", ".join(given), "Only one kind of time selection can be given")

    @property
    def has_selection(self) -> bool:
        """Check if any time selection is defined."""
        return (self.time_index_range is not None or
                self.time_range is not None or
                self.interval is not None)

    @property
    def uses_index_selection(self) -> bool:
        return self.time_index_range is not None

    @property
    def uses_time_selection(self) -> bool:
        return self.time_range is not None

    @property
    def uses_interval_selection(self) -> bool:
        return self.interval is not None

# ============================================================================
# Grid Data
# ============================================================================

@dataclass
class AxisSet:
    """Full coordinate axes of a dataset."""
    lon: np.ndarray
    lat: np.ndarray
    time: np.ndarray
    time_origin: pd.Timestamp


@dataclass
class GridSlice:
    """
    Dense block of variable values and the axes it spans.

    Attributes:
        values: Variable values with shape (lon_count, lat_count, time_count)
        lon: Longitudes of the slice
        lat: Latitudes of the slice
        time: Dates of the slice (datetime64)
    """
    values: np.ndarray
    lon: np.ndarray
    lat: np.ndarray
    time: np.ndarray

    def __post_init__(self):
        """Validate the shape invariant."""
        expected = (len(self.lon), len(self.lat), len(self.time))
        if self.values.shape != expected:
            raise ValueError(f"Value array shape {self.values.shape} does not match axes {expected}")

# ============================================================================
# Load Parameters
# ============================================================================

@dataclass
class ReadOptions:
    """
    Options for reading and filtering.

    Attributes:
        remove_na_rows: Drop rows with a missing value after melting
        engine: xarray backend engine
        chunks: Dask chunking configuration
    """
    remove_na_rows: bool = True
    engine: Optional[str] = None
    chunks: ChunkSetting = DEFAULT_CHUNKS


@dataclass
class LoadParameters:
    """
    Consolidated parameters for one table extraction.

    ``area`` and ``time_selection`` are already normalized; None selects the full axis.
    """
    variable: str
    area: Optional[Union[BoundingBox, AreaPolygon]] = None
    time_selection: Optional[TimeSelection] = None
    options: Optional[ReadOptions] = None

    def __post_init__(self):
        if self.time_selection is None:
            self.time_selection = TimeSelection()
        if self.options is None:
            self.options = ReadOptions()
