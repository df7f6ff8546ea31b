"""
E-OBS Reader Main Interface

This module provides the main API functions for importing E-OBS data as tables.
Utility functions live in the utils package.
"""

from pathlib import Path
from typing import Any, Optional, Union
import pandas as pd

from .core.config import DEFAULT_CHUNKS, DEFAULT_GRID
from .core.core_types import ChunkSetting, LoadParameters, ReadOptions
from .core.logging_config import get_logger
from .coordinates.spatial_handler import normalize_area
from .coordinates.time_handler import normalize_period
from .io.dataset_loader import load_eobs_table
from .io.sources import build_opendap_url

logger = get_logger('main')


def _build_parameters(variable, period, area, crs, na_rm, engine, chunks) -> LoadParameters:
    """Validate the request before any I/O."""
    return LoadParameters(
        variable=variable,
        area=normalize_area(area, crs=crs),
        time_selection=normalize_period(period),
        options=ReadOptions(remove_na_rows=na_rm, engine=engine, chunks=chunks),
    )


# ============================================================================
# Main API Functions
# ============================================================================

def import_eobs(
    variable: str,
    period: Any = None,
    area: Any = None,
    grid: str = DEFAULT_GRID,
    na_rm: bool = True,
    *,
    crs: Any = None,
    engine: Optional[str] = None,
    chunks: ChunkSetting = DEFAULT_CHUNKS,
) -> pd.DataFrame:
    """
    Import E-OBS data from the KNMI OPeNDAP server.

    Args:
        variable: One of 'tg', 'tn', 'tx', 'pp', 'rr'
        period: Time selection. One of:
            - None for the whole record
            - an interval string such as "2010", "2010-06" or "2010-01-01/2010-01-31"
            - an integer index pair (start, end), both inclusive
            - a date pair (start, end), end exclusive: ("2010-01-01", "2010-01-31")
              stops at January 30. Pass the following day, or an interval
              such as "2010-01-01/2010-01-31", to include the last day
            - a TimeSelection
        area: Spatial selection. A BoundingBox or 2x2 matrix
            ``[[lon_min, lon_max], [lat_min, lat_max]]`` selects a rectangle;
            polygons (GeoDataFrame, GeoSeries, shapely geometry or AreaPolygon)
            additionally drop the points outside them. None selects everything.
        grid: One of '0.25reg', '0.50reg', '0.25rot', '0.50rot'
        na_rm: Drop rows with missing values
        crs: CRS of a bare shapely geometry area
        engine: xarray backend engine
        chunks: Dask chunking configuration

    Returns:
        pd.DataFrame: Columns time, year, month, day, latitude, longitude
            and the variable, sorted by longitude, latitude and time

    Raises:
        ValidationError: For unknown variables, grids, periods or areas
        EmptySelectionError: If the area or period misses the dataset
        ResourceError: If the dataset cannot be read

    Examples:
        >>> box = BoundingBox(lon_range=(4.0, 6.0), lat_range=(51.0, 53.0))
        >>> df = import_eobs("tg", "2010-01", box, grid="0.25reg")

        >>> import geopandas as gpd
        >>> provinces = gpd.read_file("provinces.gpkg")
        >>> df = import_eobs("rr", "2012::2013", provinces, grid="0.50reg")
    """
    url = build_opendap_url(variable, grid)
    params = _build_parameters(variable, period, area, crs, na_rm, engine, chunks)

    logger.info("Loading opendapURL %s", url)
    return load_eobs_table(url, params)


def import_eobs_local(
    variable: str,
    filename: Union[str, Path],
    period: Any = None,
    area: Any = None,
    na_rm: bool = True,
    *,
    crs: Any = None,
    engine: Optional[str] = None,
    chunks: ChunkSetting = DEFAULT_CHUNKS,
) -> pd.DataFrame:
    """
    Import E-OBS data from a local netCDF file.

    Accepts the same period and area forms as import_eobs. The variable name
    is looked up in the file rather than in the list of published variables.

    Args:
        variable: Variable name in the file
        filename: Path to the netCDF file
        period: Time selection
        area: Spatial selection
        na_rm: Drop rows with missing values
        crs: CRS of a bare shapely geometry area
        engine: xarray backend engine
        chunks: Dask chunking configuration

    Returns:
        pd.DataFrame: Extracted table

    Examples:
        >>> df = import_eobs_local("tg", "tg_0.25deg_reg_v15.0.nc", period=(0, 30))
    """
    params = _build_parameters(variable, period, area, crs, na_rm, engine, chunks)

    logger.info("Loading file %s", filename)
    return load_eobs_table(Path(filename), params)


# ============================================================================
# Export List
# ============================================================================

__all__ = [
    'import_eobs',
    'import_eobs_local',
]
