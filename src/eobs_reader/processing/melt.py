"""
E-OBS Reader Grid Melting

This module flattens a dense (lon, lat, time) block into one row per grid
cell and time step, and removes grid cells that hold no data at all.
"""

import numpy as np
import pandas as pd

from ..core.config import LAT_DIM, LON_DIM, POINT_ID, TIME_DIM, VALUE_DTYPE
from ..core.core_types import GridSlice
from ..core.logging_config import get_logger

logger = get_logger('processing.melt')

_LON_INDEX = 'lon_index'
_LAT_INDEX = 'lat_index'
_TIME_INDEX = 'time_index'

# ============================================================================
# Point Identifiers
# ============================================================================

def assign_point_ids(
    frame: pd.DataFrame,
    lon: str = LON_DIM,
    lat: str = LAT_DIM
) -> pd.DataFrame:
    """
    Number the unique (lon, lat) pairs of a table.

    Ids start at 1 and follow ascending longitude, then latitude. They are
    scratch keys for a single filtering step: every caller assigns its own
    and never compares them with ids from another step.

    Args:
        frame: Table with longitude and latitude columns
        lon: Longitude column (coordinates or grid indices)
        lat: Latitude column (coordinates or grid indices)

    Returns:
        pd.DataFrame: Copy of the table with a ``point_id`` column
    """
    point_ids = frame.groupby([lon, lat], sort=True).ngroup() + 1
    return frame.assign(**{POINT_ID: point_ids.astype("int64")})

# ============================================================================
# Melting
# ============================================================================

def _melt_values(values: np.ndarray, variable: str) -> pd.DataFrame:
    n_lon, n_lat, n_time = values.shape

    if n_time == 1:
        # A single time step is a 2D plane; every record points at the one date
        lon_idx, lat_idx = np.meshgrid(np.arange(n_lon), np.arange(n_lat), indexing="ij")
        frame = pd.DataFrame({
            _LON_INDEX: lon_idx.ravel(),
            _LAT_INDEX: lat_idx.ravel(),
            variable: pd.array(values[:, :, 0].ravel(), dtype=VALUE_DTYPE),
        })
        frame[_TIME_INDEX] = 0
        return frame

    lon_idx, lat_idx, time_idx = np.meshgrid(
        np.arange(n_lon), np.arange(n_lat), np.arange(n_time), indexing="ij"
    )
    return pd.DataFrame({
        _LON_INDEX: lon_idx.ravel(),
        _LAT_INDEX: lat_idx.ravel(),
        _TIME_INDEX: time_idx.ravel(),
        variable: pd.array(values.ravel(), dtype=VALUE_DTYPE),
    })


def drop_empty_points(frame: pd.DataFrame, value_column: str) -> pd.DataFrame:
    """
    Remove every point whose value is missing at all time steps.

    Points missing only at some time steps keep all their rows.

    Args:
        frame: Table with a ``point_id`` column
        value_column: Column holding the variable values

    Returns:
        pd.DataFrame: Filtered copy of the table
    """
    has_data = frame[value_column].notna().groupby(frame[POINT_ID]).transform("any")
    return frame.loc[has_data.to_numpy(dtype=bool)]


def _resolve_coordinates(frame: pd.DataFrame, grid: GridSlice, variable: str) -> pd.DataFrame:
    return pd.DataFrame({
        LON_DIM: grid.lon[frame[_LON_INDEX].to_numpy()],
        LAT_DIM: grid.lat[frame[_LAT_INDEX].to_numpy()],
        TIME_DIM: grid.time[frame[_TIME_INDEX].to_numpy()],
        variable: frame[variable].array,
    })


def melt_grid_slice(grid: GridSlice, variable: str) -> pd.DataFrame:
    """
    Turn a grid slice into a long-form table.

    Grid cells without any data are removed before grid indices are replaced
    by coordinates and dates.

    Args:
        grid: Dense values and their axes
        variable: Name of the value column

    Returns:
        pd.DataFrame: Columns longitude, latitude, time and the variable,
            ordered by longitude, latitude and time
    """
    frame = _melt_values(grid.values, variable)
    frame = assign_point_ids(frame, _LON_INDEX, _LAT_INDEX)
    n_points = int(frame[POINT_ID].max()) if len(frame) else 0

    frame = drop_empty_points(frame, variable)
    result = _resolve_coordinates(frame, grid, variable)

    logger.debug(
        "Melted %s: %d of %d points hold data, %d rows",
        variable, frame[POINT_ID].nunique(), n_points, len(result)
    )
    return result
