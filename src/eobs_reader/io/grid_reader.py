"""
E-OBS Reader Grid Access

This module owns the dataset connection: opening it with guaranteed release,
reading the coordinate axes and reading the hyperslab selected by index ranges.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union
import numpy as np
import xarray as xr

from ..core.config import DEFAULT_CHUNKS, LAT_DIM, LON_DIM, TIME_DIM
from ..core.core_types import AxisSet, ChunkSetting, GridSlice, IndexRange
from ..core.exceptions import CoordinateError, ResourceError, VariableNotFoundError
from ..core.logging_config import get_logger
from ..coordinates.time_handler import days_to_dates, parse_time_origin

logger = get_logger('io.grid_reader')

GRID_DIMS = (LON_DIM, LAT_DIM, TIME_DIM)

# ============================================================================
# Connection Handling
# ============================================================================

@contextmanager
def open_grid(
    source: Union[str, Path],
    engine: str = None,
    chunks: ChunkSetting = DEFAULT_CHUNKS
) -> Iterator[xr.Dataset]:
    """
    Open a local file or OPeNDAP URL for the duration of a with-block.

    Times are left as numeric day offsets. The dataset is closed on every
    exit path, including errors raised inside the block. A close failure after
    such an error is logged and the original error propagates.

    Args:
        source: File path or URL
        engine: xarray backend engine
        chunks: Dask chunking configuration

    Yields:
        xr.Dataset: Lazily loaded dataset

    Raises:
        ResourceError: If the dataset cannot be opened, or cannot be closed
            after the block completed
    """
    source_name = str(source)
    try:
        dataset = xr.open_dataset(source, engine=engine, chunks=chunks, decode_times=False)
    except Exception as e:
        raise ResourceError(source_name, "open", str(e)) from e

    logger.debug("Opened dataset %s", source_name)
    try:
        yield dataset
    except BaseException:
        # The block's own error wins over a failing close
        try:
            dataset.close()
        except Exception as e:
            logger.warning("Failed to close dataset %s: %s", source_name, e)
        raise

    try:
        dataset.close()
    except Exception as e:
        raise ResourceError(source_name, "close", str(e)) from e
    logger.debug("Closed dataset %s", source_name)

# ============================================================================
# Reading
# ============================================================================

def _read_axis(dataset: xr.Dataset, name: str, source: str) -> np.ndarray:
    if name not in dataset.variables:
        raise CoordinateError(source, name, "Coordinate variable not found")

    coord = dataset[name]
    if coord.ndim != 1:
        raise CoordinateError(source, name, f"Expected 1D, got {coord.ndim}D")

    try:
        values = np.asarray(coord.values)
    except (OSError, RuntimeError) as e:
        raise ResourceError(source, "read", f"'{name}': {e}") from e

    if values.size == 0:
        raise CoordinateError(source, name, "Axis is empty")
    if values.size > 1 and not np.all(np.diff(values) > 0):
        raise CoordinateError(source, name, "Axis is not monotonic ascending")
    return values


def read_axes(dataset: xr.Dataset, source: str = "") -> AxisSet:
    """
    Read the longitude, latitude and time axes.

    Raises:
        CoordinateError: If an axis is missing, empty or not ascending
    """
    return AxisSet(
        lon=_read_axis(dataset, LON_DIM, source),
        lat=_read_axis(dataset, LAT_DIM, source),
        time=_read_axis(dataset, TIME_DIM, source),
        time_origin=parse_time_origin(dataset[TIME_DIM].attrs.get("units")),
    )


def read_grid_slice(
    dataset: xr.Dataset,
    variable: str,
    lon_range: IndexRange,
    lat_range: IndexRange,
    time_range: IndexRange,
    axes: AxisSet,
    source: str = ""
) -> GridSlice:
    """
    Read the block of a variable selected by three index ranges.

    Args:
        dataset: Open dataset
        variable: Variable name
        lon_range: Longitude index range
        lat_range: Latitude index range
        time_range: Time index range
        axes: Full axes of the dataset
        source: Source name for error messages

    Returns:
        GridSlice: Values ordered (lon, lat, time) with the matching axes

    Raises:
        VariableNotFoundError: If the variable is not in the dataset
        CoordinateError: If the variable is not laid out on the grid axes
        ResourceError: If reading the values fails
    """
    if variable not in dataset.data_vars:
        raise VariableNotFoundError(variable, list(dataset.data_vars))

    data = dataset[variable]
    if set(data.dims) != set(GRID_DIMS):
        raise CoordinateError(source, variable, f"Expected dimensions {GRID_DIMS}, got {data.dims}")

    subset = data.isel({
        LON_DIM: lon_range.to_slice(),
        LAT_DIM: lat_range.to_slice(),
        TIME_DIM: time_range.to_slice(),
    }).transpose(*GRID_DIMS)

    logger.debug(
        "Reading %s: lon %s, lat %s, time %s",
        variable, lon_range, lat_range, time_range
    )
    try:
        values = np.asarray(subset.values, dtype=float)
    except (OSError, RuntimeError) as e:
        raise ResourceError(source, "read", f"'{variable}': {e}") from e

    return GridSlice(
        values=values,
        lon=axes.lon[lon_range.to_slice()],
        lat=axes.lat[lat_range.to_slice()],
        time=days_to_dates(axes.time[time_range.to_slice()], axes.time_origin),
    )
