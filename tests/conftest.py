import numpy as np
import pandas as pd
import pytest
import xarray as xr

from eobs_reader.core.core_types import AxisSet, GridSlice

LON = np.array([4.0, 5.0])
LAT = np.array([51.0, 52.0])

# Stored (time, latitude, longitude) as in the published files.
# The cell at lon 5.0 / lat 52.0 never has data.
VALUES = np.array([
    [[1.0, 2.0], [3.0, np.nan]],
    [[5.0, 6.0], [7.0, np.nan]],
])


def write_grid(path, values, lon=LON, lat=LAT, days=None, variable="tg",
               units="days since 2010-01-01 00:00"):
    values = np.asarray(values, dtype=float)
    if days is None:
        days = np.arange(values.shape[0], dtype=float)
    ds = xr.Dataset(
        {variable: (("time", "latitude", "longitude"), values)},
        coords={
            "longitude": ("longitude", np.asarray(lon, dtype=float)),
            "latitude": ("latitude", np.asarray(lat, dtype=float)),
            "time": ("time", np.asarray(days, dtype=float), {"units": units}),
        },
    )
    ds.to_netcdf(path)
    return path


def make_axes(n_time=10, origin="2010-01-01", time=None):
    return AxisSet(
        lon=np.arange(0.0, 5.0),
        lat=np.arange(40.0, 44.0),
        time=np.arange(float(n_time)) if time is None else np.asarray(time, dtype=float),
        time_origin=pd.Timestamp(origin),
    )


def make_grid_slice(values, origin="2010-01-01"):
    """Grid slice from values shaped (lon, lat, time) on unit-spaced axes."""
    values = np.asarray(values, dtype=float)
    n_lon, n_lat, n_time = values.shape
    return GridSlice(
        values=values,
        lon=10.0 + np.arange(n_lon),
        lat=50.0 + np.arange(n_lat),
        time=pd.date_range(origin, periods=n_time, freq="D").values,
    )


@pytest.fixture
def eobs_file(tmp_path):
    return write_grid(tmp_path / "tg_test.nc", VALUES)


@pytest.fixture
def partial_file(tmp_path):
    values = VALUES.copy()
    values[1, 0, 0] = np.nan  # lon 4.0 / lat 51.0 missing on the second day only
    return write_grid(tmp_path / "tg_partial.nc", values)
