import logging

import numpy as np
import pandas as pd
import pytest
import xarray as xr

from conftest import VALUES, write_grid
from eobs_reader.core.core_types import IndexRange
from eobs_reader.core.exceptions import (
    CoordinateError,
    EmptySelectionError,
    ResourceError,
    VariableNotFoundError,
)
from eobs_reader.io import grid_reader
from eobs_reader.io.grid_reader import open_grid, read_axes, read_grid_slice


class _FakeDataset:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class _UnclosableDataset(_FakeDataset):
    def close(self):
        self.closed = True
        raise OSError("connection reset")


def test_open_missing_file(tmp_path):
    with pytest.raises(ResourceError) as excinfo:
        with open_grid(tmp_path / "missing.nc"):
            pass
    assert excinfo.value.operation == "open"


def test_dataset_closed_when_block_fails(monkeypatch):
    fake = _FakeDataset()
    monkeypatch.setattr(grid_reader.xr, "open_dataset", lambda *args, **kwargs: fake)

    with pytest.raises(RuntimeError):
        with open_grid("http://example.org/tg.nc"):
            raise RuntimeError("boom")
    assert fake.closed


def test_close_failure_keeps_block_error(monkeypatch, caplog):
    fake = _UnclosableDataset()
    monkeypatch.setattr(grid_reader.xr, "open_dataset", lambda *args, **kwargs: fake)

    with caplog.at_level(logging.WARNING, logger="eobs_reader"):
        with pytest.raises(EmptySelectionError) as excinfo:
            with open_grid("http://example.org/tg.nc"):
                raise EmptySelectionError("time", (0, 1))

    assert excinfo.value.dimension == "time"
    assert fake.closed
    assert "Failed to close" in caplog.text


def test_close_failure_after_clean_block(monkeypatch):
    monkeypatch.setattr(grid_reader.xr, "open_dataset", lambda *args, **kwargs: _UnclosableDataset())

    with pytest.raises(ResourceError) as excinfo:
        with open_grid("http://example.org/tg.nc"):
            pass
    assert excinfo.value.operation == "close"


def test_read_axes(eobs_file):
    with open_grid(eobs_file) as ds:
        axes = read_axes(ds, str(eobs_file))
    assert axes.lon.tolist() == [4.0, 5.0]
    assert axes.lat.tolist() == [51.0, 52.0]
    assert axes.time.tolist() == [0.0, 1.0]
    assert axes.time_origin == pd.Timestamp("2010-01-01")


def test_read_axes_rejects_descending_axis(tmp_path):
    path = write_grid(tmp_path / "desc.nc", VALUES, lat=[52.0, 51.0])
    with open_grid(path) as ds:
        with pytest.raises(CoordinateError):
            read_axes(ds)


def test_read_axes_missing_coordinate():
    ds = xr.Dataset(coords={"longitude": [0.0], "latitude": [0.0]})
    with pytest.raises(CoordinateError) as excinfo:
        read_axes(ds, "memory")
    assert excinfo.value.coord_name == "time"


def test_read_grid_slice_is_lon_lat_time(eobs_file):
    with open_grid(eobs_file) as ds:
        axes = read_axes(ds)
        grid = read_grid_slice(
            ds, "tg", IndexRange(0, 2), IndexRange(1, 1), IndexRange(1, 1), axes
        )

    assert grid.values.shape == (2, 1, 1)
    # File order is (time, lat, lon)
    np.testing.assert_array_equal(grid.values[:, 0, 0], VALUES[1, 1, :])
    assert grid.lat.tolist() == [52.0]
    assert pd.Timestamp(grid.time[0]) == pd.Timestamp("2010-01-02")


def test_read_grid_slice_unknown_variable(eobs_file):
    with open_grid(eobs_file) as ds:
        axes = read_axes(ds)
        with pytest.raises(VariableNotFoundError) as excinfo:
            read_grid_slice(ds, "rr", IndexRange(0, 1), IndexRange(0, 1), IndexRange(0, 1), axes)
    assert excinfo.value.available_variables == ["tg"]
