import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
from shapely.geometry import Polygon, box

from eobs_reader.core.core_types import AreaPolygon
from eobs_reader.processing.filters import (
    remove_na_rows,
    remove_outside_points,
    select_contained_points,
)


def _grid_table(n=4, n_time=2):
    lon, lat, day = np.meshgrid(np.arange(float(n)), np.arange(float(n)), np.arange(n_time), indexing="ij")
    return pd.DataFrame({
        "longitude": lon.ravel(),
        "latitude": lat.ravel(),
        "time": pd.Timestamp("2010-01-01") + pd.to_timedelta(day.ravel(), unit="D"),
        "tg": pd.array(np.arange(lon.size, dtype=float), dtype="Float64"),
    })


def _area(*geometries):
    return AreaPolygon(gpd.GeoSeries(list(geometries), crs="EPSG:4326"))


def test_remove_na_rows_ignores_time():
    frame = pd.DataFrame({
        "longitude": [1.0, 1.0, np.nan, 2.0],
        "latitude": [50.0, 50.0, 50.0, 50.0],
        "time": pd.to_datetime(["2010-01-01", None, "2010-01-01", "2010-01-01"]),
        "tg": pd.array([1.0, 2.0, 3.0, None], dtype="Float64"),
    })
    result = remove_na_rows(frame)
    assert result["tg"].tolist() == [1.0, 2.0]
    assert result.index.tolist() == [0, 1]


def test_remove_outside_points_keeps_contained_points():
    table = _grid_table()
    result = remove_outside_points(table, _area(box(0.5, 0.5, 2.5, 2.5)))

    points = set(zip(result["longitude"], result["latitude"]))
    assert points == {(1.0, 1.0), (1.0, 2.0), (2.0, 1.0), (2.0, 2.0)}
    assert len(result) == 8
    assert sorted(result["point_id"].unique()) == [1, 2, 3, 4]


def test_remove_outside_points_uses_union_of_polygons():
    table = _grid_table()
    area = _area(box(-0.5, -0.5, 0.5, 0.5), Polygon([(2.5, 2.5), (3.5, 2.5), (3.5, 3.5)]))
    result = remove_outside_points(table, area)
    assert set(zip(result["longitude"], result["latitude"])) == {(0.0, 0.0), (3.0, 3.0)}


def test_boundary_points_are_contained():
    table = _grid_table(n=3, n_time=1)
    result = remove_outside_points(table, _area(box(1.0, 1.0, 2.0, 2.0)))
    assert len(result) == 4


def test_remove_outside_points_is_idempotent():
    table = _grid_table()
    area = _area(Polygon([(0, 0), (3, 0), (0, 3)]))
    once = remove_outside_points(table, area)
    twice = remove_outside_points(once, area)
    pd.testing.assert_frame_equal(once, twice)


def test_no_point_inside():
    result = remove_outside_points(_grid_table(), _area(box(10, 10, 11, 11)))
    assert result.empty


def test_empty_table():
    result = remove_outside_points(_grid_table().iloc[0:0], _area(box(0, 0, 1, 1)))
    assert result.empty
    assert "point_id" in result.columns


def test_select_contained_points_returns_ids():
    points = pd.DataFrame({"point_id": [1, 2, 3], "longitude": [0.0, 5.0, 1.0], "latitude": [0.0, 5.0, 1.0]})
    contained = select_contained_points(points, _area(box(-1, -1, 2, 2)))
    assert sorted(contained.tolist()) == [1, 3]


@pytest.mark.parametrize("crs", [None, "EPSG:4326"])
def test_points_follow_area_crs(crs):
    area = AreaPolygon(gpd.GeoSeries([box(0.5, 0.5, 1.5, 1.5)], crs=crs))
    result = remove_outside_points(_grid_table(), area)
    assert set(zip(result["longitude"], result["latitude"])) == {(1.0, 1.0)}
