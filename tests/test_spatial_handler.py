import geopandas as gpd
import numpy as np
import pytest
from shapely.geometry import MultiPolygon, Point, box

from conftest import make_axes
from eobs_reader.coordinates.spatial_handler import (
    is_polygon_area,
    normalize_area,
    resolve_spatial_ranges,
)
from eobs_reader.core.core_types import AreaPolygon, BoundingBox, IndexRange
from eobs_reader.core.exceptions import (
    AreaTypeError,
    EmptySelectionError,
    ParameterError,
    ValidationError,
)


def test_matrix_becomes_bounding_box():
    area = normalize_area(np.array([[1.0, 3.0], [41.0, 43.0]]))
    assert area == BoundingBox(lon_range=(1.0, 3.0), lat_range=(41.0, 43.0))
    assert not is_polygon_area(area)


def test_nested_list_matrix():
    area = normalize_area([[1, 3], [41, 43]])
    assert area.lon_range == (1.0, 3.0)


def test_none_and_existing_areas_pass_through():
    bbox = BoundingBox(lon_range=(0.0, 1.0), lat_range=(40.0, 41.0))
    assert normalize_area(None) is None
    assert normalize_area(bbox) is bbox


def test_geodataframe_becomes_polygon_area():
    gdf = gpd.GeoDataFrame({"name": ["a", "b"]}, geometry=[box(0, 40, 1, 41), box(2, 42, 3, 43)], crs="EPSG:4326")
    area = normalize_area(gdf)
    assert is_polygon_area(area)
    assert area.crs == gdf.crs
    assert area.bounds == BoundingBox(lon_range=(0.0, 3.0), lat_range=(40.0, 43.0))


def test_shapely_geometry_uses_given_crs():
    area = normalize_area(MultiPolygon([box(0, 40, 1, 41)]), crs="EPSG:4326")
    assert isinstance(area, AreaPolygon)
    assert area.crs.to_epsg() == 4326


@pytest.mark.parametrize("area", ["europe", 42, {"lon": (0, 1)}])
def test_unsupported_area_type(area):
    with pytest.raises(AreaTypeError):
        normalize_area(area)


def test_matrix_with_wrong_shape():
    with pytest.raises(ParameterError):
        normalize_area([[0.0, 1.0, 2.0], [40.0, 41.0, 42.0]])


def test_non_polygon_geometry_rejected():
    with pytest.raises(ValidationError):
        normalize_area(gpd.GeoSeries([Point(0, 40)]))


def test_reversed_bounding_box_rejected():
    with pytest.raises(ParameterError):
        BoundingBox(lon_range=(3.0, 1.0), lat_range=(40.0, 41.0))


def test_ranges_for_bounding_box():
    axes = make_axes()  # lon 0..4, lat 40..43
    lon_range, lat_range = resolve_spatial_ranges(axes, BoundingBox((1.0, 3.0), (41.0, 43.0)))
    assert lon_range == IndexRange(start=1, count=2)
    assert lat_range == IndexRange(start=1, count=2)


def test_ranges_for_polygon_use_its_bounds():
    axes = make_axes()
    area = normalize_area(gpd.GeoSeries([box(0.5, 40.5, 2.5, 42.5)]))
    lon_range, lat_range = resolve_spatial_ranges(axes, area)
    assert lon_range == IndexRange(start=1, count=2)
    assert lat_range == IndexRange(start=1, count=2)


def test_ranges_without_area():
    lon_range, lat_range = resolve_spatial_ranges(make_axes(), None)
    assert lon_range == IndexRange(start=0, count=5)
    assert lat_range == IndexRange(start=0, count=4)


def test_area_outside_grid():
    with pytest.raises(EmptySelectionError):
        resolve_spatial_ranges(make_axes(), BoundingBox((10.0, 20.0), (41.0, 43.0)))
