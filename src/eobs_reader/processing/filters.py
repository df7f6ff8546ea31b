"""
E-OBS Reader Row Filters

This module removes incomplete rows and points lying outside an area's polygons.
"""

import pandas as pd
import geopandas as gpd

from ..core.config import DEFAULT_CONTAINMENT_PREDICATE, LAT_DIM, LON_DIM, POINT_ID, TIME_DIM
from ..core.core_types import AreaPolygon
from ..core.logging_config import get_logger
from .melt import assign_point_ids

logger = get_logger('processing.filters')


def remove_na_rows(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Drop rows with a missing value in any column but time.

    The time column is never tested; dates are always present.

    Args:
        frame: Long-form table

    Returns:
        pd.DataFrame: Complete rows only
    """
    subset = [column for column in frame.columns if column != TIME_DIM]
    result = frame.dropna(subset=subset).reset_index(drop=True)
    logger.debug("Removed %d incomplete rows", len(frame) - len(result))
    return result


def select_contained_points(
    points: pd.DataFrame,
    area: AreaPolygon,
    predicate: str = DEFAULT_CONTAINMENT_PREDICATE
) -> pd.Series:
    """
    Test unique points against the union of an area's polygons.

    Points are built in the area's CRS. A point the spatial join does not
    match is outside.

    Args:
        points: One row per point with ``point_id``, longitude and latitude
        area: Polygons to test against
        predicate: Spatial predicate for the join

    Returns:
        pd.Series: Ids of the contained points
    """
    point_gdf = gpd.GeoDataFrame(
        {POINT_ID: points[POINT_ID].to_numpy()},
        geometry=gpd.points_from_xy(points[LON_DIM], points[LAT_DIM]),
        crs=area.crs,
    )
    polygon_gdf = gpd.GeoDataFrame(geometry=[area.union()], crs=area.crs)

    joined = gpd.sjoin(point_gdf, polygon_gdf, how="left", predicate=predicate)
    matched = joined["index_right"].notna()
    return pd.Series(joined.loc[matched, POINT_ID].unique(), name=POINT_ID)


def remove_outside_points(frame: pd.DataFrame, area: AreaPolygon) -> pd.DataFrame:
    """
    Keep only rows whose point lies inside the area's polygons.

    Points are regrouped from scratch; the returned table carries fresh
    ``point_id`` values numbered over the surviving points only.

    Args:
        frame: Long-form table with longitude and latitude columns
        area: Polygons to test against

    Returns:
        pd.DataFrame: Rows of contained points
    """
    frame = assign_point_ids(frame)
    if frame.empty:
        return frame.reset_index(drop=True)

    points = frame.drop_duplicates(POINT_ID)[[POINT_ID, LON_DIM, LAT_DIM]]
    contained = select_contained_points(points, area)

    kept = frame.loc[frame[POINT_ID].isin(contained)]
    logger.debug("%d of %d points inside the area", len(contained), len(points))

    return assign_point_ids(kept).reset_index(drop=True)
