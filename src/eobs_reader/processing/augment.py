"""
E-OBS Reader Output Table

This module derives calendar fields and fixes the order of rows and columns.
"""

import pandas as pd

from ..core.config import LAT_DIM, LON_DIM, TIME_DIM, get_output_columns


def add_calendar_fields(frame: pd.DataFrame, variable: str) -> pd.DataFrame:
    """
    Add year, month and day and put the table in its final layout.

    Columns are time, year, month, day, latitude, longitude and the
    variable; rows are sorted by longitude, latitude and time. Any other
    column (such as a leftover ``point_id``) is dropped.

    Args:
        frame: Long-form table with a datetime time column
        variable: Name of the value column

    Returns:
        pd.DataFrame: Output table
    """
    dates = pd.to_datetime(frame[TIME_DIM])
    result = frame.assign(**{
        TIME_DIM: dates,
        'year': dates.dt.year.astype("int64"),
        'month': dates.dt.month.astype("int64"),
        'day': dates.dt.day.astype("int64"),
    })
    result = result.sort_values([LON_DIM, LAT_DIM, TIME_DIM], kind="mergesort")
    return result[get_output_columns(variable)].reset_index(drop=True)
