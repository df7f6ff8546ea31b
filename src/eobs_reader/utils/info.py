"""
E-OBS Reader Information Utilities

This module provides functions for querying the coordinate system of a dataset.
"""

from pathlib import Path
from typing import Dict, Optional, Union
import numpy as np
import pandas as pd

from ..coordinates.time_handler import days_to_dates, is_daily_axis
from ..io.grid_reader import open_grid, read_axes


def _axis_summary(values: np.ndarray) -> Dict:
    step = float(np.mean(np.diff(values))) if len(values) > 1 else None
    return {
        'size': len(values),
        'range': (float(values.min()), float(values.max())),
        'step_mean': step,
    }


def get_coordinate_info(source: Union[str, Path], engine: Optional[str] = None) -> Dict:
    """
    Get coordinate system information for a dataset.

    Args:
        source: Local file path or OPeNDAP URL
        engine: xarray backend engine

    Returns:
        Dict: Axis sizes, ranges, mean spacing and the covered dates

    Examples:
        >>> info = get_coordinate_info("tg_0.25deg_reg_v15.0.nc")
        >>> print(f"Grid: {info['longitude']['size']} x {info['latitude']['size']}")
        >>> print(f"Dates: {info['time']['first_date']} to {info['time']['last_date']}")
    """
    with open_grid(source, engine=engine) as dataset:
        axes = read_axes(dataset, str(source))

    dates = days_to_dates(axes.time[[0, -1]], axes.time_origin)
    time_info = _axis_summary(axes.time)
    time_info.update({
        'origin': axes.time_origin,
        'first_date': pd.Timestamp(dates[0]),
        'last_date': pd.Timestamp(dates[1]),
        'daily': is_daily_axis(axes.time),
    })

    return {
        'longitude': _axis_summary(axes.lon),
        'latitude': _axis_summary(axes.lat),
        'time': time_info,
    }
