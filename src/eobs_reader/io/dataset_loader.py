"""
E-OBS Reader Main Dataset Loader

This module contains the core loading functionality that orchestrates
all the processing steps to turn a gridded E-OBS variable into a table.
"""

from pathlib import Path
from typing import Union
import pandas as pd

from ..core.core_types import GridSlice, LoadParameters
from ..core.logging_config import get_logger
from ..coordinates.spatial_handler import is_polygon_area, resolve_spatial_ranges
from ..coordinates.time_handler import resolve_time_range
from ..processing.melt import melt_grid_slice
from ..processing.filters import remove_na_rows, remove_outside_points
from ..processing.augment import add_calendar_fields
from .grid_reader import open_grid, read_axes, read_grid_slice

logger = get_logger('io.dataset_loader')

# ============================================================================
# Main Dataset Loader Class
# ============================================================================

class EOBSDatasetLoader:
    """
    Main E-OBS table loader class.

    This class orchestrates the entire extraction:
    - Index range computation for the area and period
    - Reading the selected block from the dataset
    - Melting into a long-form table and dropping empty grid cells
    - Optional row and polygon filtering
    - Calendar fields and final ordering
    """

    def __init__(self, source: Union[str, Path]):
        """
        Initialize the loader.

        Args:
            source: Local file path or OPeNDAP URL
        """
        self.source = source

    def load_table(self, params: LoadParameters) -> pd.DataFrame:
        """
        Extract a table with the specified parameters.

        Args:
            params: Consolidated loading parameters

        Returns:
            pd.DataFrame: Columns time, year, month, day, latitude, longitude
                and the variable
        """
        # Step 1: Read the selected block (the connection is released here)
        grid = self._read_grid(params)

        # Step 2: Melt and drop grid cells without data
        table = melt_grid_slice(grid, params.variable)
        logger.debug("%d rows after melting", len(table))

        # Step 3: Drop incomplete rows
        if params.options.remove_na_rows:
            table = remove_na_rows(table)
            logger.debug("%d rows after removing missing values", len(table))

        # Step 4: Restrict to the polygons
        if is_polygon_area(params.area):
            table = remove_outside_points(table, params.area)
            logger.debug("%d rows inside the area", len(table))

        # Step 5: Calendar fields and final layout
        return add_calendar_fields(table, params.variable)

    def _read_grid(self, params: LoadParameters) -> GridSlice:
        """Compute index ranges and read the matching block."""
        source_name = str(self.source)
        options = params.options

        with open_grid(self.source, engine=options.engine, chunks=options.chunks) as dataset:
            axes = read_axes(dataset, source_name)

            lon_range, lat_range = resolve_spatial_ranges(axes, params.area)
            time_range = resolve_time_range(axes, params.time_selection)
            logger.debug(
                "Index ranges: lon %s, lat %s, time %s",
                lon_range, lat_range, time_range
            )

            return read_grid_slice(
                dataset, params.variable, lon_range, lat_range, time_range,
                axes, source_name
            )

# ============================================================================
# Convenience Functions
# ============================================================================

def load_eobs_table(source: Union[str, Path], params: LoadParameters) -> pd.DataFrame:
    """
    Convenience function to extract an E-OBS table.

    Args:
        source: Local file path or OPeNDAP URL
        params: Loading parameters

    Returns:
        pd.DataFrame: Extracted table
    """
    loader = EOBSDatasetLoader(source)
    return loader.load_table(params)
