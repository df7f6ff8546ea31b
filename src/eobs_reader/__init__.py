"""
E-OBS Reader - A Python package for importing E-OBS gridded climate data as tables.

This package extracts a spatial and temporal subset of an E-OBS variable
(local netCDF file or the KNMI OPeNDAP server) and reshapes the dense grid into
a long-form pandas DataFrame with one row per grid point and day.

Key Features:
- Rectangular or polygonal area selection
- Periods as index pairs, date pairs or ISO-8601 style intervals
- Only the selected hyperslab is read, lazily through Dask
- Grid cells without any data are dropped automatically

Quick Start:
    >>> import eobs_reader as eobs
    >>> df = eobs.import_eobs(
    ...     "tg",
    ...     period="2010-01-01/2010-01-31",
    ...     area=[[4.0, 6.0], [51.0, 53.0]],
    ...     grid="0.25reg"
    ... )
    >>> df.columns.tolist()
    ['time', 'year', 'month', 'day', 'latitude', 'longitude', 'tg']
"""

__version__ = "1.0.0"
__author__ = "E-OBS Reader Development Team"

# Import main interface functions
from .main import (
    import_eobs,
    import_eobs_local,
)

# Loader class for advanced users
from .io.dataset_loader import EOBSDatasetLoader, load_eobs_table

# Utility functions
from .utils import (
    get_coordinate_info,
    convert_area_to_indices,
    convert_period_to_indices,
)

# Import parameter classes for structured interface
from .core.core_types import (
    IndexRange,
    BoundingBox,
    AreaPolygon,
    TimeSelection,
    ReadOptions,
    LoadParameters,
)

# Import configuration for advanced users
from .core.config import (
    KNOWN_VARIABLES,
    KNOWN_GRIDS,
    LAT_DIM,
    LON_DIM,
    TIME_DIM,
)

# Import exceptions for error handling
from .core.exceptions import (
    EOBSReaderError,
    ValidationError,
    ParameterError,
    VariableNotFoundError,
    UnsupportedVariableError,
    PeriodFormatError,
    AreaTypeError,
    GridNotFoundError,
    EmptySelectionError,
    ResourceError,
    CoordinateError,
)

# Import logging configuration
from .core.logging_config import setup_logging, set_log_level

# Define what gets imported with "from eobs_reader import *"
__all__ = [
    # Version info
    '__version__',

    # Main interface functions
    'import_eobs',
    'import_eobs_local',
    'EOBSDatasetLoader',
    'load_eobs_table',

    # Utility functions
    'get_coordinate_info',
    'convert_area_to_indices',
    'convert_period_to_indices',

    # Parameter classes
    'IndexRange',
    'BoundingBox',
    'AreaPolygon',
    'TimeSelection',
    'ReadOptions',
    'LoadParameters',

    # Configuration constants
    'KNOWN_VARIABLES',
    'KNOWN_GRIDS',
    'LAT_DIM',
    'LON_DIM',
    'TIME_DIM',

    # Exception classes
    'EOBSReaderError',
    'ValidationError',
    'ParameterError',
    'VariableNotFoundError',
    'UnsupportedVariableError',
    'PeriodFormatError',
    'AreaTypeError',
    'GridNotFoundError',
    'EmptySelectionError',
    'ResourceError',
    'CoordinateError',

    # Logging configuration
    'setup_logging',
    'set_log_level',
]
