"""
E-OBS Reader Configuration and Constants

This module centralizes all configuration parameters, constants, and default values
for better maintainability and consistency across the codebase.
"""

import os

# ============================================================================
# E-OBS Variables
# ============================================================================

KNOWN_VARIABLES = (
    "tg",  # daily mean temperature
    "tn",  # daily minimum temperature
    "tx",  # daily maximum temperature
    "pp",  # sea level pressure
    "rr",  # precipitation sum
)

# Standard errors are published alongside each variable but are not read yet
STDERR_VARIABLES = tuple(f"{var}_stderr" for var in KNOWN_VARIABLES)

# ============================================================================
# Remote Source
# ============================================================================

OPENDAP_BASE_URL = os.environ.get(
    "EOBS_READER_OPENDAP_URL",
    "http://opendap.knmi.nl/knmi/thredds/dodsC/e-obs_"
)
DATASET_VERSION = os.environ.get("EOBS_READER_DATASET_VERSION", "v15.0")

# Grid identifier -> (resolution, catalogue directory, file suffix tag)
GRID_CATALOGUE = {
    "0.25reg": ("0.25", "regular", "reg"),
    "0.50reg": ("0.50", "regular", "reg"),
    "0.25rot": ("0.25", "rotated", "rot"),
    "0.50rot": ("0.50", "rotated", "rot"),
}
KNOWN_GRIDS = tuple(GRID_CATALOGUE)
DEFAULT_GRID = "0.25reg"

# ============================================================================
# Dimension Names
# ============================================================================

LAT_DIM = 'latitude'
LON_DIM = 'longitude'
TIME_DIM = 'time'

# ============================================================================
# Time Axis
# ============================================================================

DEFAULT_TIME_ORIGIN = "1950-01-01"
TIME_UNITS_PATTERN = r"^\s*days\s+since\s+(\d{1,4}-\d{1,2}-\d{1,2})"

# Width of one time step in axis units; interval bounds are widened by this
TIME_STEP = 1

# Separators accepted between the two ends of an interval expression
INTERVAL_SEPARATORS = ("::", "/")

# ============================================================================
# Output Table
# ============================================================================

POINT_ID = 'point_id'
CALENDAR_COLUMNS = ('year', 'month', 'day')
VALUE_DTYPE = "Float64"


def get_output_columns(variable: str) -> list:
    """Get the fixed output column order for a variable."""
    return [TIME_DIM, *CALENDAR_COLUMNS, LAT_DIM, LON_DIM, variable]

# ============================================================================
# Default Processing Parameters
# ============================================================================

DEFAULT_CHUNKS = "auto"
DEFAULT_CONTAINMENT_PREDICATE = "intersects"
