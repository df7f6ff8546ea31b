"""
E-OBS Reader Source Identifiers

This module validates variable names and grid identifiers and builds the
OPeNDAP URL of a remote E-OBS dataset.
"""

from ..core.config import (
    DATASET_VERSION, GRID_CATALOGUE, KNOWN_GRIDS, KNOWN_VARIABLES,
    OPENDAP_BASE_URL, STDERR_VARIABLES
)
from ..core.exceptions import GridNotFoundError, check_variable_supported


def validate_variable(variable: str) -> str:
    """
    Check that a variable can be read.

    Raises:
        UnsupportedVariableError: For standard error variables
        VariableNotFoundError: For unknown variables
    """
    check_variable_supported(variable, KNOWN_VARIABLES, STDERR_VARIABLES)
    return variable


def validate_grid(grid: str) -> str:
    """
    Check a grid identifier.

    Raises:
        GridNotFoundError: If the grid is not one of KNOWN_GRIDS
    """
    if grid not in GRID_CATALOGUE:
        raise GridNotFoundError(grid, KNOWN_GRIDS)
    return grid


def build_opendap_url(variable: str, grid: str) -> str:
    """
    Build the OPeNDAP URL of a variable on a grid.

    Examples:
        >>> build_opendap_url("tg", "0.25reg")
        'http://opendap.knmi.nl/knmi/thredds/dodsC/e-obs_0.25regular/tg_0.25deg_reg_v15.0.nc'
    """
    validate_variable(variable)
    resolution, catalogue, tag = GRID_CATALOGUE[validate_grid(grid)]
    return (
        f"{OPENDAP_BASE_URL}{resolution}{catalogue}/"
        f"{variable}_{resolution}deg_{tag}_{DATASET_VERSION}.nc"
    )
