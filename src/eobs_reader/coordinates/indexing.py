"""
E-OBS Reader Axis Indexing

This module converts coordinate bounds into contiguous index ranges over
monotonic coordinate axes.
"""

import numpy as np

from ..core.core_types import BoundRange, CoordinateRange, IndexRange
from ..core.exceptions import EmptySelectionError


def compute_index_range(axis: np.ndarray, bound: BoundRange, dimension: str) -> IndexRange:
    """
    Find the positions of an ascending axis with ``lower <= value < upper``.

    Membership reduces to two boundary searches: the first index not below
    ``lower`` and the first index not below ``upper``. A value exactly equal
    to ``lower`` is selected, a value exactly equal to ``upper`` is not.

    Args:
        axis: Monotonic ascending coordinate values
        bound: (lower, upper) bound, upper exclusive
        dimension: Axis name for error messages

    Returns:
        IndexRange: Contiguous selection along the axis

    Raises:
        EmptySelectionError: If no axis value lies inside the bound

    Examples:
        >>> compute_index_range(np.array([40, 41, 42, 43]), (41, 43), "latitude")
        IndexRange(start=1, count=2)
    """
    values = np.asarray(axis)
    lower, upper = bound
    first = int(np.searchsorted(values, lower, side="left"))
    stop = int(np.searchsorted(values, upper, side="left"))

    count = stop - first
    if count <= 0:
        axis_range = (values[0], values[-1]) if values.size else None
        raise EmptySelectionError(dimension, tuple(bound), axis_range)

    return IndexRange(start=first, count=count)


def spatial_bound(coordinate_range: CoordinateRange) -> BoundRange:
    """Bound spanned by a requested box along one spatial axis."""
    return (min(coordinate_range), max(coordinate_range))


def full_index_range(axis: np.ndarray, dimension: str) -> IndexRange:
    """Select every position of an axis."""
    size = len(axis)
    if size == 0:
        raise EmptySelectionError(dimension, (None, None))
    return IndexRange(start=0, count=size)


def check_index_range(index_range: IndexRange, axis: np.ndarray, dimension: str) -> IndexRange:
    """
    Clip an index range to an axis.

    Raises:
        EmptySelectionError: If the range lies entirely outside the axis
    """
    size = len(axis)
    start = max(index_range.start, 0)
    stop = min(index_range.stop, size)
    if stop <= start:
        raise EmptySelectionError(
            dimension, (index_range.start, index_range.stop - 1), (0, size - 1)
        )
    return IndexRange(start=start, count=stop - start)
