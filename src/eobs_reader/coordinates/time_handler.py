"""
E-OBS Reader Time Coordinate Processing

This module handles time-related coordinate transformations, period parsing
and the conversion of periods into index ranges over the time axis.
"""

import numbers
import re
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd

from ..core.config import (
    DEFAULT_TIME_ORIGIN, INTERVAL_SEPARATORS, TIME_DIM, TIME_STEP, TIME_UNITS_PATTERN
)
from ..core.core_types import AxisSet, IndexRange, TimeSelection, TimeValue
from ..core.exceptions import EmptySelectionError, ParameterError, PeriodFormatError
from ..core.logging_config import get_logger
from .indexing import check_index_range, compute_index_range, full_index_range

logger = get_logger('coordinates.time_handler')

# YYYY, YYYY-MM or YYYY-MM-DD
_ISO_TOKEN = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")
_TOKEN_FREQ = {1: "Y", 2: "M", 3: "D"}

# ============================================================================
# Time Value Normalization
# ============================================================================

def parse_time_origin(units: Optional[str]) -> pd.Timestamp:
    """
    Get the epoch of a day-offset time axis.

    Args:
        units: CF units attribute, e.g. "days since 1950-01-01 00:00"

    Returns:
        pd.Timestamp: Epoch named by the units, or the E-OBS default
    """
    if units:
        match = re.match(TIME_UNITS_PATTERN, str(units))
        if match:
            return pd.Timestamp(match.group(1))
        logger.warning("Unrecognised time units '%s', assuming days since %s", units, DEFAULT_TIME_ORIGIN)
    return pd.Timestamp(DEFAULT_TIME_ORIGIN)


def normalize_time_value(time_value: TimeValue) -> pd.Timestamp:
    """
    Normalize various time formats to a day-resolution pandas Timestamp.

    Raises:
        PeriodFormatError: If the value cannot be parsed
    """
    try:
        timestamp = pd.Timestamp(time_value)
    except (TypeError, ValueError) as e:
        raise PeriodFormatError(str(time_value), f"Cannot parse time value: {e}") from e
    if pd.isna(timestamp):
        raise PeriodFormatError(str(time_value), "Time value is missing")
    return timestamp.normalize()


def days_to_dates(days: np.ndarray, origin: pd.Timestamp) -> np.ndarray:
    """Render day offsets as datetime64 dates."""
    offsets = pd.to_timedelta(np.asarray(days, dtype=float), unit="D")
    return (origin + offsets).values


def dates_to_days(time_value: TimeValue, origin: pd.Timestamp) -> float:
    """Express a date as a day offset from the origin."""
    return (normalize_time_value(time_value) - origin) / pd.Timedelta(days=1)

# ============================================================================
# Interval Expressions
# ============================================================================

def _parse_token(token: str, expression: str) -> pd.Period:
    match = _ISO_TOKEN.match(token)
    if not match:
        raise PeriodFormatError(expression)
    depth = sum(part is not None for part in match.groups())
    try:
        return pd.Period(token, freq=_TOKEN_FREQ[depth])
    except ValueError as e:
        raise PeriodFormatError(expression, str(e)) from e


def parse_interval(expression: str) -> Tuple[Optional[pd.Timestamp], Optional[pd.Timestamp]]:
    """
    Parse an ISO-8601 style interval expression.

    A single token names a whole year, month or day. Two tokens joined by
    "/" or "::" name everything from the start of the first to the end of the
    second; either side may be left empty for an open interval.

    Args:
        expression: e.g. "2010", "2010-03", "2010-01-01/2010-01-03", "2012::"

    Returns:
        Tuple: (first instant, last instant), None for an open end

    Raises:
        PeriodFormatError: If the expression is malformed

    Examples:
        >>> parse_interval("2010-02")
        (Timestamp('2010-02-01 00:00:00'), Timestamp('2010-02-28 23:59:59.999999999'))
    """
    text = expression.strip()
    for separator in INTERVAL_SEPARATORS:
        if separator in text:
            left, _, right = text.partition(separator)
            left, right = left.strip(), right.strip()
            start = _parse_token(left, expression).start_time if left else None
            end = _parse_token(right, expression).end_time if right else None
            break
    else:
        if not text:
            raise PeriodFormatError(expression)
        period = _parse_token(text, expression)
        start, end = period.start_time, period.end_time

    if start is not None and end is not None and start > end:
        raise PeriodFormatError(expression, "Interval start is after its end")

    return start, end

# ============================================================================
# Period Normalization
# ============================================================================

def _is_index(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def normalize_period(period: Any) -> TimeSelection:
    """
    Normalize a user supplied period into a TimeSelection.

    Accepts None (whole axis), a TimeSelection, an interval string, a single
    integer index, an integer index pair or a date pair. Parsing happens
    here so malformed periods fail before any I/O.

    Raises:
        PeriodFormatError: If the period has an unsupported form
    """
    if period is None:
        return TimeSelection()

    if isinstance(period, TimeSelection):
        selection = period
    elif isinstance(period, str):
        selection = TimeSelection(interval=period)
    elif _is_index(period):
        selection = TimeSelection(time_index_range=(int(period), int(period)))
    elif isinstance(period, (tuple, list, np.ndarray)) and len(period) == 2:
        first, second = period
        if _is_index(first) and _is_index(second):
            selection = TimeSelection(time_index_range=(int(first), int(second)))
        elif isinstance(first, numbers.Number) or isinstance(second, numbers.Number):
            raise PeriodFormatError(str(period), "Numeric periods must be a pair of integer indices")
        else:
            selection = TimeSelection(time_range=(first, second))
    else:
        raise PeriodFormatError(str(period))

    # Validate the content up front
    if selection.uses_interval_selection:
        parse_interval(selection.interval)
    elif selection.uses_time_selection:
        start, end = (normalize_time_value(v) for v in selection.time_range)
        if start > end:
            raise ParameterError("time_range", str(selection.time_range), "Start time must be <= end time")

    return selection

# ============================================================================
# Period Resolution
# ============================================================================

def is_daily_axis(time_axis: np.ndarray) -> bool:
    """Check whether consecutive time values are exactly one step apart."""
    if len(time_axis) < 2:
        return True
    return bool(np.allclose(np.diff(np.asarray(time_axis, dtype=float)), TIME_STEP))


def interval_bound(axes: AxisSet, expression: str) -> Tuple[float, float]:
    """
    Bound on the numeric time axis covering every date an interval accepts.

    The upper end is the last accepted value widened by one time step, so a
    single matching day still selects one index.

    Raises:
        EmptySelectionError: If the interval accepts no axis date
    """
    start, end = parse_interval(expression)
    dates = pd.DatetimeIndex(days_to_dates(axes.time, axes.time_origin))

    accepted = np.ones(len(dates), dtype=bool)
    if start is not None:
        accepted &= np.asarray(dates >= start)
    if end is not None:
        accepted &= np.asarray(dates <= end)

    if not accepted.any():
        axis_range = (dates[0].date(), dates[-1].date()) if len(dates) else None
        raise EmptySelectionError(TIME_DIM, (expression,), axis_range)

    if not is_daily_axis(axes.time):
        logger.warning(
            "Time axis is not daily; widening interval '%s' by %s axis unit",
            expression, TIME_STEP
        )

    selected = np.asarray(axes.time)[accepted]
    return float(selected.min()), float(selected.max()) + TIME_STEP


def resolve_time_range(axes: AxisSet, selection: TimeSelection) -> IndexRange:
    """
    Convert a time selection into an index range over the time axis.

    Args:
        axes: Dataset axes
        selection: Normalized time selection

    Returns:
        IndexRange: Selected time indices

    Raises:
        EmptySelectionError: If the selection matches no time step
    """
    if selection.uses_index_selection:
        i0, i1 = selection.time_index_range
        return check_index_range(IndexRange(start=i0, count=i1 - i0 + 1), axes.time, TIME_DIM)

    if selection.uses_time_selection:
        bound = tuple(dates_to_days(v, axes.time_origin) for v in selection.time_range)
        return compute_index_range(axes.time, bound, TIME_DIM)

    if selection.uses_interval_selection:
        return compute_index_range(axes.time, interval_bound(axes, selection.interval), TIME_DIM)

    return full_index_range(axes.time, TIME_DIM)
