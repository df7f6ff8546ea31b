import numpy as np
import pytest

from eobs_reader.coordinates.indexing import (
    check_index_range,
    compute_index_range,
    full_index_range,
    spatial_bound,
)
from eobs_reader.core.core_types import IndexRange
from eobs_reader.core.exceptions import EmptySelectionError


def test_latitude_example():
    axis = np.array([40.0, 41.0, 42.0, 43.0])
    selected = compute_index_range(axis, (41, 43), "latitude")
    assert selected == IndexRange(start=1, count=2)
    assert axis[selected.to_slice()].tolist() == [41.0, 42.0]


def test_lower_bound_included_upper_bound_excluded():
    axis = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
    selected = compute_index_range(axis, (0.25, 0.75), "longitude")
    assert (selected.start, selected.count, selected.stop) == (1, 2, 3)


def test_bound_between_axis_values():
    axis = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
    selected = compute_index_range(axis, (0.1, 0.6), "longitude")
    assert selected == IndexRange(start=1, count=2)


@pytest.mark.parametrize("bound", [(-5.0, -1.0), (10.0, 20.0), (1.1, 1.2), (2.0, 2.0)])
def test_empty_selection(bound):
    with pytest.raises(EmptySelectionError) as excinfo:
        compute_index_range(np.arange(5.0), bound, "latitude")
    assert excinfo.value.dimension == "latitude"


def test_matches_brute_force_membership():
    rng = np.random.default_rng(42)
    for _ in range(200):
        axis = np.unique(np.round(rng.uniform(-10, 10, size=rng.integers(1, 30)), 1))
        lower, upper = np.sort(np.round(rng.uniform(-12, 12, size=2), 1))
        expected = np.flatnonzero((axis >= lower) & (axis < upper))

        if expected.size == 0:
            with pytest.raises(EmptySelectionError):
                compute_index_range(axis, (lower, upper), "x")
            continue

        selected = compute_index_range(axis, (lower, upper), "x")
        assert np.arange(selected.start, selected.stop).tolist() == expected.tolist()


def test_spatial_bound_orders_values():
    assert spatial_bound((6.0, 4.0)) == (4.0, 6.0)


def test_full_index_range():
    assert full_index_range(np.arange(7.0), "time") == IndexRange(start=0, count=7)


def test_check_index_range_clips_to_axis():
    axis = np.arange(5.0)
    assert check_index_range(IndexRange(3, 10), axis, "time") == IndexRange(start=3, count=2)


def test_check_index_range_outside_axis():
    with pytest.raises(EmptySelectionError):
        check_index_range(IndexRange(8, 2), np.arange(5.0), "time")
