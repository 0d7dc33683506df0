"""Tests for tolerance policies."""

import pytest
from tolerance import (
    average_load_policy,
    compute_tolerances,
    max_unsteady_nodes,
    total_load_policy,
)


def test_total_load_policy_scales_total():
    assert total_load_policy(200_000, 100, 0.0001) == 20


def test_total_load_policy_never_below_one():
    assert total_load_policy(500, 5, 0.0001) == 1
    assert total_load_policy(0, 5, 0.0001) == 1


def test_total_load_policy_shrinks_loose_tolerance():
    # 1000 * 0.5 == 500 is above the average of 10 per node
    assert total_load_policy(1000, 100, 0.5) == 50


def test_average_load_policy_scales_average():
    assert average_load_policy(1000, 10, 0.5) == 50
    assert average_load_policy(1000, 10, 0.001) == 1


@pytest.mark.parametrize("k,fraction,expected", [(5, 0.02, 1), (100, 0.02, 2), (1000, 0.02, 20), (10, 0.0, 1)])
def test_max_unsteady_nodes(k, fraction, expected):
    assert max_unsteady_nodes(k, fraction) == expected


def test_compute_tolerances_uses_given_policy():
    tolerances = compute_tolerances(1000, 10, 0.5, 0.02, policy=average_load_policy)
    assert tolerances.balanced_load == 50
    assert tolerances.max_unsteady_nodes == 1


def test_compute_tolerances_defaults_to_total_load_policy():
    tolerances = compute_tolerances(200_000, 100, 0.0001, 0.02)
    assert tolerances.balanced_load == 20
    assert tolerances.max_unsteady_nodes == 2


@pytest.mark.parametrize(
    "args", [(100, 0, 0.1), (100, -3, 0.1), (-1, 10, 0.1), (100, 10, -0.5)]
)
def test_policies_reject_nonsense(args):
    with pytest.raises(ValueError):
        total_load_policy(*args)
    with pytest.raises(ValueError):
        average_load_policy(*args)
