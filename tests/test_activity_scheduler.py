"""Tests for next-node selection and rescheduling."""

import random

import pytest
from activity_scheduler import next_to_act, reschedule
from generators import fixed_generator, uniform_generator


def test_picks_smallest_activity_time(ring_factory):
    ring = ring_factory([0] * 5, times=[500, 400, 100, 300, 200])
    assert next_to_act(ring, 0) == 2


def test_current_node_is_not_a_candidate(ring_factory):
    ring = ring_factory([0] * 4, times=[50, 400, 300, 200])
    assert next_to_act(ring, 0) == 3


def test_ties_go_to_first_node_after_current(ring_factory):
    ring = ring_factory([0] * 6, times=[900, 300, 200, 900, 200, 200])

    assert next_to_act(ring, 0) == 2
    assert next_to_act(ring, 3) == 4
    # scan from 5 wraps around: 0, 1, 2, 3, 4
    assert next_to_act(ring, 5) == 2


def test_single_node_ring_acts_again(ring_factory):
    ring = ring_factory([10], times=[100])
    assert next_to_act(ring, 0) == 0


def test_two_node_ring_alternates(ring_factory):
    ring = ring_factory([0, 0], times=[100, 999])
    assert next_to_act(ring, 0) == 1
    assert next_to_act(ring, 1) == 0


def test_reschedule_strictly_increases(ring_factory):
    ring = ring_factory([0, 0, 0])
    draw = uniform_generator(random.Random(5), 100, 1000)
    node = ring[0]

    previous = node.next_activity_time
    for _ in range(100):
        new_time = reschedule(node, draw)
        assert new_time == node.next_activity_time
        assert 100 <= new_time - previous <= 1000
        previous = new_time


def test_reschedule_rejects_non_positive_interval(ring_factory):
    ring = ring_factory([0, 0, 0])
    with pytest.raises(ValueError):
        reschedule(ring[0], fixed_generator(0))


def test_early_short_timer_acts_twice_before_slow_node(ring_factory):
    ring = ring_factory([0, 0, 0], times=[100, 120, 5000])
    draw = fixed_generator(30)

    order = []
    current = 0
    for _ in range(4):
        order.append(current)
        reschedule(ring[current], draw)
        current = next_to_act(ring, current)

    assert 2 not in order
