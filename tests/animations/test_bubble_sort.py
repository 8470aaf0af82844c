"""
Tests for the bubble sort step sequencer
"""

import pytest

from animations.bubble_sort import StepSequencer, generate_steps, comparison_count, swap_count
from models.enums import StepKind


def test_worked_example():
    steps = StepSequencer.generate([5, 3, 8], 1000)

    assert [s.kind for s in steps] == [
        StepKind.COMPARE, StepKind.SWAP, StepKind.COMPARE, StepKind.COMPARE, StepKind.COMPLETE,
    ]
    assert [s.indices for s in steps] == [(0, 1), (0, 1), (1, 2), (0, 1), ()]
    assert [s.array for s in steps] == [
        (5, 3, 8), (3, 5, 8), (3, 5, 8), (3, 5, 8), (3, 5, 8),
    ]
    assert [s.description for s in steps] == [
        "Comparing 5 and 3",
        "Swapping 5 and 3",
        "Comparing 5 and 8",
        "Comparing 3 and 5",
        "Sorting complete!",
    ]
    assert [s.delay for s in steps] == [0, 1000, 2000, 3000, 4000]


def test_step_ids_are_ordinal():
    steps = StepSequencer.generate([4, 1, 3, 2])

    assert [s.id for s in steps] == list(range(len(steps)))
    assert steps[0].key == "step-0"
    assert len({s.key for s in steps}) == len(steps)


def test_step_to_dict():
    step = StepSequencer.generate([5, 3], 250)[1]

    assert step.to_dict() == {
        "id": "step-1",
        "type": "swap",
        "indices": [0, 1],
        "array": [3, 5],
        "description": "Swapping 5 and 3",
        "delay": 250,
    }


@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_inputs_only_complete(values):
    steps = StepSequencer.generate(values)

    assert len(steps) == 1
    assert steps[0].is_complete
    assert steps[0].array == tuple(values)
    assert steps[0].delay == 0


def test_input_not_mutated():
    values = [9, 1, 5]
    StepSequencer.generate(values)
    assert values == [9, 1, 5]


def test_reverse_sorted():
    steps = StepSequencer.generate([3, 2, 1], 100)

    assert len(steps) == 7
    assert comparison_count(steps) == 3
    assert swap_count(steps) == 3
    assert steps[1].description == "Swapping 3 and 2"
    assert steps[-1].array == (1, 2, 3)
    assert steps[-1].delay == 600


def test_equal_values_never_swap():
    steps = StepSequencer.generate([2, 2, 1])

    assert swap_count(steps) == 2
    for step in steps:
        if step.kind == StepKind.SWAP:
            i, j = step.indices
            assert step.array[i] != step.array[j]
    assert steps[-1].array == (1, 2, 2)


@pytest.mark.parametrize("values", [
    [64, 34, 25, 12, 22, 11, 90],
    [1, 2, 3, 4],
    [-5, 0, 5, -10],
    [3, 3, 3],
])
def test_trace_invariants(values):
    steps = StepSequencer.generate(values, 300)
    n = len(values)

    # Every pass compares each adjacent pair still unsorted
    assert comparison_count(steps) == n * (n - 1) // 2
    assert len(steps) == comparison_count(steps) + swap_count(steps) + 1

    assert [s.kind for s in steps].count(StepKind.COMPLETE) == 1
    assert steps[-1].is_complete
    assert list(steps[-1].array) == sorted(values)

    for k, step in enumerate(steps):
        assert step.delay == k * 300
        assert sorted(step.array) == sorted(values)
        if step.kind != StepKind.COMPLETE:
            i, j = step.indices
            assert j == i + 1

    for prev, step in zip(steps, steps[1:]):
        if step.kind == StepKind.SWAP:
            i, j = step.indices
            assert step.array[i] == prev.array[j]
            assert step.array[j] == prev.array[i]
            assert prev.array[i] > prev.array[j]


def test_zero_speed_gives_zero_delays():
    steps = StepSequencer.generate([2, 1], 0)
    assert all(s.delay == 0 for s in steps)


def test_negative_speed_clamped_to_zero():
    steps = StepSequencer.generate([2, 1], -250)

    assert [s.delay for s in steps] == [0, 0, 0]
    assert steps[-1].array == (1, 2)


def test_summary():
    steps = generate_steps([5, 3, 8], 500)

    assert StepSequencer.summary(steps) == {
        "total_steps": 5,
        "comparisons": 3,
        "swaps": 1,
        "duration_ms": 2000,
    }


def test_summary_of_empty_list():
    assert StepSequencer.summary([])["duration_ms"] == 0
