#!/usr/bin/env python
"""
Test sequence generation, sliding windows and normalization.

Usage:
    python tests/test_sequence.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np

from elman.data.sequence import SequenceGenerator, ScaleNormalizer, sliding_windows, last_window
from elman.data.dataset import SequenceWindowDataset


def test_fibonacci_by_indices():
    generator = SequenceGenerator()
    assert generator.generate_fibonacci_by_indices(0, 10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]
    assert generator.generate_fibonacci_by_indices(0, 0) == [0]
    assert generator.generate_fibonacci_by_indices(1, 1) == [1]
    assert generator.generate_fibonacci_by_indices(3, 6) == [2, 3, 5, 8]
    assert generator.generate_fibonacci_by_indices(50, 50) == [12586269025]
    print("✓ Fibonacci ranges")


def test_fibonacci_invalid_indices():
    generator = SequenceGenerator()
    cases = [
        ((5, 2), "Start index cannot be greater than end index."),
        ((-1, 3), "Indices must be non-negative."),
        ((3, -1), "Indices must be non-negative."),
        ((-4, -2), "Indices must be non-negative."),
    ]
    for (start, end), message in cases:
        try:
            generator.generate_fibonacci_by_indices(start, end)
            assert False, f"({start}, {end}) should fail"
        except ValueError as e:
            assert str(e) == message
            print(f"✓ ({start}, {end}): {e}")


def test_sliding_windows():
    sequence = SequenceGenerator().generate_fibonacci_by_indices(0, 10)
    inputs, targets = sliding_windows(sequence, 3)

    assert len(inputs) == len(targets) == 8
    assert inputs[0] == [0, 1, 1] and targets[0] == [2]
    assert inputs[-1] == [13, 21, 34] and targets[-1] == [55]
    # the last window ends one value before the end of the sequence
    assert inputs[6] == [8, 13, 21] and targets[6] == [34]
    assert last_window(sequence, 3) == [21, 34, 55]


def test_sliding_windows_edge_cases():
    assert sliding_windows([1, 2, 3], 3) == ([], [])
    assert sliding_windows([1, 2], 3) == ([], [])
    assert sliding_windows([1, 2, 3], 1) == ([[1], [2]], [[2], [3]])

    for bad in (0, -2):
        try:
            sliding_windows([1, 2, 3], bad)
            assert False, f"window_size={bad} should fail"
        except ValueError:
            pass

    try:
        last_window([1, 2], 3)
        assert False, "window longer than sequence should fail"
    except ValueError:
        pass


def test_normalizer():
    normalizer = ScaleNormalizer(100)
    assert np.allclose(normalizer.normalize([8, 13, 21]), [0.08, 0.13, 0.21])
    assert np.allclose(normalizer.denormalize([0.34]), [34.0])
    assert np.allclose(normalizer.denormalize(normalizer.normalize([55])), [55.0])

    try:
        ScaleNormalizer(0)
        assert False, "zero scale should fail"
    except ValueError:
        pass


def test_dataset():
    sequence = SequenceGenerator().generate_fibonacci_by_indices(0, 10)
    dataset = SequenceWindowDataset(sequence, 3)

    assert len(dataset) == 8
    assert dataset.inputs.shape == (8, 3)
    assert dataset.targets.shape == (8, 1)

    x, target = dataset[7]
    assert np.allclose(x, [0.13, 0.21, 0.34])
    assert np.allclose(target, [0.55])

    x, target = dataset[6]
    assert np.allclose(x, [0.08, 0.13, 0.21])
    assert np.allclose(target, [0.34])
    assert np.allclose(dataset.held_out_input(), [0.21, 0.34, 0.55])


def test_dataset_custom_scale_and_empty():
    dataset = SequenceWindowDataset([2, 4, 6, 8], 2, ScaleNormalizer(2))
    assert np.allclose(dataset.inputs, [[1, 2], [2, 3]])
    assert np.allclose(dataset.targets, [[3], [4]])

    empty = SequenceWindowDataset([1, 2, 3], 3)
    assert len(empty) == 0
    assert empty.inputs.shape == (0, 3)
    assert empty.targets.shape == (0, 1)


def run_all_tests():
    test_fibonacci_by_indices()
    test_fibonacci_invalid_indices()
    test_sliding_windows()
    test_sliding_windows_edge_cases()
    test_normalizer()
    test_dataset()
    test_dataset_custom_scale_and_empty()
    print("\n✅ Sequence tests passed!")


if __name__ == "__main__":
    run_all_tests()
