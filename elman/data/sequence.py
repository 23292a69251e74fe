"""Sequence generation and sliding-window pair construction."""

from typing import List, Sequence, Tuple

import numpy as np


class SequenceGenerator:
    """Generates integer sequences by index range."""

    def generate_fibonacci_by_indices(self, start_index, end_index):
        """
        Fibonacci numbers F(start_index) .. F(end_index), both inclusive.

        Args:
            start_index: First index to return (F(0) = 0, F(1) = 1)
            end_index: Last index to return

        Returns:
            List of Python ints

        Raises:
            ValueError: If an index is negative or start_index > end_index
        """
        if start_index < 0 or end_index < 0:
            raise ValueError("Indices must be non-negative.")
        if start_index > end_index:
            raise ValueError("Start index cannot be greater than end index.")

        numbers = []
        a, b = 0, 1
        for i in range(end_index + 1):
            if i >= start_index:
                numbers.append(a)
            a, b = b, a + b
        return numbers


def sliding_windows(sequence: Sequence[float], window_size: int) -> Tuple[List[List[float]], List[List[float]]]:
    """
    Split a sequence into (window, next value) pairs.

    Windows start at every index i with i + window_size < len(sequence),
    so the last window_size values never form an input of their own.

    Returns:
        inputs: [sequence[i:i+W], ...]
        targets: [[sequence[i+W]], ...]
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")

    inputs, targets = [], []
    for i in range(len(sequence) - window_size):
        inputs.append(list(sequence[i:i + window_size]))
        targets.append([sequence[i + window_size]])
    return inputs, targets


def last_window(sequence: Sequence[float], window_size: int) -> List[float]:
    """The final window_size values, i.e. the input whose successor is unknown."""
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")
    if len(sequence) < window_size:
        raise ValueError(f"Sequence of length {len(sequence)} is shorter than window_size={window_size}")
    return list(sequence[-window_size:])


class ScaleNormalizer:
    """Maps values into network range by a fixed scale factor."""

    def __init__(self, scale=100.0):
        if scale == 0:
            raise ValueError("scale must be non-zero")
        self.scale = float(scale)

    def normalize(self, values):
        return np.asarray(values, dtype=float) / self.scale

    def denormalize(self, values):
        return np.asarray(values, dtype=float) * self.scale
