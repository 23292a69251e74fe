"""
Sliding-window dataset over a numeric sequence.

Holds normalized (input, target) pairs in sequence order plus the held-out
last window used for next-value prediction.
"""

import numpy as np

from elman.data.sequence import ScaleNormalizer, sliding_windows, last_window


class SequenceWindowDataset:
    """Ordered (window, next value) pairs, normalized."""

    def __init__(self, sequence, window_size, normalizer=None):
        """
        Args:
            sequence: Ordered numeric sequence
            window_size: Input width (number of prior values per example)
            normalizer: ScaleNormalizer (default: scale 100)
        """
        self.sequence = list(sequence)
        self.window_size = window_size
        self.normalizer = normalizer if normalizer is not None else ScaleNormalizer()

        raw_inputs, raw_targets = sliding_windows(self.sequence, window_size)
        self.raw_inputs = raw_inputs
        self.raw_targets = raw_targets

        # (N, W) and (N, 1); reshape keeps the widths when N == 0
        self.inputs = self.normalizer.normalize(raw_inputs).reshape(-1, window_size)
        self.targets = self.normalizer.normalize(raw_targets).reshape(-1, 1)

    def __len__(self):
        return len(self.raw_inputs)

    def __getitem__(self, idx):
        """Returns the normalized (input, target) pair at idx."""
        return self.inputs[idx], self.targets[idx]

    def held_out_input(self):
        """Normalized last window of the sequence."""
        return self.normalizer.normalize(last_window(self.sequence, self.window_size))
