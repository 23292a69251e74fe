"""Elman network configurations."""

from .base_config import BaseConfig


class ElmanConfig(BaseConfig):
    """Configuration for next-value prediction on the Fibonacci sequence."""

    # Data
    start_index = 0
    end_index = 10
    window_size = 3        # Input width (I)
    scale = 100.0          # Values are divided by this before training

    # Model architecture
    hidden_neurons = 5     # Hidden width (H)
    output_neurons = 1     # Output width (O)

    # Training
    learning_rate = 0.01
    num_epochs = 1000
