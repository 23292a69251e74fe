#!/usr/bin/env python
"""
Train an Elman network to predict the next Fibonacci number.

Usage:
    python scripts/train.py
    python scripts/train.py --epochs 2000 --hidden 8 --lr 0.005
    python scripts/train.py --csv --plot   # Log metrics to logs/ and save a loss curve
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

import argparse
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from config.elman_config import ElmanConfig
from elman.data.sequence import SequenceGenerator, ScaleNormalizer
from elman.data.dataset import SequenceWindowDataset
from elman.models.elman import ElmanNetwork
from elman.training.trainer import Trainer, default_log_path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Train Elman next-value predictor')
    parser.add_argument('--epochs', type=int, default=None, help='Number of epochs')
    parser.add_argument('--hidden', type=int, default=None, help='Hidden layer width')
    parser.add_argument('--lr', type=float, default=None, help='Learning rate')
    parser.add_argument('--window', type=int, default=None, help='Sliding window size (input width)')
    parser.add_argument('--start', type=int, default=None, help='First Fibonacci index')
    parser.add_argument('--end', type=int, default=None, help='Last Fibonacci index')
    parser.add_argument('--seed', type=int, default=None, help='Weight initialization seed')
    parser.add_argument('--log-every', type=int, default=None, help='Print error every N epochs')
    parser.add_argument('--csv', action='store_true', help='Write per-epoch metrics to a CSV log')
    parser.add_argument('--plot', action='store_true', help='Save a loss curve PNG to the output directory')
    parser.add_argument('--no-progress', action='store_true', help='Disable the progress bar')
    return parser.parse_args(argv)


def build_config(args):
    """ElmanConfig with command-line overrides applied."""
    config = ElmanConfig()
    overrides = {
        'num_epochs': args.epochs,
        'hidden_neurons': args.hidden,
        'learning_rate': args.lr,
        'window_size': args.window,
        'start_index': args.start,
        'end_index': args.end,
        'seed': args.seed,
        'log_every': args.log_every,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.no_progress:
        config.show_progress = False
    return config


def plot_history(history, path):
    fig, ax = plt.subplots(figsize=(7, 4.5))
    ax.plot(range(1, len(history) + 1), history)
    ax.set_title("Training Error (sum of squares per epoch)")
    ax.set_xlabel("Epoch"); ax.set_ylabel("Error")
    ax.set_yscale("log")
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close(fig)


def main(argv=None):
    """Main training function."""
    args = parse_args(argv)
    config = build_config(args)

    print("=" * 60)
    print("Elman Network: Next-Value Prediction")
    print("=" * 60)
    print()

    generator = SequenceGenerator()
    sequence = generator.generate_fibonacci_by_indices(config.start_index, config.end_index)
    dataset = SequenceWindowDataset(sequence, config.window_size, ScaleNormalizer(config.scale))
    print(f"Sequence: indices {config.start_index}..{config.end_index}, {len(sequence)} values")
    print(f"Window size: {config.window_size}, examples: {len(dataset)}, scale: {config.scale}")

    network = ElmanNetwork(
        config.window_size,
        config.hidden_neurons,
        config.output_neurons,
        config.learning_rate,
        seed=config.seed,
    )

    log_path = default_log_path(config) if args.csv else None
    trainer = Trainer(network, config, log_path=log_path)
    history = trainer.train(dataset.inputs, dataset.targets)

    prediction = trainer.predict_next(dataset)

    print()
    print("Original sequence:", sequence)
    print("Prediction:", prediction[0])

    if args.plot:
        os.makedirs(config.output_dir, exist_ok=True)
        plot_path = os.path.join(config.output_dir, 'training_error.png')
        plot_history(history, plot_path)
        print(f"Loss curve saved to {plot_path}")

    return prediction


if __name__ == '__main__':
    main()
