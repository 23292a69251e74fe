#!/usr/bin/env python
"""
Plot the error curve from a training log CSV.

Usage:
    python scripts/plot_training_log.py                      # Most recent log in logs/
    python scripts/plot_training_log.py logs/training_log_20250101_120000.csv -o outputs/error.png
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

import argparse
from pathlib import Path

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def find_latest_log(log_dir='logs'):
    """Most recently modified training_log_*.csv in log_dir, or None."""
    log_files = list(Path(log_dir).glob('training_log_*.csv'))
    if not log_files:
        return None
    return max(log_files, key=lambda p: p.stat().st_mtime)


def summarize(df):
    """Print a short summary of a training log."""
    best = df.loc[df['total_error'].idxmin()]
    print(f"Epochs logged: {len(df)}")
    print(f"First error:   {df['total_error'].iloc[0]:.6f}")
    print(f"Final error:   {df['total_error'].iloc[-1]:.6f}")
    print(f"Best error:    {best['total_error']:.6f} (epoch {best['epoch']:.0f})")
    if 'cumulative_time_seconds' in df:
        print(f"Total time:    {df['cumulative_time_seconds'].iloc[-1]:.2f}s")


def plot_log(df, output_path):
    fig, ax = plt.subplots(1, 2, figsize=(11, 4.5))
    ax[0].plot(df['epoch'], df['total_error'])
    ax[0].set_title("Total Error per Epoch")
    ax[0].set_xlabel("Epoch"); ax[0].set_ylabel("Error")
    ax[0].set_yscale("log")
    ax[1].plot(df['epoch'], df['mean_error'])
    ax[1].set_title("Mean Error per Example")
    ax[1].set_xlabel("Epoch"); ax[1].set_ylabel("Error")
    ax[1].set_yscale("log")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot training error from a CSV log')
    parser.add_argument('log', nargs='?', default=None, help='Training log CSV (default: latest in logs/)')
    parser.add_argument('-o', '--output', default='outputs/training_log.png', help='Output PNG path')
    args = parser.parse_args(argv)

    log_path = Path(args.log) if args.log else find_latest_log()
    if log_path is None or not log_path.exists():
        print("ERROR: Training log not found!")
        print("Run: python scripts/train.py --csv")
        return 1

    print(f"Loading: {log_path}")
    df = pd.read_csv(log_path)
    if df.empty:
        print("ERROR: Training log is empty!")
        return 1
    summarize(df)

    Path(args.output).parent.mkdir(parents=True, exist_ok=True)
    plot_log(df, args.output)
    print(f"Plot saved to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
