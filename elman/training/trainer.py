"""Training loop for the Elman next-value predictor."""

import os
import time

import numpy as np
from tqdm import tqdm

from elman.utils.csv_logger import CSVLogger


class Trainer:
    """Epoch driver with progress reporting and CSV metric logging."""

    def __init__(self, network, config, log_path=None):
        """
        Args:
            network: ElmanNetwork to train
            config: Training configuration (num_epochs, log_every, show_progress)
            log_path: Optional CSV file for per-epoch metrics
        """
        self.network = network
        self.config = config
        self.num_epochs = config.num_epochs
        self.log_every = getattr(config, 'log_every', 0)
        self.show_progress = getattr(config, 'show_progress', True)

        self.best_error = float('inf')
        self.best_epoch = 0
        self.history = []
        self.cumulative_time = 0.0

        self.csv_logger = None
        if log_path:
            self.csv_logger = CSVLogger(log_path, config)
            print(f"CSV logging enabled: {log_path}")

    def weight_norm(self):
        """Frobenius norm over all three weight matrices."""
        p = self.network.p
        return float(np.sqrt(sum(float((W * W).sum()) for W in (p.W_in, p.W_hid, p.W_out))))

    def train(self, inputs, targets):
        """
        Run config.num_epochs ordered epochs over (inputs, targets).

        Returns:
            history: Total squared error of every epoch
        """
        num_examples = len(inputs)

        # every call is a fresh run
        self.best_error = float('inf')
        self.best_epoch = 0
        self.history = []
        self.cumulative_time = 0.0

        print(f"\nStarting training for {self.num_epochs} epochs")
        print(f"Training examples: {num_examples}")
        print(f"Network: I={self.network.input_neurons}, H={self.network.hidden_neurons}, "
              f"O={self.network.output_neurons}, lr={self.network.learning_rate}")
        print()

        epochs = range(self.num_epochs)
        if self.show_progress:
            epochs = tqdm(epochs, desc="Training")

        for epoch in epochs:
            epoch_start = time.time()
            total_error = self.network.train_epoch(inputs, targets)
            epoch_time = time.time() - epoch_start
            self.cumulative_time += epoch_time
            self.history.append(total_error)

            is_best = total_error < self.best_error
            if is_best:
                self.best_error = total_error
                self.best_epoch = epoch + 1

            if self.show_progress:
                epochs.set_postfix(error=f"{total_error:.6f}")

            if self.log_every and (epoch + 1) % self.log_every == 0:
                message = (f"Epoch {epoch + 1:5d}/{self.num_epochs} | error={total_error:.6f} | "
                           f"||W||={self.weight_norm():.2f}")
                if self.show_progress:
                    tqdm.write(message)
                else:
                    print(message)

            if self.csv_logger is not None:
                self.csv_logger.log_epoch(epoch + 1, {
                    'total_error': total_error,
                    'mean_error': total_error / num_examples if num_examples else 0.0,
                    'best_error': self.best_error,
                    'is_best': is_best,
                    'learning_rate': self.network.learning_rate,
                    'input_neurons': self.network.input_neurons,
                    'hidden_neurons': self.network.hidden_neurons,
                    'output_neurons': self.network.output_neurons,
                    'num_examples': num_examples,
                    'epoch_time_seconds': epoch_time,
                    'cumulative_time_seconds': self.cumulative_time,
                })

        print(f"\nTraining complete!")
        if self.history:
            print(f"Final error: {self.history[-1]:.6f}")
            print(f"Best error: {self.best_error:.6f} (epoch {self.best_epoch})")
        return self.history

    def predict_next(self, dataset):
        """
        Predict the value following the dataset's held-out window.

        Continues the hidden-state trajectory left by training.

        Returns:
            Denormalized prediction vector
        """
        output = self.network.predict(dataset.held_out_input())
        return dataset.normalizer.denormalize(output)


def default_log_path(config):
    """Timestamped CSV path inside config.log_dir."""
    log_dir = getattr(config, 'log_dir', 'logs')
    timestamp = time.strftime('%Y%m%d_%H%M%S')
    return os.path.join(log_dir, f'training_log_{timestamp}.csv')
