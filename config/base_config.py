"""Base configuration shared by all training runs."""

class BaseConfig:
    """Shared configuration across all runs."""

    # Reproducibility
    seed = 0               # None: fresh random weights every run

    # Reporting
    log_every = 100        # Print epoch error every N epochs (0 disables)
    show_progress = True   # tqdm progress bar over epochs

    # Paths
    log_dir = "logs"
    output_dir = "outputs"
