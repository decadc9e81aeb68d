## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Logging Setup and Simulation Progress Logging
## Description:
## Central log format for the estimator, plus a progress callback the Monte Carlo
## step calls at fixed intervals so long simulation runs report how far they got.
## Each run is tagged with a run_date string for grouping log lines.

import logging
from datetime import datetime

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level=logging.INFO):
    """Configure root logging once with the project format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


class SimulationLogger:
    """
    Progress callback for the Monte Carlo loop.
    Called after every `interval` simulated draws with the count completed so far.
    """

    def __init__(self, total, interval=10000, level=logging.DEBUG):
        """
        Parameters:
        - total (int): Number of simulations the run will perform.
        - interval (int): How many simulations between progress lines.
        - level (int): Logging level used for progress lines.
        """
        if interval <= 0:
            raise ValueError("Progress interval must be positive.")
        self.run_date = get_run_date()
        self.total = total
        self.interval = interval
        self.level = level
        self.checkpoints = 0

    def __call__(self, completed):
        self.checkpoints += 1
        percent = 100.0 * completed / self.total if self.total else 100.0
        logging.log(
            self.level,
            f"[{self.run_date}] Monte Carlo progress: {completed}/{self.total} ({percent:.1f}%)",
        )


def get_run_date():
    """
    Utility to fetch the current run_date string (for grouping log lines).
    """
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")
