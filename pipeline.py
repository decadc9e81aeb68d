## Modified By: Callam
## Project: Lotto Estimator
## Purpose: Core Data Pipeline and Estimation Entry Point
## Description:
##   - Stores data for all estimation steps (one pipeline per request)
##   - Runs the steps in order: historical -> frequency -> scoring
##     -> monte carlo -> entropy -> result
##   - Nothing here is shared between calls

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from config.logs import configure_logging
from models import PredictionResult
from steps.entropy import shannon_entropy_features
from steps.frequency import analyze_number_frequency
from steps.historical import process_historical_data
from steps.monte_carlo import monte_carlo_simulation
from steps.result import assemble_prediction
from steps.scoring import score_numbers

configure_logging()


class DataPipeline:
    def __init__(self) -> None:
        self.data: Dict[str, Any] = {}
        logging.debug("Initialized DataPipeline.")

    def add_data(self, key: str, value: Any) -> None:
        if key is None:
            raise ValueError("Pipeline key cannot be None.")
        self.data[key] = value
        logging.debug(f"Added data under key '{key}'.")

    def get_data(self, key: str) -> Any:
        value = self.data.get(key)
        if value is not None:
            logging.debug(f"Retrieved pipeline data for key '{key}'.")
        else:
            logging.debug(f"No pipeline data for key '{key}'.")
        return value

    def require(self, key: str) -> Any:
        """Like get_data, but a missing key means a step ran out of order."""
        value = self.get_data(key)
        if value is None:
            raise RuntimeError(f"Pipeline data '{key}' missing; a previous step did not run.")
        return value


def estimate_next_draw(
    draws: Sequence[Any],
    number_max: Any,
    options: Optional[Any] = None,
    generated_at: Optional[datetime] = None,
    progress=None,
) -> PredictionResult:
    """
    Estimate per-number and per-combination probabilities for the next draw.

    Parameters:
    - draws: historical draws in ascending draw_id order (HistoricalDraw or mappings).
    - number_max: highest eligible number; clamped to [10, 99].
    - options: PredictionOptions, a mapping, or None for defaults. Values are clamped.
    - generated_at: timestamp to stamp on the result; defaults to now (UTC).
    - progress: optional callable(completed) invoked during the simulation loop.

    Raises:
    - InsufficientDataError: fewer than 30 draws supplied.
    """
    pipeline = DataPipeline()

    process_historical_data(draws, number_max, options, pipeline)
    analyze_number_frequency(pipeline)
    score_numbers(pipeline)
    monte_carlo_simulation(pipeline, progress=progress)
    shannon_entropy_features(pipeline)
    return assemble_prediction(pipeline, generated_at=generated_at)
