## Modified By: Callam Josef Jackson-Sem
## Project: Lotto Estimator
## Purpose of File: To Prepare Historical Lottery Draw Data
## Description:
## This file handles the first step of the pipeline: preparing historical lottery draw data.
## It coerces the records supplied by the caller, enforces the minimum amount of history,
## clamps the request options, and cuts the lookback slice that every later step works on.

import logging
from typing import Any, List, Sequence

from config.options import (
    MIN_HISTORY_DRAWS,
    clamp_number_max,
    coerce_options,
    resolve_options,
)
from errors import InsufficientDataError
from models import HistoricalDraw, coerce_draws


def ensure_enough_history(draws: Sequence[Any]) -> None:
    """Raise InsufficientDataError unless at least MIN_HISTORY_DRAWS draws are present."""
    if len(draws) < MIN_HISTORY_DRAWS:
        raise InsufficientDataError(MIN_HISTORY_DRAWS, len(draws))


def take_lookback_slice(draws: Sequence[HistoricalDraw], lookback: int) -> List[HistoricalDraw]:
    """The last `lookback` draws, or all of them if fewer exist."""
    return list(draws[-lookback:])


def verify_draw_order(draws: Sequence[HistoricalDraw]) -> bool:
    """Check that draws arrive in ascending draw_id order. Only logs; never fails."""
    ids = [draw.draw_id for draw in draws]
    if all(a < b for a, b in zip(ids, ids[1:])):
        return True
    logging.warning("Historical draws are not in strictly ascending draw_id order.")
    return False


def process_historical_data(draws, number_max, options, pipeline):
    """
    Prepares historical draws and request parameters and stores them in the pipeline.

    Parameters:
    - draws (sequence): HistoricalDraw objects or normalized mappings, oldest first.
    - number_max (int): Highest eligible number; clamped to [10, 99].
    - options (PredictionOptions | dict | None): Request options; clamped, never rejected.
    - pipeline (DataPipeline): Per-request data store shared by the steps.

    Raises:
    - InsufficientDataError: fewer than 30 draws were supplied. Checked before anything else.

    Stores:
        pipeline["number_max"]      -> clamped domain bound
        pipeline["options"]         -> clamped PredictionOptions
        pipeline["lookback_slice"]  -> last `lookback` draws
    """
    ensure_enough_history(draws)

    historical_data = coerce_draws(list(draws))
    verify_draw_order(historical_data)

    safe_number_max = clamp_number_max(number_max)
    resolved = resolve_options(coerce_options(options), len(historical_data))
    lookback_slice = take_lookback_slice(historical_data, resolved.lookback)

    pipeline.add_data("number_max", safe_number_max)
    pipeline.add_data("options", resolved)
    pipeline.add_data("lookback_slice", lookback_slice)

    logging.info(
        f"Prepared {len(lookback_slice)} of {len(historical_data)} historical draws "
        f"(numbers 1-{safe_number_max}, recent window {resolved.recent_window})."
    )

