## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: To Count Per-Number Signals Over the Lookback Slice
## Description:
## Counts, for every number 1..number_max, how often it was drawn in the lookback slice,
## how often in the recent sub-window, how often it was the bonus, and how many draws
## have passed since it last appeared. Out-of-range values are ignored and logged.
## Stores "frequency", "recent_frequency", "bonus_frequency" and "gap" (each shape
## (number_max,), index i = number i + 1) in the pipeline.

import logging
from typing import Any, Dict, Sequence

import numpy as np

from config.options import NUMBER_MIN
from models import HistoricalDraw


def count_signals(
    lookback_slice: Sequence[HistoricalDraw],
    number_max: int,
    recent_window: int,
) -> Dict[str, np.ndarray]:
    """
    Raw signals over the slice. Returns int arrays keyed by
    "frequency", "recent_frequency", "bonus_frequency", "gap".
    """
    slice_length = len(lookback_slice)
    recent_start = slice_length - recent_window

    frequency = np.zeros(number_max, dtype=int)
    recent_frequency = np.zeros(number_max, dtype=int)
    bonus_frequency = np.zeros(number_max, dtype=int)
    last_seen = np.full(number_max, -1, dtype=int)

    invalid_main = set()
    invalid_bonus = set()

    for draw_index, draw in enumerate(lookback_slice):
        is_recent = draw_index >= recent_start

        for n in draw.numbers:
            if not (NUMBER_MIN <= n <= number_max):
                invalid_main.add(n)
                continue
            frequency[n - 1] += 1
            last_seen[n - 1] = draw_index
            if is_recent:
                recent_frequency[n - 1] += 1

        if draw.bonus is not None:
            if NUMBER_MIN <= draw.bonus <= number_max:
                bonus_frequency[draw.bonus - 1] += 1
            else:
                invalid_bonus.add(draw.bonus)

    if invalid_main:
        logging.warning("Invalid main numbers ignored: %s", sorted(invalid_main))
    if invalid_bonus:
        logging.warning("Invalid bonus numbers ignored: %s", sorted(invalid_bonus))

    # Never seen -> full slice length; otherwise draws since last appearance
    gap = np.where(last_seen == -1, slice_length, np.maximum(0, slice_length - 1 - last_seen))

    return {
        "frequency": frequency,
        "recent_frequency": recent_frequency,
        "bonus_frequency": bonus_frequency,
        "gap": gap.astype(int),
    }


def analyze_number_frequency(pipeline: Any) -> None:
    """
    Computes frequency, recent frequency, bonus frequency and gap for the lookback slice.

    Outputs:
        pipeline["frequency"]         -> shape (number_max,)
        pipeline["recent_frequency"]  -> shape (number_max,)
        pipeline["bonus_frequency"]   -> shape (number_max,)
        pipeline["gap"]               -> shape (number_max,)
    """
    lookback_slice = pipeline.require("lookback_slice")
    number_max = pipeline.require("number_max")
    options = pipeline.require("options")

    signals = count_signals(lookback_slice, number_max, options.recent_window)
    for key, values in signals.items():
        pipeline.add_data(key, values)

    logging.info("Number frequency analysis completed.")
