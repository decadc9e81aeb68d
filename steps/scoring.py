## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Blend Per-Number Signals Into Scores and Sampling Weights
## Description:
## - Max-normalize frequency, recent frequency and bonus frequency (hot, trend, bonus).
## - Overdue score saturates once a number has been missing for a third of the slice.
## - score = 0.50*hot + 0.26*trend + 0.16*overdue + 0.08*bonus + 0.01
##   The 0.01 floor keeps every number drawable.
## - Normalize scores to a weight vector summing to 1 (uniform if the total is not positive).
## Deterministic: no randomness in this step.

import logging
import math
from typing import Any, Sequence

import numpy as np

from config.options import (
    BONUS_WEIGHT,
    HOT_WEIGHT,
    OVERDUE_WEIGHT,
    SCORE_FLOOR,
    TREND_WEIGHT,
    clamp_number_max,
    coerce_options,
    resolve_options,
)
from models import ScoreVector, coerce_draws
from steps.frequency import count_signals
from steps.historical import ensure_enough_history, take_lookback_slice


def sequential_sum(values) -> float:
    """Plain left-to-right float sum (builtin sum() compensates on newer Pythons)."""
    total = 0.0
    for value in values:
        total += value
    return total


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def max_normalize(values) -> np.ndarray:
    """Divide by the max; a signal whose max is 0 contributes 0 everywhere."""
    values = np.asarray(values, dtype=float)
    peak = values.max() if values.size else 0.0
    if peak <= 0:
        return np.zeros_like(values)
    return values / peak


def overdue_scores(gap, slice_length: int) -> np.ndarray:
    """min(1, gap / max(1, round(slice_length / 3)))"""
    horizon = max(1, round_half_up(slice_length / 3))
    return np.minimum(1.0, np.asarray(gap, dtype=float) / horizon)


def blend_scores(frequency, recent_frequency, bonus_frequency, gap, slice_length: int) -> np.ndarray:
    hot = max_normalize(frequency)
    trend = max_normalize(recent_frequency)
    bonus = max_normalize(bonus_frequency)
    overdue = overdue_scores(gap, slice_length)

    return (
        hot * HOT_WEIGHT
        + trend * TREND_WEIGHT
        + overdue * OVERDUE_WEIGHT
        + bonus * BONUS_WEIGHT
        + SCORE_FLOOR
    )


def score_to_weights(scores) -> np.ndarray:
    """
    Normalize scores to a probability vector.
    Summed left to right, the same way the sampler totals its pool.
    """
    scores = np.asarray(scores, dtype=float)
    total = sequential_sum(scores.tolist())
    if total <= 0 or not np.isfinite(total):
        logging.warning("Score total is not positive; falling back to uniform weights.")
        return np.full(len(scores), 1.0 / len(scores))
    return scores / total


def compute_scores(draws: Sequence[Any], number_max: Any, lookback: Any, recent_window: Any) -> ScoreVector:
    """
    Score every number in [1, number_max] from the last `lookback` draws.

    Raises InsufficientDataError before any work if fewer than 30 draws are given.
    Option values are clamped exactly as the full estimator clamps them.
    """
    ensure_enough_history(draws)

    history = coerce_draws(list(draws))
    safe_number_max = clamp_number_max(number_max)
    resolved = resolve_options(
        coerce_options({"lookback": lookback, "recent_window": recent_window}), len(history)
    )
    lookback_slice = take_lookback_slice(history, resolved.lookback)
    signals = count_signals(lookback_slice, safe_number_max, resolved.recent_window)
    return _build_score_vector(signals, safe_number_max, len(lookback_slice))


def _build_score_vector(signals, number_max: int, slice_length: int) -> ScoreVector:
    scores = blend_scores(
        signals["frequency"],
        signals["recent_frequency"],
        signals["bonus_frequency"],
        signals["gap"],
        slice_length,
    )
    return ScoreVector(
        number_max=number_max,
        slice_length=slice_length,
        scores=scores,
        frequency=signals["frequency"],
        recent_frequency=signals["recent_frequency"],
        bonus_frequency=signals["bonus_frequency"],
        gap=signals["gap"],
    )


def score_numbers(pipeline):
    """
    Blends the frequency step's signals into scores and sampling weights.

    Outputs:
        pipeline["score_vector"] -> ScoreVector
        pipeline["weights"]      -> shape (number_max,), sums to 1
    """
    signals = {
        key: pipeline.require(key)
        for key in ("frequency", "recent_frequency", "bonus_frequency", "gap")
    }
    number_max = pipeline.require("number_max")
    slice_length = len(pipeline.require("lookback_slice"))

    score_vector = _build_score_vector(signals, number_max, slice_length)
    weights = score_to_weights(score_vector.scores)

    pipeline.add_data("score_vector", score_vector)
    pipeline.add_data("weights", weights)
    logging.info("Number scoring completed.")
