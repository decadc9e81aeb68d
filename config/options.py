## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Estimator Tunables and Option Clamping
## Description:
## Holds the bounds, defaults and blend weights used by the estimation steps.
## Every numeric option is clamped into its range instead of being rejected,
## so a bad value never fails a request; it saturates to the nearest bound.

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

NUMBER_MIN = 1
PICK_COUNT = 6
MIN_HISTORY_DRAWS = 30

NUMBER_MAX_BOUNDS = (10, 99)
LOOKBACK_BOUNDS = (30, 2500)
SIMULATION_BOUNDS = (1000, 120000)
TOP_COMBINATION_BOUNDS = (1, 30)
RECENT_WINDOW_MIN = 10

DEFAULT_LOOKBACK = 300
DEFAULT_SIMULATIONS = 25000
DEFAULT_TOP_COMBINATIONS = 10
DEFAULT_RECENT_WINDOW = 45

# Blend weights for the per-number score
HOT_WEIGHT = 0.50
TREND_WEIGHT = 0.26
OVERDUE_WEIGHT = 0.16
BONUS_WEIGHT = 0.08
SCORE_FLOOR = 0.01

# Seed mixing constants
SEED_DRAW_MULTIPLIER = 9973
SEED_SIMULATION_MULTIPLIER = 11
SEED_LOOKBACK_MULTIPLIER = 3


@dataclass(frozen=True)
class PredictionOptions:
    """Request-level knobs. Raw values are kept until resolve_options() clamps them."""
    lookback: Any = DEFAULT_LOOKBACK
    simulations: Any = DEFAULT_SIMULATIONS
    top_combinations: Any = DEFAULT_TOP_COMBINATIONS
    recent_window: Any = DEFAULT_RECENT_WINDOW


_OPTION_ALIASES = {
    "lookback": ("lookback",),
    "simulations": ("simulations",),
    "top_combinations": ("top_combinations", "topCombinations", "top"),
    "recent_window": ("recent_window", "recentWindow"),
}


def clamp_int(value: Any, minimum: int, maximum: int) -> int:
    """
    Floor a value to an int and clamp it into [minimum, maximum].
    Anything non-numeric or non-finite collapses to the minimum.
    Ints are clamped as-is, since float() overflows past ~1e308.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return max(minimum, min(maximum, value))
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return minimum
    if not math.isfinite(number):
        return minimum
    return max(minimum, min(maximum, math.floor(number)))


def clamp_number_max(value: Any) -> int:
    return clamp_int(value, *NUMBER_MAX_BOUNDS)


def coerce_options(options: Optional[Any]) -> PredictionOptions:
    """
    Accepts PredictionOptions, a mapping with camelCase or snake_case keys,
    or None. Missing keys take the defaults. Values are NOT clamped here.
    """
    if options is None:
        return PredictionOptions()
    if isinstance(options, PredictionOptions):
        return options
    if not isinstance(options, Mapping):
        raise TypeError(f"Unsupported options type: {type(options).__name__}")

    values = {}
    for field, aliases in _OPTION_ALIASES.items():
        for alias in aliases:
            if alias in options:
                values[field] = options[alias]
                break
    return PredictionOptions(**values)


def resolve_options(options: PredictionOptions, available_draws: int) -> PredictionOptions:
    """
    Clamp every option into range. recent_window depends on the lookback
    slice length, which is min(lookback, available_draws).
    """
    lookback = clamp_int(options.lookback, *LOOKBACK_BOUNDS)
    slice_length = min(lookback, available_draws)
    return PredictionOptions(
        lookback=lookback,
        simulations=clamp_int(options.simulations, *SIMULATION_BOUNDS),
        top_combinations=clamp_int(options.top_combinations, *TOP_COMBINATION_BOUNDS),
        recent_window=clamp_int(
            options.recent_window, RECENT_WINDOW_MIN, max(RECENT_WINDOW_MIN, slice_length)
        ),
    )
