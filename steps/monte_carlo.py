## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Perform Monte Carlo Simulations of Full 6-Number Draws
## Description:
##   Draws `simulations` independent combinations of 6 distinct numbers, weighted by the
##   scoring step's weight vector, using a seeded 32-bit xorshift generator.
##   The seed is derived from the latest draw id, the simulation count and the lookback,
##   so the same request over the same history always reproduces the same output.
##   Aggregates per-number hits and per-combination hits for the result step.

import logging
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from config.logs import SimulationLogger
from config.options import (
    NUMBER_MIN,
    PICK_COUNT,
    SEED_DRAW_MULTIPLIER,
    SEED_LOOKBACK_MULTIPLIER,
    SEED_SIMULATION_MULTIPLIER,
)
from models import SimulationAggregate
from steps.scoring import sequential_sum

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 0x100000000
# xorshift never leaves state 0
ZERO_SEED_REPLACEMENT = 0x9E3779B9
PROGRESS_INTERVAL = 10000


class XorShift32:
    """
    Marsaglia xorshift32 (13, 17, 5). State is an explicit 32-bit unsigned int.
    """

    def __init__(self, seed: int) -> None:
        state = seed & UINT32_MASK
        self.state = state if state != 0 else ZERO_SEED_REPLACEMENT

    def next(self) -> int:
        x = self.state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self.state = x
        return x

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next() / UINT32_RANGE


def derive_seed(latest_draw_id: int, simulations: int, lookback: int) -> int:
    seed = (
        latest_draw_id * SEED_DRAW_MULTIPLIER
        + simulations * SEED_SIMULATION_MULTIPLIER
        + lookback * SEED_LOOKBACK_MULTIPLIER
    )
    return seed & UINT32_MASK


def combo_key(numbers: Sequence[int]) -> str:
    """Combination signature, e.g. [1, 7, 12, 23, 34, 45] -> '01-07-12-23-34-45'."""
    return "-".join(f"{n:02d}" for n in numbers)


def parse_combo_key(key: str) -> List[int]:
    return [int(part) for part in key.split("-")]


def sample_combination(weights: Sequence[float], number_max: int, rng: XorShift32) -> List[int]:
    """
    One simulated draw: PICK_COUNT distinct numbers, weighted, without replacement.

    The pool keeps ascending number order after every removal, so the scan order
    (and the last-entry fallback when rounding leaves the marker positive) is fixed.
    """
    pool_numbers = list(range(NUMBER_MIN, number_max + 1))
    pool_weights = list(weights)
    picked = []

    for _ in range(PICK_COUNT):
        total_weight = sequential_sum(pool_weights)
        marker = rng.next_float() * total_weight
        selected = len(pool_weights) - 1

        for i, weight in enumerate(pool_weights):
            marker -= weight
            if marker <= 0:
                selected = i
                break

        picked.append(pool_numbers[selected])
        del pool_numbers[selected]
        del pool_weights[selected]

    return sorted(picked)


def simulate(
    weights,
    number_max: int,
    simulations: int,
    seed: int,
    progress: Optional[Callable[[int], None]] = None,
    progress_interval: int = PROGRESS_INTERVAL,
) -> SimulationAggregate:
    """
    Run `simulations` weighted draws and count hits.

    Returns a SimulationAggregate with:
    - number_hits: int array, shape (number_max,), index i = number i + 1
    - combination_hits: {signature: hits}, in first-seen order
    """
    weight_list = [float(w) for w in np.asarray(weights, dtype=float)]
    if len(weight_list) != number_max:
        raise ValueError(f"Expected {number_max} weights, got {len(weight_list)}.")

    rng = XorShift32(seed)
    number_hits = [0] * number_max
    combination_hits: Dict[str, int] = {}

    for index in range(simulations):
        sampled = sample_combination(weight_list, number_max, rng)
        for n in sampled:
            number_hits[n - NUMBER_MIN] += 1

        key = combo_key(sampled)
        combination_hits[key] = combination_hits.get(key, 0) + 1

        if progress is not None and (index + 1) % progress_interval == 0:
            progress(index + 1)

    return SimulationAggregate(
        simulations=simulations,
        number_hits=np.asarray(number_hits, dtype=int),
        combination_hits=combination_hits,
    )


def monte_carlo_simulation(pipeline, progress=None):
    """
    Runs the seeded Monte Carlo simulation over the scoring step's weights.
    Stores pipeline["simulation"] (SimulationAggregate).
    """
    weights = pipeline.require("weights")
    number_max = pipeline.require("number_max")
    options = pipeline.require("options")
    lookback_slice = pipeline.require("lookback_slice")

    seed = derive_seed(lookback_slice[-1].draw_id, options.simulations, options.lookback)
    if progress is None:
        progress = SimulationLogger(options.simulations, interval=PROGRESS_INTERVAL)

    aggregate = simulate(weights, number_max, options.simulations, seed, progress=progress)

    pipeline.add_data("simulation", aggregate)
    logging.info(
        f"Monte Carlo simulation completed with {options.simulations} simulations (seed {seed}, "
        f"{len(aggregate.combination_hits)} distinct combinations)."
    )
