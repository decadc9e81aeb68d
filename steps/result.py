## Modified By: Callam
## Project: Lotto Estimator
## Purpose: Assemble the PredictionResult from the simulation output
## Notes:
##   - Per-number probability = hits / simulations, ranked high to low
##   - Top combinations ranked by simulated hits, with "1 / N" odds
##   - Recommended numbers are the 6 best individual numbers, sorted ascending.
##     They are a marginal pick and need not match any simulated combination.

import logging
from datetime import datetime, timezone
from typing import List, Optional

from config.options import NUMBER_MIN, PICK_COUNT
from models import (
    CombinationProbability,
    NumberProbability,
    PredictionResult,
    ScoreVector,
    SimulationAggregate,
)
from steps.monte_carlo import parse_combo_key
from steps.scoring import round_half_up


def format_odds(probability: float) -> str:
    """'1 / 1,234' style odds; 'N/A' when the probability is 0."""
    if probability <= 0:
        return "N/A"
    one_in = round_half_up(1 / probability)
    return f"1 / {one_in:,}"


def rank_numbers(aggregate: SimulationAggregate, score_vector: ScoreVector) -> List[NumberProbability]:
    """Every eligible number with its probability and signals, highest probability first."""
    numbers = [
        NumberProbability(
            number=offset + NUMBER_MIN,
            probability=int(aggregate.number_hits[offset]) / aggregate.simulations,
            score=float(score_vector.scores[offset]),
            frequency=int(score_vector.frequency[offset]),
            recent_frequency=int(score_vector.recent_frequency[offset]),
            gap=int(score_vector.gap[offset]),
        )
        for offset in range(score_vector.number_max)
    ]
    # stable: equal probabilities stay in ascending number order
    return sorted(numbers, key=lambda item: item.probability, reverse=True)


def rank_combinations(aggregate: SimulationAggregate, top_combinations: int) -> List[CombinationProbability]:
    """Most-hit combinations first; ties keep the order they were first simulated."""
    ranked = sorted(aggregate.combination_hits.items(), key=lambda item: item[1], reverse=True)

    result = []
    for key, hits in ranked[:top_combinations]:
        probability = hits / aggregate.simulations
        result.append(
            CombinationProbability(
                numbers=tuple(parse_combo_key(key)),
                probability=probability,
                estimated_odds=format_odds(probability),
                simulated_hits=hits,
            )
        )
    return result


def recommend_numbers(number_probabilities: List[NumberProbability]) -> List[int]:
    return sorted(item.number for item in number_probabilities[:PICK_COUNT])


def assemble_prediction(pipeline, generated_at: Optional[datetime] = None) -> PredictionResult:
    """
    Build the PredictionResult from pipeline["simulation"], ["score_vector"],
    ["confidence_score"], ["options"] and ["lookback_slice"].
    """
    aggregate = pipeline.require("simulation")
    score_vector = pipeline.require("score_vector")
    options = pipeline.require("options")

    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    number_probabilities = rank_numbers(aggregate, score_vector)
    top_combinations = rank_combinations(aggregate, options.top_combinations)

    result = PredictionResult(
        generated_at=generated_at.isoformat(),
        number_max=pipeline.require("number_max"),
        draws_used=len(pipeline.require("lookback_slice")),
        simulations=aggregate.simulations,
        confidence_score=pipeline.require("confidence_score"),
        recommended_numbers=tuple(recommend_numbers(number_probabilities)),
        top_combinations=tuple(top_combinations),
        number_probabilities=tuple(number_probabilities),
    )
    logging.info(f"Prediction assembled. Recommended numbers: {list(result.recommended_numbers)}")
    return result
