"""
Tests for confidence scoring and result assembly helpers.
"""

import numpy as np
import pytest

from models import NumberProbability, ScoreVector, SimulationAggregate
from steps.entropy import compute_confidence, normalized_entropy
from steps.result import format_odds, rank_combinations, rank_numbers, recommend_numbers


def _score_vector(number_max):
    zeros = np.zeros(number_max, dtype=int)
    return ScoreVector(
        number_max=number_max,
        slice_length=30,
        scores=np.linspace(0.1, 0.2, number_max),
        frequency=zeros,
        recent_frequency=zeros,
        bonus_frequency=zeros,
        gap=zeros,
    )


class TestConfidence:
    """Entropy-based confidence score."""

    def test_uniform_weights_have_zero_confidence(self):
        assert compute_confidence(np.full(45, 1 / 45)) == 0.0

    def test_single_number_has_full_confidence(self):
        weights = np.zeros(45)
        weights[0] = 1.0
        assert compute_confidence(weights) == 100.0

    def test_concentrated_beats_spread(self):
        spread = np.linspace(1.0, 1.1, 45)
        spread /= spread.sum()
        concentrated = np.array([5.0] * 6 + [1.0] * 39)
        concentrated /= concentrated.sum()
        assert compute_confidence(concentrated) > compute_confidence(spread)

    def test_rounded_to_two_decimals(self):
        weights = np.array([3.0, 2.0, 1.0] + [0.5] * 7)
        weights /= weights.sum()
        confidence = compute_confidence(weights)
        assert confidence == round(confidence, 2)
        assert 0.0 <= confidence <= 100.0

    def test_normalized_entropy_bounds(self):
        assert normalized_entropy(np.full(10, 0.1)) == pytest.approx(1.0)


class TestFormatOdds:
    """'1 / N' odds strings."""

    def test_zero_probability(self):
        assert format_odds(0.0) == "N/A"

    def test_thousands_separator(self):
        assert format_odds(0.0001) == "1 / 10,000"

    def test_rounds_half_up(self):
        # 1 / 0.4 = 2.5
        assert format_odds(0.4) == "1 / 3"

    def test_small_counts(self):
        assert format_odds(1 / 3) == "1 / 3"
        assert format_odds(1.0) == "1 / 1"


class TestRanking:
    """Ranking of numbers and combinations."""

    def test_rank_numbers_descending_and_stable(self):
        aggregate = SimulationAggregate(
            simulations=10,
            number_hits=np.array([2, 8, 2, 5] + [0] * 6),
        )
        ranked = rank_numbers(aggregate, _score_vector(10))

        assert [item.number for item in ranked[:4]] == [2, 4, 1, 3]
        assert ranked[0].probability == pytest.approx(0.8)
        # zero-hit numbers keep ascending order
        assert [item.number for item in ranked[4:]] == [5, 6, 7, 8, 9, 10]

    def test_rank_combinations_ties_keep_first_seen(self):
        aggregate = SimulationAggregate(
            simulations=100,
            number_hits=np.zeros(45, dtype=int),
            combination_hits={
                "01-02-03-04-05-06": 1,
                "07-08-09-10-11-12": 3,
                "13-14-15-16-17-18": 1,
                "19-20-21-22-23-24": 3,
            },
        )
        ranked = rank_combinations(aggregate, 3)

        assert [combo.numbers for combo in ranked] == [
            (7, 8, 9, 10, 11, 12),
            (19, 20, 21, 22, 23, 24),
            (1, 2, 3, 4, 5, 6),
        ]
        assert ranked[0].probability == pytest.approx(0.03)
        assert ranked[0].estimated_odds == "1 / 33"
        assert ranked[0].simulated_hits == 3

    def test_recommend_numbers_sorted(self):
        ranked = [
            NumberProbability(number=n, probability=p, score=0.0, frequency=0, recent_frequency=0, gap=0)
            for n, p in [(40, 0.9), (3, 0.8), (17, 0.7), (9, 0.6), (22, 0.5), (1, 0.4), (2, 0.3)]
        ]
        assert recommend_numbers(ranked) == [1, 3, 9, 17, 22, 40]
