## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Records Passed Between Estimation Steps
## Description:
## Defines the immutable draw record consumed by the engine, the intermediate
## score/simulation structures, and the PredictionResult handed back to callers.
## Per-number arrays are zero-based: index i holds the value for number i + 1.

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np
from dateutil import parser

from errors import InvalidDrawError

MAIN_NUMBER_COUNT = 6


def _parse_draw_date(date_value: Any) -> date:
    """
    Parse a draw date.

    Accepts:
        - date / datetime objects
        - strings in "%Y-%m-%d" format
        - any other string format python-dateutil understands

    Raises:
        InvalidDrawError if parsing fails.
    """
    if isinstance(date_value, datetime):
        return date_value.date()
    if isinstance(date_value, date):
        return date_value
    if date_value is None or not str(date_value).strip():
        raise InvalidDrawError("Empty/None draw date")

    date_str = str(date_value).strip()
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        pass
    try:
        return parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDrawError(f"Unparseable draw date: {date_str!r}") from e


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


@dataclass(frozen=True)
class HistoricalDraw:
    """One historical result: 6 distinct main numbers plus an optional bonus."""
    draw_id: int
    draw_date: date
    numbers: Tuple[int, ...]
    bonus: Optional[int] = None

    def __post_init__(self):
        if len(self.numbers) != MAIN_NUMBER_COUNT or len(set(self.numbers)) != MAIN_NUMBER_COUNT:
            raise InvalidDrawError(
                f"Draw {self.draw_id} must have exactly {MAIN_NUMBER_COUNT} distinct main numbers, "
                f"got {list(self.numbers)}."
            )

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "HistoricalDraw":
        """
        Build a draw from a normalized record. Both camelCase (drawId, drawDate)
        and snake_case (draw_id, draw_date) keys are accepted.
        """
        draw_id = _first_present(record, "draw_id", "drawId", "id")
        numbers = _first_present(record, "numbers")
        if draw_id is None or numbers is None:
            raise InvalidDrawError(f"Draw record is missing 'draw_id' or 'numbers': {dict(record)!r}")

        bonus = record.get("bonus")
        try:
            return cls(
                draw_id=int(draw_id),
                draw_date=_parse_draw_date(_first_present(record, "draw_date", "drawDate", "date")),
                numbers=tuple(int(n) for n in numbers),
                bonus=int(bonus) if bonus is not None else None,
            )
        except InvalidDrawError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidDrawError(f"Invalid draw record {dict(record)!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drawId": self.draw_id,
            "drawDate": self.draw_date.isoformat(),
            "numbers": list(self.numbers),
            "bonus": self.bonus,
        }


@dataclass(frozen=True, eq=False)
class ScoreVector:
    """
    Blended per-number scores and the raw signals they were built from.
    All arrays have length number_max; index i is number i + 1.
    """
    number_max: int
    slice_length: int
    scores: np.ndarray
    frequency: np.ndarray
    recent_frequency: np.ndarray
    bonus_frequency: np.ndarray
    gap: np.ndarray

    def score_of(self, number: int) -> float:
        return float(self.scores[number - 1])


@dataclass
class SimulationAggregate:
    """Hit counters accumulated across the simulation loop."""
    simulations: int
    number_hits: np.ndarray
    combination_hits: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class NumberProbability:
    number: int
    probability: float
    score: float
    frequency: int
    recent_frequency: int
    gap: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "probability": self.probability,
            "score": self.score,
            "frequency": self.frequency,
            "recentFrequency": self.recent_frequency,
            "gap": self.gap,
        }


@dataclass(frozen=True)
class CombinationProbability:
    numbers: Tuple[int, ...]
    probability: float
    estimated_odds: str
    simulated_hits: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numbers": list(self.numbers),
            "probability": self.probability,
            "estimatedOdds": self.estimated_odds,
            "simulatedHits": self.simulated_hits,
        }


@dataclass(frozen=True)
class PredictionResult:
    generated_at: str
    number_max: int
    draws_used: int
    simulations: int
    confidence_score: float
    recommended_numbers: Tuple[int, ...]
    top_combinations: Tuple[CombinationProbability, ...]
    number_probabilities: Tuple[NumberProbability, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape, relayed verbatim by outer layers."""
        return {
            "generatedAt": self.generated_at,
            "numberMax": self.number_max,
            "drawsUsed": self.draws_used,
            "simulations": self.simulations,
            "confidenceScore": self.confidence_score,
            "recommendedNumbers": list(self.recommended_numbers),
            "topCombinations": [c.to_dict() for c in self.top_combinations],
            "numberProbabilities": [n.to_dict() for n in self.number_probabilities],
        }


def coerce_draws(draws: List[Any]) -> List[HistoricalDraw]:
    """Turn a list of HistoricalDraw or mapping records into HistoricalDraws."""
    coerced = []
    for idx, draw in enumerate(draws):
        if isinstance(draw, HistoricalDraw):
            coerced.append(draw)
        elif isinstance(draw, Mapping):
            coerced.append(HistoricalDraw.from_dict(draw))
        else:
            raise InvalidDrawError(f"Unsupported draw record at index {idx}: {type(draw).__name__}")
    return coerced
