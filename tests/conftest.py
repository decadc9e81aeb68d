"""
Shared fixtures for the estimator tests.
"""

from datetime import date, timedelta

import pytest

from models import HistoricalDraw


def build_draws(rows, start_id=1, bonuses=None):
    """HistoricalDraws with consecutive ids and daily dates from 2024-01-01."""
    draws = []
    for idx, numbers in enumerate(rows):
        bonus = bonuses[idx] if bonuses is not None else None
        draws.append(
            HistoricalDraw(
                draw_id=start_id + idx,
                draw_date=date(2024, 1, 1) + timedelta(days=idx),
                numbers=tuple(numbers),
                bonus=bonus,
            )
        )
    return draws


@pytest.fixture
def make_draws():
    return build_draws


@pytest.fixture
def repeated_draws():
    """30 draws that all contain exactly 1..6."""
    return build_draws([[1, 2, 3, 4, 5, 6]] * 30)


@pytest.fixture
def uniform_draws():
    """
    55 draws over 1..55 where every number appears exactly 6 times,
    rotating through the range so no number clusters near the end.
    """
    rows = [[(6 * i + k) % 55 + 1 for k in range(6)] for i in range(55)]
    return build_draws(rows)


@pytest.fixture
def mixed_draws():
    """40 draws with a fixed but irregular pattern over 1..45, with bonus numbers."""
    rows = []
    bonuses = []
    for i in range(40):
        picked = []
        candidate = (i * 7) % 45 + 1
        while len(picked) < 6:
            if candidate not in picked:
                picked.append(candidate)
            candidate = (candidate + 11 + i % 3) % 45 + 1
        rows.append(sorted(picked))
        bonuses.append((i * 13) % 45 + 1)
    return build_draws(rows, start_id=1001, bonuses=bonuses)
