## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Supported Game Definitions
## Description:
## Each supported 6-number game has its own number range and bonus rule.
## Game names typed by users are normalized and resolved through an alias table.

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

POWER_655 = "power655"
POWER_645 = "power645"
DEFAULT_GAME = POWER_655


@dataclass(frozen=True)
class GameConfig:
    game: str
    label: str
    max_number: int
    has_bonus: bool


GAME_CONFIGS: Dict[str, GameConfig] = {
    POWER_655: GameConfig(game=POWER_655, label="Power 6/55", max_number=55, has_bonus=True),
    POWER_645: GameConfig(game=POWER_645, label="Mega 6/45", max_number=45, has_bonus=False),
}

GAME_ALIASES: Dict[str, str] = {
    "655": POWER_655,
    "645": POWER_645,
    "power655": POWER_655,
    "power645": POWER_645,
    "mega645": POWER_645,
    "power6x55": POWER_655,
    "mega6x45": POWER_645,
    "six55": POWER_655,
    "six45": POWER_645,
}


def _normalize_game_value(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


def parse_game_type(value: Optional[str]) -> Optional[str]:
    """
    Resolve a user-supplied game name. Empty input means the default game;
    an unknown name returns None.
    """
    if not value:
        return DEFAULT_GAME
    return GAME_ALIASES.get(_normalize_game_value(value))


def get_game_config(game: str) -> GameConfig:
    return GAME_CONFIGS[game]


def get_all_games() -> List[str]:
    return [POWER_655, POWER_645]
