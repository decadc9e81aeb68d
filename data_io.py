## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Manage Input/Output for Draw History and Prediction Results
## Description:
## This file loads normalized historical draw records (a JSON array or JSON Lines file)
## and saves PredictionResult objects as JSON. It sits outside the estimation engine,
## which never touches files itself.

import json  # For JSON read/write operations
import logging  # For logging events and errors
import os  # For checking file existence
from typing import Any, Dict, List

from errors import InvalidDrawError
from models import HistoricalDraw, PredictionResult


def _read_records(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    stripped = text.lstrip()
    if not stripped:
        return []
    if stripped.startswith("["):
        data = json.loads(stripped)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of draws in '{path}'.")
        return data

    # JSON Lines
    records = []
    for line_no, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {line_no} of '{path}': {e}") from e
    return records


def load_draws(path: str) -> List[HistoricalDraw]:
    """
    Loads normalized draw records from `path`, sorted by draw_id ascending.

    Expected record structure:
        {"drawId": int, "drawDate": "YYYY-MM-DD", "numbers": [int x 6], "bonus": int | null}
    snake_case keys (draw_id, draw_date) are accepted as well.

    Records that cannot be coerced are skipped with a warning.

    Raises:
    - FileNotFoundError: the file does not exist.
    - ValueError: the file is not valid JSON / JSON Lines.
    """
    if not os.path.exists(path):
        logging.error(f"Draw file '{path}' not found.")
        raise FileNotFoundError(path)

    draws = []
    for idx, record in enumerate(_read_records(path)):
        if not isinstance(record, dict):
            logging.warning(f"Skipping draw record at index {idx}: Expected an object.")
            continue
        try:
            draws.append(HistoricalDraw.from_dict(record))
        except InvalidDrawError as e:
            logging.warning(f"Skipping draw record at index {idx}: {e}")

    draws.sort(key=lambda draw: draw.draw_id)
    logging.info(f"Loaded {len(draws)} historical draws from '{path}'.")
    return draws


def save_prediction(result: PredictionResult, path: str) -> None:
    """Writes the prediction's wire shape to `path` as indented JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, indent=2)
    logging.info(f"Saved prediction to '{path}'.")
