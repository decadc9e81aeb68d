## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Main Program Execution
## Description:
## Entry point for the Lotto Estimator. Loads a normalized draw history file,
## runs the estimation pipeline for the chosen game, prints the result summary,
## and optionally writes the full result as JSON.

# -*- coding: utf-8 -*-

import argparse
import logging
import sys

from config.games import get_all_games, get_game_config, parse_game_type
from config.options import (
    DEFAULT_LOOKBACK,
    DEFAULT_RECENT_WINDOW,
    DEFAULT_SIMULATIONS,
    DEFAULT_TOP_COMBINATIONS,
    PredictionOptions,
)
from data_io import load_draws, save_prediction
from errors import InsufficientDataError
from pipeline import estimate_next_draw


# ============================================================
# Utility Functions
# ============================================================
def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate next-draw number and combination probabilities from draw history."
    )
    parser.add_argument("draws_file", help="JSON array or JSON Lines file of normalized draws")
    parser.add_argument("--game", default=None,
                        help=f"Game name or alias ({', '.join(get_all_games())}); default power655")
    parser.add_argument("--number-max", type=int, default=None,
                        help="Override the game's highest number")
    parser.add_argument("--lookback", type=int, default=DEFAULT_LOOKBACK)
    parser.add_argument("--simulations", type=int, default=DEFAULT_SIMULATIONS)
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_COMBINATIONS)
    parser.add_argument("--recent-window", type=int, default=DEFAULT_RECENT_WINDOW)
    parser.add_argument("--output", default=None, help="Write the full result JSON here")
    return parser


def print_result(result, label):
    """Display the headline figures of a prediction."""
    print(f"\n--- {label} Estimate ---")
    print(f"Draws used: {result.draws_used} | Simulations: {result.simulations} | "
          f"Confidence: {result.confidence_score:.2f}")
    print(f"Recommended: {list(result.recommended_numbers)}")

    print("\n--- Top Combinations ---")
    for idx, combo in enumerate(result.top_combinations, 1):
        print(f"{idx:2d}. {list(combo.numbers)} | Hits: {combo.simulated_hits} | "
              f"Odds: {combo.estimated_odds}")

    print("\n--- Number Probabilities ---")
    print("Number | Probability | Score  | Freq | Recent | Gap")
    for item in result.number_probabilities:
        print(f"{item.number:6d} | {item.probability:11.4f} | {item.score:.4f} | "
              f"{item.frequency:4d} | {item.recent_frequency:6d} | {item.gap:3d}")


# ============================================================
# Main Program
# ============================================================
def main(argv=None):
    args = build_parser().parse_args(argv)

    game = parse_game_type(args.game)
    if game is None:
        print(f"Invalid game '{args.game}'. Use one of: {', '.join(get_all_games())}.")
        return 2
    game_config = get_game_config(game)
    number_max = args.number_max if args.number_max is not None else game_config.max_number

    try:
        draws = load_draws(args.draws_file)
    except (OSError, ValueError) as e:
        logging.error(f"Could not load draws: {e}")
        return 1

    options = PredictionOptions(
        lookback=args.lookback,
        simulations=args.simulations,
        top_combinations=args.top,
        recent_window=args.recent_window,
    )

    try:
        result = estimate_next_draw(draws, number_max, options)
    except InsufficientDataError as e:
        logging.error(f"Not enough {game_config.label} history: {e}")
        return 1

    print_result(result, game_config.label)
    if args.output:
        save_prediction(result, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
