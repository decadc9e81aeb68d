"""
Tests for draw file loading, result saving and the command line entry point.
"""

import json
import logging

import pytest

from data_io import load_draws, save_prediction
from main import main
from pipeline import estimate_next_draw


def _records(draws):
    return [draw.to_dict() for draw in draws]


class TestLoadDraws:
    """Loading normalized draw records."""

    def test_json_array(self, tmp_path, mixed_draws):
        path = tmp_path / "draws.json"
        path.write_text(json.dumps(_records(mixed_draws)))

        loaded = load_draws(str(path))
        assert loaded == mixed_draws

    def test_json_lines_sorted_by_id(self, tmp_path, mixed_draws):
        path = tmp_path / "draws.jsonl"
        lines = [json.dumps(record) for record in reversed(_records(mixed_draws))]
        path.write_text("\n".join(lines) + "\n\n")

        loaded = load_draws(str(path))
        assert [draw.draw_id for draw in loaded] == [draw.draw_id for draw in mixed_draws]

    def test_invalid_records_are_skipped(self, tmp_path, caplog):
        records = [
            {"drawId": 1, "drawDate": "2025-01-01", "numbers": [1, 2, 3, 4, 5, 6]},
            {"drawId": 2, "drawDate": "2025-01-02", "numbers": [1, 2, 3]},
            "not an object",
            {"drawId": 3, "drawDate": "2025-01-03", "numbers": [7, 8, 9, 10, 11, 12], "bonus": 13},
        ]
        path = tmp_path / "draws.json"
        path.write_text(json.dumps(records))

        with caplog.at_level(logging.WARNING):
            loaded = load_draws(str(path))

        assert [draw.draw_id for draw in loaded] == [1, 3]
        assert "index 1" in caplog.text
        assert "index 2" in caplog.text

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("")
        assert load_draws(str(path)) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_draws(str(tmp_path / "nope.json"))

    def test_broken_json_lines(self, tmp_path):
        path = tmp_path / "draws.jsonl"
        path.write_text('{"drawId": 1}\n{broken\n')
        with pytest.raises(ValueError):
            load_draws(str(path))


class TestSavePrediction:
    """Writing results to disk."""

    def test_writes_wire_shape(self, tmp_path, mixed_draws):
        result = estimate_next_draw(mixed_draws, 45, {"simulations": 1000})
        path = tmp_path / "prediction.json"

        save_prediction(result, str(path))

        payload = json.loads(path.read_text())
        assert payload == json.loads(json.dumps(result.to_dict()))
        assert payload["recommendedNumbers"] == list(result.recommended_numbers)


class TestMain:
    """Command line entry point."""

    def test_runs_and_writes_output(self, tmp_path, mixed_draws, capsys):
        draws_path = tmp_path / "draws.json"
        draws_path.write_text(json.dumps(_records(mixed_draws)))
        output_path = tmp_path / "out.json"

        code = main([str(draws_path), "--game", "645", "--simulations", "1000", "--top", "3",
                     "--output", str(output_path)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Mega 6/45 Estimate" in out
        assert "Recommended:" in out
        payload = json.loads(output_path.read_text())
        assert payload["numberMax"] == 45
        assert len(payload["topCombinations"]) == 3

    def test_invalid_game(self, tmp_path, capsys):
        code = main([str(tmp_path / "draws.json"), "--game", "keno"])
        assert code == 2
        assert "Invalid game" in capsys.readouterr().out

    def test_not_enough_history(self, tmp_path, mixed_draws):
        draws_path = tmp_path / "draws.json"
        draws_path.write_text(json.dumps(_records(mixed_draws[:10])))
        assert main([str(draws_path), "--simulations", "1000"]) == 1

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1
