import json
import math
from datetime import date

from lifeatlas.data_model import DebtStrategy
from lifeatlas.engine.longevity import compute_percentiles
from lifeatlas.engine.stress import score_month
from lifeatlas.serialization import _sanitize_json_compat, save_series, to_payload, to_records


def test_sanitize_json_compat_replaces_special_numbers():
    payload = {
        "float": math.nan,
        "list": [1, float("inf"), -float("inf")],
        "nested": {"value": math.nan},
    }

    clean = _sanitize_json_compat(payload)

    assert clean == {
        "float": None,
        "list": [1, None, None],
        "nested": {"value": None},
    }


def test_sanitize_json_compat_flattens_enums_dates_and_tuples():
    clean = _sanitize_json_compat({"strategy": DebtStrategy.AVALANCHE, "when": date(2024, 5, 1), "pair": (65, 1200)})

    assert clean == {"strategy": "avalanche", "when": "2024-05-01", "pair": [65, 1200]}


def test_to_records_accepts_dataclasses_and_dicts():
    rows = to_records([score_month("2024-01", [], None), {"value": float("nan"), "other": 5}])

    assert rows[0]["month"] == "2024-01"
    assert rows[0]["composite"] == 0
    assert rows[1] == {"value": None, "other": 5}


def test_to_payload_for_single_results():
    payload = to_payload(compute_percentiles(65, "male"))

    assert set(payload) == {"p25", "p50", "p75", "p90"}
    assert to_payload([1.5, math.inf]) == [1.5, None]


def test_save_series_persists_sanitized_values(tmp_path):
    path = tmp_path / "out" / "series.json"
    data = {"stress": [score_month("2024-01", [], None)], "extra": [{"value": math.nan, "items": [1, float("inf")]}]}

    save_series(str(path), data)

    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)

    assert stored["extra"] == [{"value": None, "items": [1, None]}]
    assert stored["stress"][0]["month"] == "2024-01"
    assert not (tmp_path / "out" / "series.json.tmp").exists()
