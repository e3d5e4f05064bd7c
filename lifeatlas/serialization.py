# serialization.py
import json
import math
import os
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Sequence


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_sanitize_json_compat(item) for item in value]
    return value


def to_records(items: Sequence[Any]) -> List[Dict[str, Any]]:
    """Turn a derived series (dataclasses or dicts) into JSON-safe dict rows."""
    rows: List[Dict[str, Any]] = []
    for item in items:
        row = asdict(item) if is_dataclass(item) else dict(item)
        rows.append(_sanitize_json_compat(row))
    return rows


def to_payload(result: Any) -> Any:
    """JSON-safe form of any single engine result (dataclass, list or scalar)."""
    if is_dataclass(result):
        return _sanitize_json_compat(asdict(result))
    return _sanitize_json_compat(result)


def ensure_output_dir(path: str) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def save_series(path: str, series: Dict[str, Sequence[Any]]) -> None:
    """Write named series for the rendering side, atomically."""
    ensure_output_dir(path)
    tmp_path = f"{path}.tmp"
    clean = {name: to_records(items) for name, items in series.items()}
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(clean, f, allow_nan=False)
    os.replace(tmp_path, path)
