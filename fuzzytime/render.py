from __future__ import annotations

import json
from typing import Any, Dict

from fuzzytime.phrase import format_fuzzy_time
from fuzzytime.time import ClockTime


def to_data(clock: ClockTime) -> Dict[str, Any]:
    """
    Convert a clock reading into a plain dict, phrase included.
    """
    if clock is None:
        raise ValueError("clock is None")

    return {
        "hour": clock.hour,
        "minute": clock.minute,
        "time": clock.hhmm(),
        "phrase": format_fuzzy_time(clock.hour, clock.minute),
    }


def render_text(data: Dict[str, Any]) -> str:
    phrase = str(data.get("phrase", "") or "").strip()
    if not phrase:
        raise ValueError("phrase is missing")
    return phrase + "\n"


def write_json(data: Dict[str, Any], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=True, indent=2, sort_keys=True)
        f.write("\n")
