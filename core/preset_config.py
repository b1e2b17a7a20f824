"""Preset input sequences.

Each preset has:
 - description: short explanation
 - values: the integer sequence to analyze
"""

from __future__ import annotations

from typing import Any, Dict, List

DEFAULT_PRESET = "exercise"

PRESETS: Dict[str, Dict[str, Any]] = {
    "exercise": {
        "description": "Sample from the original exercise (median 37, mode 19).",
        "values": [50, 38, 32, 37, 19, 19, 102],
    },
    "even": {
        "description": "Even-length input, median is not computed by default.",
        "values": [4, 2, 7, 1],
    },
    "reversed": {
        "description": "Worst case for bubble sort: strictly descending values.",
        "values": [9, 8, 7, 6, 5, 4, 3, 2, 1],
    },
    "single": {
        "description": "Single value.",
        "values": [5],
    },
}


def list_presets() -> List[str]:
    return sorted(PRESETS)


def get_preset(name: str) -> Dict[str, Any]:
    """Return a copy of a preset, with its own values list."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(list_presets())}")
    preset = PRESETS[name]
    return {"description": preset["description"], "values": list(preset["values"])}


__all__ = ["DEFAULT_PRESET", "PRESETS", "get_preset", "list_presets"]
