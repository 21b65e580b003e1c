from __future__ import annotations

from typing import Any, Mapping

from Mai.models import NarrativeResult

DEFAULT_HISTORY = "No history available."
DEFAULT_PRESENT = "Present unknown."
FILLER_STEP = "Keep going"
MIN_FORECAST = 2
MAX_FORECAST = 3


def enforce_shape(raw: Mapping[str, Any]) -> NarrativeResult:
    """
    Coerce generator output into a valid result: non-empty H and P,
    and an F list of 2-3 strings.
    """
    history = raw.get("H") or DEFAULT_HISTORY
    present = raw.get("P") or DEFAULT_PRESENT
    forecast = raw.get("F")
    if not isinstance(forecast, list):
        forecast = [str(forecast or FILLER_STEP)]
    forecast = [str(step) for step in forecast[:MAX_FORECAST]]
    while len(forecast) < MIN_FORECAST:
        forecast.append(FILLER_STEP)
    return NarrativeResult(H=str(history), P=str(present), F=forecast)
