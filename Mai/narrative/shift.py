"""
Shift detection: find the most recent action that happened somewhere
materially different from where the user is now.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

from Mai.models import ActionRecord, NarrativeContext
from Mai.narrative.location import Location, location_of_action, location_of_context

log = logging.getLogger(__name__)

# Actions shorter than this are app-switch noise, not a real dwell.
MIN_DWELL_S = 5
MIN_HISTORY = 2

BRAND_NEW_MESSAGE = "Mai is brand new here — keep working and it'll start remembering your loops."


@dataclass(frozen=True)
class InsufficientHistory:
    pass


@dataclass(frozen=True)
class NoShift:
    location: Location


@dataclass(frozen=True)
class Shift:
    action: ActionRecord
    location: Location


ShiftOutcome = Union[InsufficientHistory, NoShift, Shift]


def _is_shift(action: ActionRecord, context: NarrativeContext, current: Location) -> bool:
    here = location_of_action(action)
    if here.identity != current.identity:
        return True
    ctx = context.browser_ctx
    if ctx is None or not ctx.building or action.building != ctx.building:
        return False
    return action.apartment != ctx.apartment or action.room != ctx.room


def detect_shift(context: NarrativeContext) -> ShiftOutcome:
    actions = context.recent_actions
    if len(actions) < MIN_HISTORY:
        return InsufficientHistory()

    current = location_of_context(context)
    for action in reversed(actions):
        if action.duration_s < MIN_DWELL_S:
            continue
        if _is_shift(action, context, current):
            log.debug(f"Last shift: {action.time} at {location_of_action(action).breadcrumb}")
            return Shift(action, location_of_action(action))
    return NoShift(current)


def format_seconds(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_dwell(seconds: float) -> str:
    if seconds >= 60:
        # Half rounds up: 150s is ~3 min.
        return f"~{math.floor(seconds / 60 + 0.5)} min"
    return f"~{format_seconds(seconds)}s"


def describe_history(context: NarrativeContext) -> str:
    outcome = detect_shift(context)
    if isinstance(outcome, InsufficientHistory):
        return BRAND_NEW_MESSAGE
    if isinstance(outcome, NoShift):
        return f"You've been in {outcome.location.identity} for a while."

    typed = " typing" if outcome.action.typed else ""
    dwell = format_dwell(outcome.action.duration_s)
    return f"Before this, you were {outcome.location.phrase}{typed} for {dwell}."
