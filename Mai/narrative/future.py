"""
Forecast the user's next steps.

Declared loop knowledge wins over statistical predictions. Predictions are
de-duplicated by substring containment against entries already accepted, so
"Next: Accounts" suppresses a later "Usually: Accounts".
"""

from __future__ import annotations

import logging
from typing import List

from Mai.models import LoopPosition, NarrativeContext
from Mai.narrative.steps import format_step

log = logging.getLogger(__name__)

MAX_STEPS = 3
ENCOURAGEMENT = (
    "Mai is still mapping your loops — keep working",
    "The more you use it, the sharper it gets",
)


def _loop_steps(loop: LoopPosition) -> List[str]:
    if not loop.next_step:
        return []
    steps = [f"Next: {format_step(loop.next_step)}"]
    if loop.steps_left >= 2:
        idx = loop.current_index + 2
        after_next = loop.steps[idx] if idx < len(loop.steps) else None
        if after_next:
            steps.append(f"Then: {format_step(after_next)}")
    return steps


def plan_future(context: NarrativeContext) -> List[str]:
    steps: List[str] = []
    if context.loop_position is not None:
        steps.extend(_loop_steps(context.loop_position))

    for pred in context.predictions:
        if len(steps) >= MAX_STEPS:
            break
        if not pred.to_step:
            continue
        formatted = format_step(pred.to_step)
        if not any(formatted in s for s in steps):
            steps.append(f"Usually: {formatted}")

    if not steps:
        steps.extend(ENCOURAGEMENT)

    log.debug(f"Forecast: {steps}")
    return steps[:MAX_STEPS]
