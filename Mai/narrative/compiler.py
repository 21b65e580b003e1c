"""
Narrative compiler for Mai.

Builds the local H/P/F result and renders the same facts as a prompt for an
external generator, so both paths describe the user's context identically.
"""

from __future__ import annotations

from typing import List

from Mai.models import (
    ActionRecord,
    LoopPosition,
    NarrativeContext,
    NarrativeResult,
    Prediction,
    PromptPayload,
)
from Mai.narrative.future import plan_future
from Mai.narrative.location import location_of_action, location_of_context
from Mai.narrative.presence import describe_presence
from Mai.narrative.shape import enforce_shape
from Mai.narrative.shift import describe_history, format_seconds
from Mai.prompts import HPF_SYSTEM_PROMPT, HPF_USER_PROMPT


def compile_narrative(context: NarrativeContext) -> NarrativeResult:
    return enforce_shape({
        "H": describe_history(context),
        "P": describe_presence(context),
        "F": plan_future(context),
    })


# --- Prompt rendering ---

def _action_line(action: ActionRecord) -> str:
    where = location_of_action(action).breadcrumb
    typed = " [typed]" if action.typed else ""
    return f"{action.time} — {where} {format_seconds(action.duration_s)}s{typed}"


def _loop_text(loop: LoopPosition | None) -> str:
    if loop is None:
        return "Not in a recognized loop yet."
    return "\n".join([
        f'Loop: "{loop.signature}"',
        f"Seen {loop.times_seen}x | Confidence: {loop.confidence:.2f}",
        f"Here: {loop.current_step or 'unknown'}",
        f"Next: {loop.next_step or 'end'}",
    ])


def _predictions_text(predictions: List[Prediction]) -> str:
    if not predictions:
        return "No predictions yet."
    return "\n".join(f"{p.to_step} (seen {p.times_seen}x)" for p in predictions)


def build_user_prompt(context: NarrativeContext) -> str:
    tod = context.time_of_day
    time_line = f"{tod.hour}:00 on {tod.day_name}" if tod is not None else "unknown"
    actions_text = (
        "\n".join(_action_line(a) for a in context.recent_actions)
        if context.recent_actions else "No recent actions."
    )
    return HPF_USER_PROMPT.format(
        time_line=time_line,
        current_where=location_of_context(context).breadcrumb,
        actions_text=actions_text,
        loop_text=_loop_text(context.loop_position),
        predictions_text=_predictions_text(context.predictions),
    )


def build_prompt_payload(context: NarrativeContext) -> PromptPayload:
    return PromptPayload(
        system_prompt=HPF_SYSTEM_PROMPT,
        user_prompt=build_user_prompt(context),
        rare_loops=list(context.rare_loops),
    )
