from __future__ import annotations

from itertools import islice

from Mai.models import NarrativeContext
from Mai.narrative.location import NestedLocation, flat_label, location_of_context

TYPING_WINDOW = 5


def is_typing_here(context: NarrativeContext) -> bool:
    """True if any of the last few actions in the current location involved typing."""
    current = location_of_context(context)
    for action in islice(reversed(context.recent_actions), TYPING_WINDOW):
        if not action.typed:
            continue
        if isinstance(current, NestedLocation):
            if action.building == current.building:
                return True
        elif flat_label(action) == context.current_app:
            return True
    return False


def describe_presence(context: NarrativeContext) -> str:
    where = location_of_context(context).breadcrumb
    ending = " — actively typing." if is_typing_here(context) else "."
    return f"You're in {where}{ending}"
