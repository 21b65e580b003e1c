"""
Location resolution for the building / apartment / room hierarchy.

Every other narrative component works off the two derived outputs here:
`identity` (used for equality checks) and `breadcrumb` (used for display).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from Mai.models import ActionRecord, NarrativeContext

BREADCRUMB_SEPARATOR = " › "


@dataclass(frozen=True)
class FlatLocation:
    """An app or category with no nested detail."""
    label: str

    @property
    def identity(self) -> str:
        return self.label

    @property
    def breadcrumb(self) -> str:
        return self.label

    @property
    def phrase(self) -> str:
        return f"in {self.label}"


@dataclass(frozen=True)
class NestedLocation:
    """A building with optional room and apartment tiers."""
    building: str
    room: Optional[str] = None
    apartment: Optional[str] = None

    @property
    def identity(self) -> str:
        return self.building

    @property
    def breadcrumb(self) -> str:
        # Room is displayed before apartment.
        parts = [p for p in (self.building, self.room, self.apartment) if p]
        return BREADCRUMB_SEPARATOR.join(parts)

    @property
    def phrase(self) -> str:
        if self.apartment and self.room:
            return f"in {self.apartment}'s {self.room} in {self.building}"
        if self.apartment:
            return f"in {self.apartment} in {self.building}"
        if self.room:
            return f"in {self.room} in {self.building}"
        return f"in {self.building}"


Location = Union[FlatLocation, NestedLocation]


def flat_label(action: ActionRecord) -> str:
    return action.category or action.app or ""


def location_of_action(action: ActionRecord) -> Location:
    if action.building:
        return NestedLocation(action.building, room=action.room, apartment=action.apartment)
    return FlatLocation(flat_label(action))


def location_of_context(context: NarrativeContext) -> Location:
    ctx = context.browser_ctx
    if ctx is not None and ctx.building:
        return NestedLocation(ctx.building, room=ctx.room, apartment=ctx.apartment)
    return FlatLocation(context.current_app)
