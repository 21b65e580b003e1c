from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    # Collector payloads arrive camelCase; Python code uses snake_case.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ActionRecord(_Frozen):
    """
    A single observed action in the user's recent history.
    """
    time: str = Field("", description="Display timestamp, e.g. '14:02'")
    category: Optional[str] = Field(None, description="Flat label used when no nested location")
    app: Optional[str] = Field(None, description="Application name, fallback flat label")
    building: Optional[str] = Field(None, description="Top tier: the app/environment")
    apartment: Optional[str] = Field(None, description="Record within the building")
    room: Optional[str] = Field(None, description="Section within the building")
    duration_s: float = Field(0, ge=0, description="Dwell time in seconds")
    typed: bool = Field(False, description="User entered text during this action")

    @model_validator(mode="after")
    def check_has_label(self):
        if not (self.building or self.category or self.app):
            raise ValueError("An action needs at least one of building, category or app.")
        return self


class BrowserContext(_Frozen):
    building: Optional[str] = None
    apartment: Optional[str] = None
    room: Optional[str] = None


class LoopPosition(_Frozen):
    signature: str
    times_seen: int = Field(1, ge=1, alias="timesSeen")
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    current_step: Optional[str] = Field(None, alias="currentStep")
    next_step: Optional[str] = Field(None, alias="nextStep", description="None means end of loop")
    steps_left: int = Field(0, ge=0, alias="stepsLeft")
    steps: List[str] = Field(default_factory=list)
    current_index: int = Field(0, ge=0, alias="currentIndex")


class Prediction(_Frozen):
    to_step: str
    times_seen: int = Field(1, ge=1)


class TimeOfDay(_Frozen):
    hour: int = Field(..., ge=0, le=23)
    day_name: str = Field(..., alias="dayName")


class NarrativeContext(_Frozen):
    """
    Everything the narrative engine needs for one invocation.

    `recent_actions` is chronological (oldest first) and `predictions` is
    already ranked by the caller (most likely first).
    """
    current_app: str = Field("", alias="currentApp")
    browser_ctx: Optional[BrowserContext] = Field(None, alias="browserCtx")
    recent_actions: List[ActionRecord] = Field(default_factory=list, alias="recentActions")
    loop_position: Optional[LoopPosition] = Field(None, alias="loopPosition")
    predictions: List[Prediction] = Field(default_factory=list)
    rare_loops: List[Dict[str, Any]] = Field(default_factory=list, alias="rareLoops")
    time_of_day: Optional[TimeOfDay] = Field(None, alias="timeOfDay")


class NarrativeResult(_Frozen):
    H: str = Field(..., description="Look-back at the last context shift")
    P: str = Field(..., description="Where the user is right now")
    F: List[str] = Field(..., description="2-3 next steps")


class PromptPayload(_Frozen):
    """What the remote path hands to a text generator."""
    system_prompt: str
    user_prompt: str
    rare_loops: List[Dict[str, Any]] = Field(default_factory=list)
