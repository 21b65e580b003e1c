from __future__ import annotations

import logging
from typing import Optional

from Mai.config import Settings
from Mai.exceptions import GenerationError
from Mai.generation.gemini import GeminiClient
from Mai.models import NarrativeContext, NarrativeResult, PromptPayload
from Mai.narrative import build_prompt_payload, compile_narrative, enforce_shape

log = logging.getLogger(__name__)


class HPFGenerator:
    """
    Produces H/P/F for a context, remotely when enabled and locally otherwise.

    Whatever the generator returns is forced into shape before it leaves here;
    any remote failure falls back to the local narrative engine.
    """

    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None):
        self.settings = settings
        self.client = client or GeminiClient(settings)

    def local(self, context: NarrativeContext) -> NarrativeResult:
        return compile_narrative(context)

    def remote(self, payload: PromptPayload) -> NarrativeResult:
        data = self.client.generate_json(payload.system_prompt, payload.user_prompt)
        return enforce_shape(data)

    def generate(self, context: NarrativeContext) -> NarrativeResult:
        if not self.settings.remote_enabled:
            return self.local(context)

        payload = build_prompt_payload(context)
        try:
            result = self.remote(payload)
        except GenerationError as e:
            log.error(f"Remote H/P/F failed, using local engine: {e}")
            return self.local(context)
        log.info(f"H/P/F generated via {self.settings.model_name}")
        return result
