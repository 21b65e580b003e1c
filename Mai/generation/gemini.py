"""
Gemini client for remote H/P/F generation.

Sends the system and user prompts built by the narrative compiler and
returns the model's JSON object, retrying with exponential backoff.
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any, Dict, Optional

from google import genai
from google.genai import types as genai_types

from Mai.config import Settings
from Mai.exceptions import GenerationError

log = logging.getLogger(__name__)


class GeminiClient:
    """Thin wrapper around google-genai's generate_content for JSON output."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        """Lazy initialization of the Gemini client."""
        if self._client is None:
            api_key = self.settings.gemini_api_key or os.getenv("GEMINI_API_KEY")
            if not api_key:
                raise GenerationError("GEMINI_API_KEY not set.")
            self._client = genai.Client(api_key=api_key)
            log.info(f"Gemini client initialized with model target: {self.settings.model_name}")
        return self._client

    def generate_json(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        client = self._get_client()
        config = genai_types.GenerateContentConfig(
            system_instruction=system_prompt,
            response_mime_type="application/json",
            temperature=self.settings.llm_temperature,
            max_output_tokens=self.settings.llm_max_output_tokens,
        )

        retries = max(1, self.settings.llm_retries)
        raw_text: Optional[str] = None
        for attempt in range(retries):
            try:
                log.debug(f"Attempt {attempt+1}/{retries} to call Gemini.")
                response = client.models.generate_content(
                    model=self.settings.model_name,
                    contents=user_prompt,
                    config=config,
                )
            except Exception as e:
                log.warning(f"Gemini API error on attempt {attempt+1}/{retries}: {type(e).__name__} - {e}")
                if attempt + 1 == retries:
                    raise GenerationError(f"Gemini call failed after {retries} attempts: {e}") from e
                time.sleep((2 ** attempt) * self.settings.llm_retry_delay_base_s)
                continue

            feedback = getattr(response, "prompt_feedback", None)
            if feedback is not None and feedback.block_reason:
                raise GenerationError(f"Prompt was blocked by Gemini. Reason: {feedback.block_reason}")
            raw_text = response.text
            break

        if not raw_text:
            raise GenerationError("Gemini returned an empty response.")
        try:
            data = json.loads(raw_text)
        except json.JSONDecodeError as e:
            log.error(f"Problematic JSON string snippet: {raw_text[:500]}...")
            raise GenerationError(f"Gemini response is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise GenerationError(f"Expected a JSON object, got {type(data).__name__}.")
        return data
