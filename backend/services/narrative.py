"""Narrative-generation collaborator: the LLM that writes scores and resumes.

The source is resolved once from settings and injected into the pipeline.
Every call yields a tagged result; failures never raise to the caller.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Literal

from google import genai
from google.genai import types
from pydantic import BaseModel

from config import Settings

logger = logging.getLogger(__name__)


class NarrativeOk(BaseModel):
    kind: Literal["ok"] = "ok"
    value: dict


class NarrativeMalformed(BaseModel):
    """The collaborator failed or answered with something other than a JSON object."""
    kind: Literal["malformed"] = "malformed"
    raw: str = ""
    reason: str = ""


NarrativeResult = NarrativeOk | NarrativeMalformed


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_json_object(raw: str) -> NarrativeResult:
    try:
        value = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        return NarrativeMalformed(raw=raw, reason=f"invalid JSON: {e}")
    if not isinstance(value, dict):
        return NarrativeMalformed(raw=raw, reason="expected a JSON object")
    return NarrativeOk(value=value)


class NarrativeSource(ABC):
    """Produces a JSON object from a system prompt and a JSON user payload."""

    name: str = ""

    @abstractmethod
    async def generate_json(self, system_prompt: str, user_content: str) -> NarrativeResult:
        """Return the parsed object, or ``NarrativeMalformed`` on any failure."""


class GeminiNarrativeSource(NarrativeSource):
    name = "gemini"

    def __init__(self, api_key: str, model: str, timeout: float) -> None:
        self._client = genai.Client(api_key=api_key)
        self._model = model
        self._timeout = timeout

    async def generate_json(self, system_prompt: str, user_content: str) -> NarrativeResult:
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._model,
                    contents=user_content,
                    config=types.GenerateContentConfig(
                        system_instruction=system_prompt,
                        temperature=0.3,
                        max_output_tokens=4096,
                        response_mime_type="application/json",
                    ),
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.error("Gemini call timed out after %.0fs", self._timeout)
            return NarrativeMalformed(reason="timeout")
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            return NarrativeMalformed(reason=str(e))

        text = response.text or ""
        if not text.strip():
            logger.error("Gemini returned no content")
            return NarrativeMalformed(reason="empty response")

        result = parse_json_object(text)
        if isinstance(result, NarrativeMalformed):
            logger.error("Failed to parse Gemini response as JSON: %s", result.reason)
        return result


def resolve_narrative_source(settings: Settings) -> NarrativeSource | None:
    """Pick the narrative source for this process from configuration."""
    mode = settings.narrative_source
    if mode == "none":
        return None
    if not settings.gemini_api_key:
        if mode == "live":
            logger.warning("narrative_source=live but no GEMINI_API_KEY set - using fallback")
        else:
            logger.info("No GEMINI_API_KEY set - narrative generation disabled")
        return None
    return GeminiNarrativeSource(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.narrative_timeout_seconds,
    )
