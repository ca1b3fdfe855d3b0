"""
Gemini gateway.

Forwards a prompt plus a persona's system instruction to Gemini and returns
the text completion untouched. One attempt per call, bounded by a timeout.

Failure policy (shared by every caller):
  - Missing / empty prompt   -> PromptRequiredError, raised before any network call
  - Anything upstream fails  -> logged here, re-raised as GatewayError with a
                                generic message (the raw SDK error never leaks)

Callers that want a displayable string instead of an exception use
ask_or_fallback().
"""

import asyncio
import logging
from typing import Optional

from google import genai
from google.genai import types

from config import DEFAULT_MODEL
from gemini.personas import Persona

logger = logging.getLogger(__name__)

GATEWAY_ERROR_MESSAGE = "Error contacting the Gemini API."


class PromptRequiredError(ValueError):
    def __init__(self):
        super().__init__("Prompt is required")


class GatewayError(Exception):
    def __init__(self, message: str = GATEWAY_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class MissingTextError(Exception):
    """Gemini answered but the response carried no text field (safety block, malformed)."""


def _extract_text(response) -> str:
    # response.text can raise on blocked / candidate-less responses
    try:
        text = response.text
    except (ValueError, AttributeError) as exc:
        raise MissingTextError("Gemini response has no readable text") from exc

    # An empty completion is still a completion; only a missing field is malformed
    if text is None:
        raise MissingTextError("Gemini response carried no text")
    return text


class GeminiGateway:
    def __init__(
        self,
        client: genai.Client,
        model: str = DEFAULT_MODEL,
        timeout_seconds: Optional[float] = 30.0,
    ):
        self._client = client
        self.model = model
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings) -> "GeminiGateway":
        return cls(
            client=genai.Client(api_key=settings.gemini_api_key),
            model=settings.gemini_model,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    async def ask(self, prompt: Optional[str], persona: Persona) -> str:
        if not prompt:
            raise PromptRequiredError()

        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        system_instruction=persona.instruction,
                    ),
                ),
                timeout=self.timeout_seconds,
            )
            return _extract_text(response)
        except Exception as exc:
            logger.exception("Gemini call failed (persona=%s, model=%s)", persona.name, self.model)
            raise GatewayError() from exc

    async def ask_or_fallback(self, prompt: Optional[str], persona: Persona, fallback: str) -> str:
        """Like ask(), but any failure (including a missing prompt) yields `fallback`."""
        try:
            return await self.ask(prompt, persona)
        except PromptRequiredError:
            logger.warning("Empty prompt for persona=%s, returning fallback", persona.name)
            return fallback
        except GatewayError:
            return fallback
