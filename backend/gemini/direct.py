"""
Direct Gemini access with the public guide persona.

For deployments without the HTTP backend: no login, no proxy route. The
caller always gets a displayable string back; on any failure it is the fixed
fallback message below.
"""

import logging
from typing import Optional

from config import load_settings
from gemini.client import GeminiGateway
from gemini.personas import PUBLIC_GUIDE

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "Sorry, I am having trouble connecting to my knowledge base. "
    "Please try again later."
)

_gateway: Optional[GeminiGateway] = None


def get_gateway() -> GeminiGateway:
    """
    Lazily build and cache the shared gateway from the environment.
    Raises config.ConfigError if GEMINI_API_KEY is missing.
    """
    global _gateway

    if _gateway is None:
        settings = load_settings()
        _gateway = GeminiGateway.from_settings(settings)
        logger.info("Direct Gemini gateway initialised (model=%s)", settings.gemini_model)

    return _gateway


async def get_ai_response(prompt: Optional[str], gateway: Optional[GeminiGateway] = None) -> str:
    gateway = gateway or get_gateway()
    return await gateway.ask_or_fallback(prompt, PUBLIC_GUIDE, FALLBACK_MESSAGE)
