import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from auth.dependencies import require_token
from gemini.client import GatewayError, GeminiGateway, PromptRequiredError
from gemini.personas import ADMIN_ANALYST, PUBLIC_GUIDE, Persona
from models.prompt import AskRequest, AskResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["prompt"])


def get_gateway(request: Request) -> GeminiGateway:
    return request.app.state.gateway


async def _ask(gateway: GeminiGateway, body: Optional[AskRequest], persona: Persona) -> AskResponse:
    prompt = body.prompt if body else None

    try:
        text = await gateway.ask(prompt, persona)
    except PromptRequiredError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except GatewayError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)

    return AskResponse(text=text)


# ---------- Endpoints ----------

@router.post(
    "/ask-gemini",
    response_model=AskResponse,
    dependencies=[Depends(require_token)],
)
async def ask_gemini(
    body: Optional[AskRequest] = Body(default=None),
    gateway: GeminiGateway = Depends(get_gateway),
):
    """Admin analyst assistant. Requires a bearer token from /login."""
    if body and body.prompt:
        logger.info('Authenticated request received to ask Gemini: "%s"', body.prompt)
    return await _ask(gateway, body, ADMIN_ANALYST)


@router.post("/ask-gemini-public", response_model=AskResponse)
async def ask_gemini_public(
    body: Optional[AskRequest] = Body(default=None),
    gateway: GeminiGateway = Depends(get_gateway),
):
    """Pilgrim guide assistant. Open to everyone."""
    if body and body.prompt:
        logger.info('Public request received to ask Gemini: "%s"', body.prompt)
    return await _ask(gateway, body, PUBLIC_GUIDE)
