"""
Application factory.

Every collaborator (session store, credential verifier, Gemini gateway,
dashboard provider) is built here or injected by the caller and kept on
app.state. Routes read them through FastAPI dependencies, so tests can swap
any of them without patching module globals.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.credentials import CredentialVerifier, StaticCredentialVerifier
from auth.sessions import InMemorySessionStore, SessionStore
from config import Settings, load_settings
from gemini.client import GeminiGateway
from metrics.dashboard import get_snapshot
from models.dashboard import DashboardSnapshot
from routes import dashboard, prompt, session

logger = logging.getLogger(__name__)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


def create_app(
    settings: Optional[Settings] = None,
    *,
    session_store: Optional[SessionStore] = None,
    verifier: Optional[CredentialVerifier] = None,
    gateway: Optional[GeminiGateway] = None,
    snapshot_provider: Optional[Callable[[], DashboardSnapshot]] = None,
) -> FastAPI:
    """
    Build the PilgrimPath API.

    With no settings, they are loaded from the environment; a missing
    GEMINI_API_KEY raises config.ConfigError and no app is created.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="PilgrimPath API", version="0.1.0")

    if session_store is None:
        session_store = InMemorySessionStore(ttl_seconds=settings.session_ttl_seconds)
    if verifier is None:
        verifier = StaticCredentialVerifier(settings.admin_email, settings.admin_password)
    if gateway is None:
        gateway = GeminiGateway.from_settings(settings)
    if snapshot_provider is None:
        snapshot_provider = get_snapshot

    app.state.settings = settings
    app.state.session_store = session_store
    app.state.credential_verifier = verifier
    app.state.gateway = gateway
    app.state.snapshot_provider = snapshot_provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)

    app.include_router(session.router)
    app.include_router(dashboard.router)
    app.include_router(prompt.router)

    @app.get("/")
    def health():
        return {"status": "ok", "service": "pilgrimpath"}

    logger.info("PilgrimPath API ready (model=%s)", settings.gemini_model)
    return app
