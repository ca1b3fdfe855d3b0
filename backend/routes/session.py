import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from auth.credentials import CredentialVerifier
from auth.dependencies import get_credential_verifier, get_session_store, require_token
from auth.sessions import SessionStore
from models.auth import LoginRequest, LoginResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


# ---------- Endpoints ----------

@router.post("/login", response_model=LoginResponse)
def login(
    body: Optional[LoginRequest] = Body(default=None),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
    sessions: SessionStore = Depends(get_session_store),
):
    """
    Checks the admin credentials and issues a bearer token.
    The token stays valid until logout, expiry (if configured) or restart.
    """
    if body is None or body.email is None or body.password is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )

    if not verifier.verify(body.email, body.password):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = sessions.issue_token()
    logger.info("Admin logged in, token issued.")
    return LoginResponse(message="Admin login successful", token=token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    token: str = Depends(require_token),
    sessions: SessionStore = Depends(get_session_store),
):
    """Revokes the presented token."""
    sessions.revoke(token)
    logger.info("Admin logged out, token revoked.")
    return MessageResponse(message="Logged out")
