from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from auth.credentials import CredentialVerifier
from auth.sessions import SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_credential_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.credential_verifier


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from 'Bearer <token>', or None if the header doesn't have that shape."""
    if not authorization:
        return None

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None

    token = token.strip()
    return token or None


def require_token(
    authorization: Optional[str] = Header(None),
    sessions: SessionStore = Depends(get_session_store),
) -> str:
    """
    Gate for admin routes.

    401 when no bearer token is supplied, 403 when the token isn't live.
    The route handler never runs in either case.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )

    if not sessions.authenticate(token):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Invalid token.",
        )

    return token
