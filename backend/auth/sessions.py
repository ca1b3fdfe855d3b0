"""
In-memory session store for admin bearer tokens.

Tokens are opaque 64-char hex strings (32 random bytes). They carry no
identity: any live token authorizes any protected route. Sessions live in
process memory only and disappear on restart.
"""

import logging
import secrets
import threading
import time
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class SessionStore(Protocol):
    def issue_token(self) -> str: ...

    def authenticate(self, candidate: Optional[str]) -> bool: ...

    def revoke(self, token: str) -> bool: ...


class InMemorySessionStore:
    """
    Token registry guarded by a lock.

    FastAPI runs sync dependencies in a thread pool, so insert/lookup must
    not race. With ttl_seconds=None tokens never expire.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._tokens: dict[str, float] = {}   # token -> issued_at
        self._lock = threading.Lock()

    def issue_token(self) -> str:
        token = secrets.token_hex(TOKEN_BYTES)
        with self._lock:
            self._tokens[token] = self._clock()
        return token

    def authenticate(self, candidate: Optional[str]) -> bool:
        if not candidate:
            return False

        with self._lock:
            issued_at = self._tokens.get(candidate)
            if issued_at is None:
                return False
            if self._ttl is not None and self._clock() - issued_at >= self._ttl:
                del self._tokens[candidate]
                logger.info("Session token expired")
                return False
            return True

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._tokens.pop(token, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._tokens
