"""
Admin credential check.

There is a single admin identity configured at startup. Routes only talk to
the CredentialVerifier protocol, so a hashed or external identity store can
replace StaticCredentialVerifier without touching them.
"""

import secrets
from typing import Protocol


class CredentialVerifier(Protocol):
    def verify(self, email: str, password: str) -> bool: ...


class StaticCredentialVerifier:
    def __init__(self, email: str, password: str):
        self._email = email
        self._password = password

    def verify(self, email: str, password: str) -> bool:
        # Evaluate both comparisons so timing doesn't reveal which field matched
        email_ok = secrets.compare_digest(email.encode(), self._email.encode())
        password_ok = secrets.compare_digest(password.encode(), self._password.encode())
        return email_ok and password_ok
