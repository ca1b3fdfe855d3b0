from auth.credentials import CredentialVerifier, StaticCredentialVerifier
from auth.sessions import InMemorySessionStore, SessionStore

__all__ = ["CredentialVerifier", "StaticCredentialVerifier", "InMemorySessionStore", "SessionStore"]
