# productstore/services/auth.py
import hmac
from typing import Protocol

from productstore.utils.settings import API_KEY


class CredentialVerifier(Protocol):
    """Decides whether the credential header of a write request is acceptable."""

    def verify(self, value: str | None) -> bool:
        ...


class StaticApiKeyVerifier:
    """One shared secret for every client."""

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key or API_KEY

    def verify(self, value: str | None) -> bool:
        if not value:
            return False
        return hmac.compare_digest(value.encode(), self.api_key.encode())
