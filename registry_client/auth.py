"""
Authentication injectors for outbound registry requests

An injector can decorate each request with credentials and may supply the
transport the HTTP client sends through.
"""

from typing import Optional, Protocol

import httpx

from registry_client.constants import (
    AUTHORIZATION_HEADER,
    BEARER_PREFIX,
    ERROR_MISSING_TOKEN,
)
from registry_client.errors import AuthenticationError


class AuthenticationInjector(Protocol):
    def add_authentication_data(self, request: httpx.Request) -> None:
        """Attach credentials to the request; raise AuthenticationError on failure"""
        ...

    def transport(self) -> Optional[httpx.BaseTransport]:
        """Transport for the HTTP client, or None for the default one"""
        ...


class NullAuthenticationInjector:
    """Leaves requests untouched; for registries that need no authentication"""

    def add_authentication_data(self, request: httpx.Request) -> None:
        return None

    def transport(self) -> Optional[httpx.BaseTransport]:
        return None


class BearerTokenAuthenticationInjector:
    """Sends a static bearer token with every request"""

    def __init__(
        self, token: str, transport: Optional[httpx.BaseTransport] = None
    ):
        self._token = token
        self._transport = transport

    def add_authentication_data(self, request: httpx.Request) -> None:
        if not self._token:
            raise AuthenticationError(ERROR_MISSING_TOKEN)
        request.headers[AUTHORIZATION_HEADER] = f"{BEARER_PREFIX}{self._token}"

    def transport(self) -> Optional[httpx.BaseTransport]:
        return self._transport
