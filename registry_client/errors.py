"""Registry client error definitions."""

from typing import Optional


class RegistryError(Exception):
    """Base exception for registry client errors."""


class RegistryConfigurationError(RegistryError):
    """Required configuration is missing or invalid; no network call was made."""


class RegistryTransportError(RegistryError):
    """The HTTP request could not be built or sent, or timed out."""


class AuthenticationError(RegistryTransportError):
    """The authentication injector failed to decorate a request."""


class RegistryDecodeError(RegistryError):
    """A response body did not match the expected JSON shape."""


class RegistryResponseError(RegistryError):
    """The registry answered with a status outside the expected success set."""

    def __init__(self, message: str, status_code: int, registry_message: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.registry_message = registry_message


class ServiceUnavailableError(RegistryError):
    """A service is not available for use."""

    def __init__(self, message: str, service_key: str):
        super().__init__(message)
        self.service_key = service_key


class ServiceNotRegisteredError(ServiceUnavailableError):
    """The registry holds no record for the service."""


class ServiceUnhealthyError(ServiceUnavailableError):
    """The registry reports the service with a status other than up."""

    def __init__(self, message: str, service_key: str, status: Optional[str] = None):
        super().__init__(message, service_key)
        self.status = status
