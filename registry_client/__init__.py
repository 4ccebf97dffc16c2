# Registry Client Package
# Main exports for easy importing

from registry_client.auth import (
    AuthenticationInjector,
    BearerTokenAuthenticationInjector,
    NullAuthenticationInjector,
)
from registry_client.client import KeeperClient, new_registry_client
from registry_client.config import RegistryConfig
from registry_client.errors import (
    AuthenticationError,
    RegistryConfigurationError,
    RegistryDecodeError,
    RegistryError,
    RegistryResponseError,
    RegistryTransportError,
    ServiceNotRegisteredError,
    ServiceUnavailableError,
    ServiceUnhealthyError,
)
from registry_client.health_endpoints import (
    create_ping_router,
    setup_registry_health_check,
)
from registry_client.interfaces import RegistryClient
from registry_client.logger_config import RegistryClientLogger
from registry_client.types import (
    AddRegistrationRequest,
    BaseResponse,
    HealthCheck,
    MultiRegistrationsResponse,
    PingResponse,
    RegistrationDTO,
    RegistrationResponse,
    ServiceEndpoint,
)

__all__ = [
    # Client
    "KeeperClient",
    "RegistryClient",
    "new_registry_client",
    # Configuration and logging
    "RegistryConfig",
    "RegistryClientLogger",
    # Authentication
    "AuthenticationInjector",
    "NullAuthenticationInjector",
    "BearerTokenAuthenticationInjector",
    # Health check endpoint
    "create_ping_router",
    "setup_registry_health_check",
    # Types and models
    "ServiceEndpoint",
    "HealthCheck",
    "RegistrationDTO",
    "AddRegistrationRequest",
    "BaseResponse",
    "RegistrationResponse",
    "MultiRegistrationsResponse",
    "PingResponse",
    # Errors
    "RegistryError",
    "RegistryConfigurationError",
    "RegistryTransportError",
    "AuthenticationError",
    "RegistryDecodeError",
    "RegistryResponseError",
    "ServiceUnavailableError",
    "ServiceNotRegisteredError",
    "ServiceUnhealthyError",
]
