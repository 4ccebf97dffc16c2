import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from registry_client.constants import (
    DEFAULT_CHECK_ROUTE,
    DEFAULT_PROTOCOL,
    DEFAULT_REGISTRY_HOST,
    DEFAULT_REGISTRY_PORT,
    REGISTRY_TYPE_KEEPER,
)
from registry_client.errors import RegistryConfigurationError

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_FORMAT_TYPE = os.getenv("LOG_FORMAT_TYPE", "structured")  # "structured" or "simple"
LOG_ENABLE_CONSOLE = os.getenv("LOG_ENABLE_CONSOLE", "true").lower() == "true"
LOG_ENABLE_FILE = os.getenv("LOG_ENABLE_FILE", "false").lower() == "true"
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "/var/log/registry-client.log")


class RegistryConfig(BaseModel):
    """Immutable registry settings plus the caller's own service identity.

    The service fields are only needed for self-registration; a config
    without them still supports lookups.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_REGISTRY_HOST
    port: int = Field(default=DEFAULT_REGISTRY_PORT, ge=0, le=65535)
    type: str = REGISTRY_TYPE_KEEPER
    service_key: str = ""
    service_host: str = ""
    service_port: int = Field(default=0, ge=0, le=65535)
    service_protocol: str = DEFAULT_PROTOCOL
    check_route: str = ""
    check_interval: str = ""

    def get_registry_protocol(self) -> str:
        return self.protocol or DEFAULT_PROTOCOL

    def get_registry_url(self) -> str:
        return f"{self.get_registry_protocol()}://{self.host}:{self.port}"

    def get_service_protocol(self) -> str:
        return self.service_protocol or DEFAULT_PROTOCOL

    def get_expanded_route(self, route: str) -> str:
        """Absolute URL of a route served by this service"""
        return (
            f"{self.get_service_protocol()}://{self.service_host}:"
            f"{self.service_port}{route}"
        )

    def get_health_check_url(self) -> str:
        return self.get_expanded_route(self.check_route)

    @classmethod
    def from_env(cls, check_route: Optional[str] = None) -> "RegistryConfig":
        """Build a config from environment variables"""
        try:
            return cls(
                protocol=os.getenv("REGISTRY_PROTOCOL", DEFAULT_PROTOCOL),
                host=os.getenv("REGISTRY_HOST", DEFAULT_REGISTRY_HOST),
                port=int(os.getenv("REGISTRY_PORT", str(DEFAULT_REGISTRY_PORT))),
                type=os.getenv("REGISTRY_TYPE", REGISTRY_TYPE_KEEPER),
                service_key=os.getenv("SERVICE_KEY", ""),
                service_host=os.getenv("SERVICE_HOST", ""),
                service_port=int(os.getenv("SERVICE_PORT", "0")),
                service_protocol=os.getenv("SERVICE_PROTOCOL", DEFAULT_PROTOCOL),
                check_route=os.getenv(
                    "CHECK_ROUTE", check_route or DEFAULT_CHECK_ROUTE
                ),
                check_interval=os.getenv("CHECK_INTERVAL", ""),
            )
        except (ValueError, ValidationError) as e:
            raise RegistryConfigurationError(
                f"invalid registry configuration: {e}"
            ) from e
