from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from registry_client.constants import API_VERSION, HEALTH_CHECK_TYPE_HTTP


@dataclass(frozen=True)
class ServiceEndpoint:
    """Resolved address of a registered service"""

    service_id: str
    host: str
    port: int


# Pydantic models for the registry wire format
class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Versionable(WireModel):
    api_version: str = Field(default=API_VERSION, alias="apiVersion")


class BaseRequest(Versionable):
    request_id: str = Field(default="", alias="requestId")


class BaseResponse(Versionable):
    """Common envelope every registry response decodes into"""

    api_version: str = Field(default="", alias="apiVersion")
    request_id: Optional[str] = Field(default=None, alias="requestId")
    message: Optional[str] = None
    status_code: Optional[int] = Field(default=None, alias="statusCode")


class HealthCheck(WireModel):
    interval: str = ""
    path: str = ""
    type: str = HEALTH_CHECK_TYPE_HTTP


class RegistrationDTO(WireModel):
    service_id: str = Field(..., alias="serviceId")
    host: str
    port: int
    # Populated by the registry, never by the client
    status: Optional[str] = None
    created: Optional[int] = None
    modified: Optional[int] = None
    last_connected: Optional[int] = Field(default=None, alias="lastConnected")
    health_check: HealthCheck = Field(default_factory=HealthCheck, alias="healthCheck")


class AddRegistrationRequest(BaseRequest):
    registration: RegistrationDTO

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()


class RegistrationResponse(BaseResponse):
    registration: RegistrationDTO


class MultiRegistrationsResponse(BaseResponse):
    total_count: int = Field(default=0, alias="totalCount")
    registrations: Optional[List[RegistrationDTO]] = None


class PingResponse(Versionable):
    timestamp: str
    service_name: str = Field(default="", alias="serviceName")
