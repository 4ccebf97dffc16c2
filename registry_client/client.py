import time
from typing import Callable, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from registry_client.auth import AuthenticationInjector, NullAuthenticationInjector
from registry_client.config import RegistryConfig
from registry_client.constants import (
    API_ALL_REGISTRATION_ROUTE,
    API_PING_ROUTE,
    API_REGISTER_ROUTE,
    API_REGISTRATION_BY_SERVICE_ID_ROUTE,
    CONTENT_TYPE_HEADER,
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT_SECONDS,
    ERROR_CHECK_AVAILABILITY,
    ERROR_CHECK_REGISTRY_STATUS,
    ERROR_DECODE_RESPONSE,
    ERROR_GET_ALL_ENDPOINTS,
    ERROR_GET_ENDPOINT,
    ERROR_GET_SERVICE_REGISTRY,
    ERROR_HTTP,
    ERROR_REGISTER,
    ERROR_SERVICE_INFO_NOT_SET,
    ERROR_SERVICE_NOT_HEALTHY,
    ERROR_SERVICE_NOT_REGISTERED,
    ERROR_TIMEOUT,
    ERROR_UNKNOWN_REGISTRY_TYPE,
    ERROR_UNREGISTER,
    HEALTH_CHECK_TYPE_HTTP,
    HTTP_CREATED,
    HTTP_DELETE,
    HTTP_GET,
    HTTP_MULTIPLE_CHOICES,
    HTTP_NO_CONTENT,
    HTTP_NOT_FOUND,
    HTTP_OK,
    HTTP_POST,
    HTTP_PUT,
    REGISTRY_TYPE_KEEPER,
    STATUS_UP,
)
from registry_client.errors import (
    RegistryConfigurationError,
    RegistryDecodeError,
    RegistryError,
    RegistryResponseError,
    RegistryTransportError,
    ServiceNotRegisteredError,
    ServiceUnhealthyError,
)
from registry_client.logger_config import (
    get_service_logger,
    log_registry_request,
    log_service_registration,
    log_service_unregistration,
)
from registry_client.types import (
    AddRegistrationRequest,
    BaseResponse,
    HealthCheck,
    MultiRegistrationsResponse,
    RegistrationDTO,
    RegistrationResponse,
    ServiceEndpoint,
)

logger = get_service_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class KeeperClient:
    """Client for a registry that combines service registration and health checks

    Every operation is a synchronous HTTP round trip bounded by a fixed
    timeout. The client keeps only the configuration captured at
    construction, so one instance may be shared between threads.
    """

    # Bounds each HTTP call as a whole, including reading the body
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __init__(
        self,
        registry_config: RegistryConfig,
        auth_injector: Optional[AuthenticationInjector] = None,
    ):
        self.config = registry_config
        self.registry_url = registry_config.get_registry_url()
        self.service_key = registry_config.service_key
        self.auth_injector = auth_injector or NullAuthenticationInjector()

        # service_host is empty when the client isn't registering the service
        self.service_host = ""
        self.service_port = 0
        self.health_check_route = ""
        self.health_check_interval = ""
        if registry_config.service_host:
            self.service_host = registry_config.service_host
            self.service_port = registry_config.service_port
            self.health_check_route = registry_config.check_route
            self.health_check_interval = registry_config.check_interval

    def register(self) -> None:
        """Create or update this service's registration.

        The registry has no upsert, so the existing record is looked up
        first: PUT when it exists, POST otherwise. The record may change
        between the two calls.

        Raises:
            RegistryConfigurationError: service information is incomplete
            RegistryTransportError: a request could not be sent
            RegistryDecodeError: an error response could not be decoded
            RegistryResponseError: the registry rejected the registration
        """
        if not (
            self.service_key
            and self.service_host
            and self.service_port
            and self.health_check_route
            and self.health_check_interval
        ):
            raise RegistryConfigurationError(ERROR_SERVICE_INFO_NOT_SET)

        registration_request = AddRegistrationRequest(
            registration=RegistrationDTO(
                service_id=self.service_key,
                host=self.service_host,
                port=self.service_port,
                health_check=HealthCheck(
                    interval=self.health_check_interval,
                    path=self.health_check_route,
                    type=HEALTH_CHECK_TYPE_HTTP,
                ),
            )
        )
        payload = registration_request.to_json()

        try:
            existing = self._send(HTTP_GET, self._registration_url(self.service_key))
        except RegistryTransportError as e:
            raise type(e)(
                ERROR_CHECK_REGISTRY_STATUS.format(self.service_key, e)
            ) from e

        if existing.status_code == HTTP_OK:
            method, mode = HTTP_PUT, "update"
        else:
            method, mode = HTTP_POST, "create"

        response = self._send(method, self._url(API_REGISTER_ROUTE), payload)
        if response.status_code not in (HTTP_CREATED, HTTP_NO_CONTENT):
            raise self._response_error(
                response, lambda message: ERROR_REGISTER.format(self.service_key, message)
            )

        log_service_registration(
            logger, self.service_key, self.service_host, self.service_port, mode
        )

    def unregister(self) -> None:
        """Delete this service's registration; success is exactly 204"""
        response = self._send(HTTP_DELETE, self._registration_url(self.service_key))
        if response.status_code != HTTP_NO_CONTENT:
            raise self._response_error(
                response,
                lambda message: ERROR_UNREGISTER.format(self.service_key, message),
            )

        log_service_unregistration(logger, self.service_key)

    def register_check(
        self, id: str, name: str, notes: str, url: str, interval: str
    ) -> None:
        # The health check is declared as part of register()
        return None

    def is_alive(self) -> bool:
        """Whether the registry answers its ping route with a 2xx status"""
        try:
            response = self._send(HTTP_GET, self._url(API_PING_ROUTE))
        except Exception as e:
            logger.debug(f"Registry liveness check failed: {e}")
            return False

        return HTTP_OK <= response.status_code < HTTP_MULTIPLE_CHOICES

    def get_service_endpoint(self, service_key: str) -> ServiceEndpoint:
        """Resolve the host and port registered under service_key"""
        response = self._send(HTTP_GET, self._registration_url(service_key))
        if response.status_code != HTTP_OK:
            raise self._response_error(response, ERROR_GET_ENDPOINT.format)

        registration = self._decode(RegistrationResponse, response).registration
        return ServiceEndpoint(
            service_id=service_key,
            host=registration.host,
            port=registration.port,
        )

    def get_all_service_endpoints(self) -> List[ServiceEndpoint]:
        """Resolve every registered service, in the order the registry lists them"""
        response = self._send(HTTP_GET, self._url(API_ALL_REGISTRATION_ROUTE))
        if response.status_code != HTTP_OK:
            raise self._response_error(response, ERROR_GET_ALL_ENDPOINTS.format)

        registrations = self._decode(MultiRegistrationsResponse, response).registrations
        return [
            ServiceEndpoint(service_id=r.service_id, host=r.host, port=r.port)
            for r in registrations or []
        ]

    def is_service_available(self, service_key: str) -> bool:
        """Check that service_key is registered and reported up.

        Returns True when available; every other outcome raises.

        Raises:
            ServiceUnhealthyError: registered with a status other than up
            ServiceNotRegisteredError: the registry has no record (404)
            RegistryResponseError: any other status, with the registry message
            RegistryTransportError: the request could not be sent
            RegistryDecodeError: the response body could not be decoded
        """
        try:
            response = self._send(HTTP_GET, self._registration_url(service_key))
        except RegistryTransportError as e:
            raise type(e)(ERROR_GET_SERVICE_REGISTRY.format(service_key, e)) from e

        if response.status_code == HTTP_OK:
            registration = self._decode(RegistrationResponse, response).registration
            status = registration.status or ""
            if status.lower() != STATUS_UP:
                raise ServiceUnhealthyError(
                    ERROR_SERVICE_NOT_HEALTHY.format(service_key),
                    service_key,
                    registration.status,
                )
            return True

        if response.status_code == HTTP_NOT_FOUND:
            raise ServiceNotRegisteredError(
                ERROR_SERVICE_NOT_REGISTERED.format(service_key), service_key
            )

        raise self._response_error(response, ERROR_CHECK_AVAILABILITY.format)

    def _url(self, route: str) -> str:
        return f"{self.registry_url}{route}"

    def _registration_url(self, service_key: str) -> str:
        return self._url(f"{API_REGISTRATION_BY_SERVICE_ID_ROUTE}{service_key}")

    def _send(
        self, method: str, url: str, payload: Optional[bytes] = None
    ) -> httpx.Response:
        """Send one request and return the fully read response.

        The body is streamed so the deadline covers slow responses too,
        not only each individual connect or read.
        """
        headers = {CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON} if payload else None
        deadline = time.monotonic() + self.timeout
        try:
            with httpx.Client(
                timeout=self.timeout,
                transport=self.auth_injector.transport(),
            ) as client:
                request = client.build_request(
                    method, url, content=payload, headers=headers
                )
                self.auth_injector.add_authentication_data(request)
                log_registry_request(logger, method, url)
                response = client.send(request, stream=True)
                try:
                    chunks = []
                    for chunk in response.iter_bytes():
                        if time.monotonic() > deadline:
                            raise RegistryTransportError(
                                ERROR_TIMEOUT.format(self.timeout)
                            )
                        chunks.append(chunk)
                finally:
                    response.close()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RegistryTransportError(ERROR_HTTP.format(e)) from e

        # iter_bytes already decoded any content encoding
        return httpx.Response(
            response.status_code, content=b"".join(chunks), request=request
        )

    @staticmethod
    def _decode(model: Type[ModelT], response: httpx.Response) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise RegistryDecodeError(ERROR_DECODE_RESPONSE.format(e)) from e

    def _response_error(
        self, response: httpx.Response, describe: Callable[[str], str]
    ) -> RegistryError:
        """Build the error for an unexpected status from the response envelope"""
        envelope = self._decode(BaseResponse, response)
        message = envelope.message or ""
        return RegistryResponseError(
            describe(message), status_code=response.status_code, registry_message=message
        )


def new_registry_client(
    registry_config: RegistryConfig,
    auth_injector: Optional[AuthenticationInjector] = None,
) -> KeeperClient:
    """Create the client matching registry_config.type"""
    if registry_config.type.lower() != REGISTRY_TYPE_KEEPER:
        raise RegistryConfigurationError(
            ERROR_UNKNOWN_REGISTRY_TYPE.format(registry_config.type)
        )
    return KeeperClient(registry_config, auth_injector)
