import pytest
from pydantic import ValidationError

from registry_client.types import (
    AddRegistrationRequest,
    BaseResponse,
    MultiRegistrationsResponse,
    RegistrationDTO,
    RegistrationResponse,
)


class TestWireTypes:
    def test_registration_decodes_registry_fields(self):
        response = RegistrationResponse.model_validate_json(
            b'{"apiVersion": "v3", "statusCode": 200, "registration": {'
            b'"serviceId": "core-data", "host": "core-data", "port": 59880,'
            b'"status": "UP", "created": 1700000000, "lastConnected": 1700000100,'
            b'"healthCheck": {"interval": "10s", "path": "/api/v3/ping", "type": "http"}}}'
        )

        registration = response.registration
        assert registration.service_id == "core-data"
        assert registration.status == "UP"
        assert registration.last_connected == 1700000100
        assert registration.health_check.path == "/api/v3/ping"

    def test_registration_requires_address(self):
        with pytest.raises(ValidationError):
            RegistrationResponse.model_validate_json(b'{"registration": {"serviceId": "x"}}')

    def test_envelope_tolerates_missing_and_extra_fields(self):
        envelope = BaseResponse.model_validate_json(b'{"detail": "ignored"}')

        assert envelope.message is None

    def test_envelope_rejects_invalid_json(self):
        with pytest.raises(ValidationError):
            BaseResponse.model_validate_json(b"")

    def test_request_omits_registry_owned_fields(self):
        request = AddRegistrationRequest(
            registration=RegistrationDTO(service_id="ui", host="ui", port=4000)
        )

        body = request.model_dump(by_alias=True, exclude_none=True)
        assert body["apiVersion"] == "v3"
        assert "status" not in body["registration"]
        assert body["registration"]["healthCheck"]["type"] == "http"

    def test_multi_registrations_total_count(self):
        response = MultiRegistrationsResponse.model_validate_json(
            b'{"totalCount": 1, "registrations": [{"serviceId": "a", "host": "h", "port": 1}]}'
        )

        assert response.total_count == 1
        assert response.registrations[0].service_id == "a"
