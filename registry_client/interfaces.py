from typing import List, Protocol

from registry_client.types import ServiceEndpoint


class RegistryClient(Protocol):
    """Operations every registry client implementation provides"""

    def register(self) -> None:
        ...

    def unregister(self) -> None:
        ...

    def register_check(
        self, id: str, name: str, notes: str, url: str, interval: str
    ) -> None:
        ...

    def is_alive(self) -> bool:
        ...

    def get_service_endpoint(self, service_key: str) -> ServiceEndpoint:
        ...

    def get_all_service_endpoints(self) -> List[ServiceEndpoint]:
        ...

    def is_service_available(self, service_key: str) -> bool:
        ...
