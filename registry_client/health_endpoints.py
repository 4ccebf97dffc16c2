from datetime import datetime, timezone

from fastapi import APIRouter

from registry_client.config import RegistryConfig
from registry_client.constants import DEFAULT_CHECK_ROUTE
from registry_client.types import PingResponse


def create_ping_router(service_key: str, route: str = DEFAULT_CHECK_ROUTE) -> APIRouter:
    """Create a FastAPI router answering the route the registry probes"""
    router = APIRouter()

    @router.get(route, response_model=PingResponse, response_model_by_alias=True)
    async def ping():
        """Health check endpoint for the registry"""
        return PingResponse(
            timestamp=datetime.now(timezone.utc).isoformat(),
            service_name=service_key,
        )

    return router


def setup_registry_health_check(app, registry_config: RegistryConfig) -> APIRouter:
    """Mount the health check route declared in registry_config on a FastAPI app"""
    router = create_ping_router(
        registry_config.service_key,
        registry_config.check_route or DEFAULT_CHECK_ROUTE,
    )
    app.include_router(router)
    return router
