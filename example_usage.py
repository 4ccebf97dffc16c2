#!/usr/bin/env python3
"""
Example script showing how to use the Registry Client

This script demonstrates:
1. Registering a service with the registry
2. Resolving other services
3. Unregistering on shutdown

Registry and service settings come from the environment, e.g.
REGISTRY_HOST=localhost SERVICE_KEY=example SERVICE_HOST=localhost
SERVICE_PORT=8080 CHECK_INTERVAL=10s python example_usage.py
"""

import sys

from registry_client import (
    RegistryClientLogger,
    RegistryConfig,
    RegistryError,
    new_registry_client,
)
from registry_client.config import (
    LOG_ENABLE_CONSOLE,
    LOG_ENABLE_FILE,
    LOG_FILE_PATH,
    LOG_FORMAT_TYPE,
    LOG_LEVEL,
)

# Configure logging
RegistryClientLogger.setup_logging(
    level=LOG_LEVEL,
    format_type=LOG_FORMAT_TYPE,
    enable_console=LOG_ENABLE_CONSOLE,
    enable_file=LOG_ENABLE_FILE,
    log_file_path=LOG_FILE_PATH,
)
logger = RegistryClientLogger.get_logger(__name__)


def main() -> int:
    config = RegistryConfig.from_env()
    client = new_registry_client(config)

    if not client.is_alive():
        logger.error(f"Registry at {config.get_registry_url()} is not reachable")
        return 1

    try:
        client.register()
        logger.info(f"Health check URL: {config.get_health_check_url()}")

        for endpoint in client.get_all_service_endpoints():
            logger.info(
                f"  {endpoint.service_id} -> {endpoint.host}:{endpoint.port}"
            )

        try:
            client.is_service_available(config.service_key)
        except RegistryError as e:
            logger.warning(f"Not yet available: {e}")
    except RegistryError as e:
        logger.error(f"Registry operation failed: {e}")
        return 1
    finally:
        try:
            client.unregister()
        except RegistryError as e:
            logger.warning(f"Failed to unregister: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
