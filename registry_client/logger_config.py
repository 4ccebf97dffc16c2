"""
Logger configuration for the Registry Client
Emits structured JSON records suitable for Loki/Grafana style log pipelines
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from registry_client.config import LOG_FORMAT, LOG_LEVEL
from registry_client.constants import (
    LOG_SENDING_REQUEST,
    LOG_SERVICE_REGISTERED,
    LOG_SERVICE_UNREGISTERED,
)

_RESERVED_RECORD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "getMessage",
    "exc_info",
    "exc_text",
    "stack_info",
}


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for log aggregation
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON"""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class RegistryClientLogger:
    """
    Centralized logger configuration for the Registry Client
    """

    @staticmethod
    def setup_logging(
        level: str = LOG_LEVEL,
        format_type: str = "structured",
        enable_console: bool = True,
        enable_file: bool = False,
        log_file_path: Optional[str] = None,
    ) -> None:
        """
        Setup logging configuration

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format_type: Format type - "structured" (JSON) or "simple" (text)
            enable_console: Enable console logging
            enable_file: Enable file logging
            log_file_path: Path to log file (required if enable_file=True)
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        if format_type == "structured":
            formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(LOG_FORMAT)

        handlers = []

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            handlers.append(console_handler)

        if enable_file and log_file_path:
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=numeric_level,
            handlers=handlers,
            force=True,  # Override any existing configuration
        )

        client_logger = logging.getLogger("registry_client")
        client_logger.setLevel(numeric_level)
        client_logger.handlers = handlers
        client_logger.propagate = False

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a logger instance"""
        return logging.getLogger(name)

    @staticmethod
    def log_service_event(
        logger: logging.Logger,
        level: int,
        message: str,
        service_key: str,
        **kwargs,
    ) -> None:
        """
        Log a service-related event with structured data

        Args:
            logger: Logger instance
            level: Log level
            message: Log message
            service_key: Registry key of the service
            **kwargs: Additional structured data
        """
        extra_data = {"service_key": service_key, **kwargs}
        logger.log(level, message, extra=extra_data)


# Convenience functions for common logging patterns
def get_service_logger(name: str) -> logging.Logger:
    """Get a service logger instance"""
    return RegistryClientLogger.get_logger(name)


def log_registry_request(logger: logging.Logger, method: str, url: str) -> None:
    logger.debug(
        LOG_SENDING_REQUEST.format(method, url),
        extra={"http_method": method, "url": url},
    )


def log_service_registration(
    logger: logging.Logger, service_key: str, host: str, port: int, mode: str
) -> None:
    """Log service registration event"""
    RegistryClientLogger.log_service_event(
        logger,
        logging.INFO,
        LOG_SERVICE_REGISTERED.format(service_key, host, port, mode),
        service_key,
        host=host,
        port=port,
        mode=mode,
        event_type="registration",
    )


def log_service_unregistration(logger: logging.Logger, service_key: str) -> None:
    """Log service unregistration event"""
    RegistryClientLogger.log_service_event(
        logger,
        logging.INFO,
        LOG_SERVICE_UNREGISTERED.format(service_key),
        service_key,
        event_type="unregistration",
    )
