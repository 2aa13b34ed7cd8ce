"""
Configuration manager for library usage.

Provides a clean configuration interface over the module-level constants
in config.py. Explicit args take precedence over GMAPS_ENTRY_* env vars,
which take precedence over config.py defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


@dataclass
class ExtractorConfig:
    """Configuration for the CLI and the API server.

    Args:
        server_host: Host the API server binds to.
        server_port: Port for the API server.
        default_workers: Default number of parallel parse workers.
                         If None, falls back to GMAPS_ENTRY_WORKERS, then config.py.
        max_workers: Maximum allowed parallel parse workers.
                     If None, falls back to GMAPS_ENTRY_MAX_WORKERS, then config.py.
        log_level: Logging level name (DEBUG, INFO, WARNING, ...).
                   If None, falls back to GMAPS_ENTRY_LOG_LEVEL, then config.py.
    """

    server_host: Optional[str] = None
    server_port: Optional[int] = None
    default_workers: Optional[int] = None
    max_workers: Optional[int] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        """Resolve unset values from env vars and validate."""
        from . import config

        if self.server_host is None:
            self.server_host = os.environ.get("GMAPS_ENTRY_API_HOST", config.API_HOST)

        if self.server_port is None:
            self.server_port = _env_int("GMAPS_ENTRY_API_PORT", config.API_PORT)

        if self.default_workers is None:
            self.default_workers = _env_int("GMAPS_ENTRY_WORKERS", config.DEFAULT_PARALLEL_WORKERS)
        if self.max_workers is None:
            self.max_workers = _env_int("GMAPS_ENTRY_MAX_WORKERS", config.MAX_PARALLEL_WORKERS)

        if self.log_level is None:
            self.log_level = os.environ.get("GMAPS_ENTRY_LOG_LEVEL", config.LOG_LEVEL)
        self.log_level = self.log_level.upper()

        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        if not 0 < self.server_port < 65536:
            raise ConfigurationError(f"Invalid server port: {self.server_port}")
        if self.default_workers < 1 or self.max_workers < 1:
            raise ConfigurationError("Worker counts must be positive")
        if self.default_workers > self.max_workers:
            raise ConfigurationError(
                f"default_workers ({self.default_workers}) exceeds max_workers ({self.max_workers})"
            )

    def apply(self):
        """Apply this configuration to the config module."""
        from . import config

        config.API_HOST = self.server_host
        config.API_PORT = self.server_port
        config.DEFAULT_PARALLEL_WORKERS = self.default_workers
        config.MAX_PARALLEL_WORKERS = self.max_workers
        config.LOG_LEVEL = self.log_level

    def configure_logging(self):
        """Set up root logging for an entry point (CLI or server)."""
        from . import config

        logging.basicConfig(level=self.log_level, format=config.LOG_FORMAT)
