"""Core infrastructure: Configuration, Logging, Preflight."""

from graphload.core.config import (
    JobConfig,
    RuntimeSettings,
    load_runtime_settings,
    parse_system,
    parse_threads,
    resolve_config,
)
from graphload.core.logging import (
    configure_logging,
    get_logger,
)
from graphload.core.preflight import validate_environment

__all__ = [
    "JobConfig",
    "RuntimeSettings",
    "configure_logging",
    "get_logger",
    "load_runtime_settings",
    "parse_system",
    "parse_threads",
    "resolve_config",
    "validate_environment",
]
