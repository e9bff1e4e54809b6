"""Config module - discovery settings."""

from .schema import (
    DEFAULT_MAN,
    DEFAULT_TIMEOUT,
    DiscoveryConfig,
    ValidationError,
    ValidationResult,
)
from .parser import load_config, parse_config_data
from .validator import validate_config

__all__ = [
    "DEFAULT_MAN",
    "DEFAULT_TIMEOUT",
    "DiscoveryConfig",
    "ValidationError",
    "ValidationResult",
    "load_config",
    "parse_config_data",
    "validate_config",
]
