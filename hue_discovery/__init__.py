"""Hue bridge discovery over SSDP."""

import logging

__version__ = "0.1.0"

from .config import DiscoveryConfig, load_config
from .discovery import DiscoveryResult, SSDPCollector, discover
from .errors import (
    BindError,
    DiscoveryError,
    MalformedResponseError,
    ReceiveError,
    SendError,
)
from .validators import is_valid_response

__all__ = [
    "BindError",
    "DiscoveryConfig",
    "DiscoveryError",
    "DiscoveryResult",
    "MalformedResponseError",
    "ReceiveError",
    "SSDPCollector",
    "SendError",
    "discover",
    "is_valid_response",
    "load_config",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
