"""Discovery module - SSDP multicast search."""

from .deadline import Deadline
from .search_request import SSDP_TEMPLATE, SearchRequest
from .ssdp_collector import DiscoveryResult, SSDPCollector, create_socket, discover

__all__ = [
    "Deadline",
    "DiscoveryResult",
    "SSDP_TEMPLATE",
    "SSDPCollector",
    "SearchRequest",
    "create_socket",
    "discover",
]
