"""Validators module - SSDP reply validation."""

from .header_parser import location_host, parse_headers
from .response_validator import is_valid_response

__all__ = [
    "is_valid_response",
    "location_host",
    "parse_headers",
]
