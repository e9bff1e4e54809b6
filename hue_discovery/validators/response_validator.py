"""Validation of SSDP replies against the Hue bridge response shape.

Checks run in order. Each one either raises MalformedResponseError (the reply
breaks the protocol), returns False (well-formed but irrelevant traffic) or
lets the next check run.
"""

import ipaddress
import logging
from typing import Union

from ..config.schema import DEFAULT_VENDOR_MARKER
from ..errors import MalformedResponseError
from .header_parser import location_host, parse_headers

logger = logging.getLogger(__name__)

STATUS_OK = "HTTP/1.1 200 OK"
NOTIFY_START = "NOTIFY * HTTP/1.1"

# MUST fields from UPnP Device Architecture 1.1
REQUIRED_FIELDS = ("usn", "st")

SenderAddress = Union[str, ipaddress.IPv4Address]


def is_valid_response(
    body: str,
    sender: SenderAddress,
    vendor_marker: str = DEFAULT_VENDOR_MARKER,
) -> bool:
    """Decide whether a reply is a trustworthy bridge advertisement.

    Args:
        body: Decoded datagram payload.
        sender: IP address the datagram arrived from.
        vendor_marker: Case-insensitive product fingerprint.

    Returns:
        True for a bridge reply, False for unrelated traffic.

    Raises:
        MalformedResponseError: If the reply violates the protocol or its
            LOCATION does not point at the sender.
    """
    sender = str(sender)

    if STATUS_OK not in body:
        if NOTIFY_START in body:
            logger.debug("Ignoring NOTIFY from %s", sender)
            return False
        raise MalformedResponseError(f"Invalid SSDP response header: {body}", body=body)

    headers = parse_headers(body)

    missing = [name for name in REQUIRED_FIELDS if name not in headers]
    if missing:
        raise MalformedResponseError(
            f"Invalid SSDP response from {sender}: missing {', '.join(missing)}",
            body=body,
        )

    if vendor_marker.lower() not in body.lower():
        logger.debug("Ignoring non-bridge device at %s", sender)
        return False

    location = headers.get("location")
    if location is None:
        raise MalformedResponseError(
            f"Invalid hue bridge response from {sender}: no LOCATION", body=body
        )

    advertised = location_host(location)
    if advertised != sender:
        raise MalformedResponseError(
            f"Response and sender mismatch: LOCATION points at {advertised}, "
            f"reply came from {sender}",
            body=body,
        )

    return True
