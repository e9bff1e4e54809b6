"""SSDP discovery of Hue bridges.

Sends one M-SEARCH to the SSDP multicast group, then collects unicast replies
on the same socket until a fixed deadline passes. Each distinct sender is
validated once; the addresses of valid bridges are returned.
"""

import logging
import socket
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config.schema import DiscoveryConfig
from ..errors import BindError, MalformedResponseError, ReceiveError, SendError
from ..validators.response_validator import is_valid_response
from .deadline import Deadline
from .search_request import SearchRequest

logger = logging.getLogger(__name__)

SocketFactory = Callable[[DiscoveryConfig], socket.socket]


@dataclass
class DiscoveryResult:
    """Outcome of one discovery call."""
    addresses: list[str] = field(default_factory=list)
    responders: list[str] = field(default_factory=list)
    duration: float = 0.0

    @property
    def response_count(self) -> int:
        """Number of distinct hosts that replied."""
        return len(self.responders)

    def __str__(self) -> str:
        return (
            f"{len(self.addresses)} bridge(s) out of {self.response_count} "
            f"responder(s) in {self.duration:.1f}s"
        )


def create_socket(config: DiscoveryConfig) -> socket.socket:
    """Create the IPv4 UDP socket used for both sending and receiving."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        if config.reuse_address:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((config.listen_address, config.listen_port))
    except OSError:
        sock.close()
        raise
    return sock


class SSDPCollector:
    """Discovers Hue bridges with a single SSDP search."""

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        socket_factory: Optional[SocketFactory] = None,
    ):
        """Initialize the collector.

        Args:
            config: Discovery settings. Default: DiscoveryConfig().
            socket_factory: Creates a bound socket from the config.
                Default: create_socket.
        """
        self.config = config or DiscoveryConfig()
        self.socket_factory = socket_factory or create_socket

    def discover(self, man: Optional[str] = None) -> DiscoveryResult:
        """Search for bridges and collect replies until the deadline.

        The socket is local to the call, so one collector can run several
        discoveries at once.

        Args:
            man: Value of the MAN header. Default: config.man.

        Returns:
            DiscoveryResult with valid bridge addresses and responder count.

        Raises:
            BindError: If the receiving socket cannot be opened.
            SendError: If the search request cannot be sent.
            ReceiveError: On a transport error other than the deadline.
            MalformedResponseError: If a reply violates the protocol.

            Errors raised after the request was sent carry the partial
            result in their ``result`` attribute.
        """
        if man is None:
            man = self.config.man
        result = DiscoveryResult()
        start_time = time.monotonic()

        try:
            sock = self.socket_factory(self.config)
        except OSError as e:
            raise BindError(
                f"Cannot listen on UDP port {self.config.listen_port}: {e}",
                result=result,
            ) from e

        deadline = Deadline(self.config.timeout)

        try:
            self._send(sock, SearchRequest.from_config(self.config, man), result)
            self._collect(sock, deadline, result)
        finally:
            result.duration = time.monotonic() - start_time
            sock.close()

        logger.info("Discovery finished: %s", result)
        return result

    def _send(self, sock: socket.socket, request: SearchRequest, result: DiscoveryResult) -> None:
        try:
            sock.sendto(request.encode(), self.config.multicast_address)
        except OSError as e:
            raise SendError(
                f"Cannot send M-SEARCH to {self.config.host_header}: {e}",
                result=result,
            ) from e
        logger.debug("Sent M-SEARCH to %s (MAN: %s)", self.config.host_header, request.man)

    def _collect(self, sock: socket.socket, deadline: Deadline, result: DiscoveryResult) -> None:
        """Receive replies until the deadline passes."""
        while True:
            remaining = deadline.remaining
            if remaining <= 0:
                return

            sock.settimeout(remaining)
            try:
                data, addr = sock.recvfrom(self.config.buffer_size)
            except socket.timeout:
                return
            except OSError as e:
                raise ReceiveError(f"Receiving SSDP replies failed: {e}", result=result) from e

            host = addr[0]
            if host in result.responders:
                logger.debug("Duplicate reply from %s", host)
                continue
            result.responders.append(host)

            body = data.decode("utf-8", errors="replace")
            try:
                valid = is_valid_response(body, host, self.config.vendor_marker)
            except MalformedResponseError as e:
                e.result = result
                raise

            if not valid:
                continue

            logger.info("Found bridge at %s", host)
            result.addresses.append(host)


def discover(man: Optional[str] = None, config: Optional[DiscoveryConfig] = None) -> DiscoveryResult:
    """Run one discovery call with the given settings."""
    return SSDPCollector(config).discover(man)
