"""Discovery settings data models."""

from dataclasses import dataclass, field


DEFAULT_TIMEOUT = 3.0
DEFAULT_MULTICAST_GROUP = "239.255.255.250"
DEFAULT_DISCOVERY_PORT = 1900
DEFAULT_MX = 2
DEFAULT_SEARCH_TARGET = "ssdp:all"
DEFAULT_MAN = '"ssdp:discover"'

# Hue bridges send "IpBridge" in the SERVER field
DEFAULT_VENDOR_MARKER = "ipbridge"

DEFAULT_BUFFER_SIZE = 8192


@dataclass
class DiscoveryConfig:
    """Settings for one discovery call.

    ``timeout`` is the local collection deadline. ``mx`` is only the wait
    hint advertised to responders and is independent of it.
    """
    timeout: float = DEFAULT_TIMEOUT
    multicast_group: str = DEFAULT_MULTICAST_GROUP
    multicast_port: int = DEFAULT_DISCOVERY_PORT
    listen_address: str = ""
    listen_port: int = DEFAULT_DISCOVERY_PORT
    mx: int = DEFAULT_MX
    search_target: str = DEFAULT_SEARCH_TARGET
    vendor_marker: str = DEFAULT_VENDOR_MARKER
    buffer_size: int = DEFAULT_BUFFER_SIZE
    reuse_address: bool = False
    man: str = DEFAULT_MAN

    def __post_init__(self):
        self.vendor_marker = self.vendor_marker.lower()

    @property
    def multicast_address(self) -> tuple[str, int]:
        return (self.multicast_group, self.multicast_port)

    @property
    def host_header(self) -> str:
        return f"{self.multicast_group}:{self.multicast_port}"


@dataclass
class ValidationError:
    """A single config validation problem."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of config validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({len(self.warnings)} warnings)"
            return msg
        return f"Invalid: {len(self.errors)} errors, {len(self.warnings)} warnings"
