"""M-SEARCH request construction."""

from dataclasses import dataclass

from ..config.schema import (
    DEFAULT_MULTICAST_GROUP,
    DEFAULT_DISCOVERY_PORT,
    DEFAULT_MX,
    DEFAULT_SEARCH_TARGET,
    DiscoveryConfig,
)

# Keep the trailing blank line: it terminates the request.
SSDP_TEMPLATE = """M-SEARCH * HTTP/1.1
HOST: {host}
ST: {search_target}
MAN: {man}
MX: {mx}

"""


@dataclass
class SearchRequest:
    """A single SSDP search request."""
    man: str
    host: str = f"{DEFAULT_MULTICAST_GROUP}:{DEFAULT_DISCOVERY_PORT}"
    search_target: str = DEFAULT_SEARCH_TARGET
    mx: int = DEFAULT_MX

    @classmethod
    def from_config(cls, config: DiscoveryConfig, man: str) -> "SearchRequest":
        return cls(
            man=man,
            host=config.host_header,
            search_target=config.search_target,
            mx=config.mx,
        )

    def render(self) -> str:
        """Fill the template and convert every line ending to CRLF."""
        body = SSDP_TEMPLATE.format(
            host=self.host,
            search_target=self.search_target,
            man=self.man,
            mx=self.mx,
        )
        return body.replace("\r\n", "\n").replace("\n", "\r\n")

    def encode(self) -> bytes:
        return self.render().encode("utf-8")
