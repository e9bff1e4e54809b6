"""SSDP reply header parsing.

Response example (Hue bridge):

    HTTP/1.1 200 OK
    HOST: 239.255.255.250:1900
    EXT:
    CACHE-CONTROL: max-age=100
    LOCATION: http://192.168.178.241:80/description.xml
    SERVER: FreeRTOS/7.4.2 UPnP/1.0 IpBridge/1.10.0
    hue-bridgeid: 001788FFFE09A206
    ST: upnp:rootdevice
    USN: uuid:2f402f80-da50-11e1-9b23-00178809a206::upnp:rootdevice

Folded (multi-line) header values are not supported.
"""

from ..errors import MalformedResponseError

URL_SCHEME = "http://"


def parse_headers(body: str) -> dict[str, str]:
    """Parse reply headers into a mapping of lowercased field name to value.

    Lines are split on LF only, with trailing CRs dropped. The start line is
    skipped. When a field repeats, the first value wins.
    Lines without a colon are ignored and parsing stops at the blank line
    that ends the header block.
    """
    headers: dict[str, str] = {}

    for line in body.split("\n")[1:]:
        line = line.rstrip("\r")
        if not line.strip():
            break
        if ":" not in line:
            continue
        name, value = line.split(":", 1)
        name = name.strip().lower()
        if name and name not in headers:
            headers[name] = value.strip()

    return headers


def location_host(location: str) -> str:
    """Extract the host between ``http://`` and the next colon.

    A URL without an explicit port yields everything after the scheme,
    which will not match a bare IP address.

    Raises:
        MalformedResponseError: If the URL has no http:// scheme.
    """
    lowered = location.lower()
    start = lowered.find(URL_SCHEME)
    if start < 0:
        raise MalformedResponseError(f"Invalid LOCATION URL: {location}")

    rest = location[start + len(URL_SCHEME):]
    return rest.split(":", 1)[0]
