"""SSDP message builders and a fake socket for tests."""

import socket
import time


def bridge_reply(ip: str, server: str = "FreeRTOS/7.4.2 UPnP/1.0 IpBridge/1.10.0", location_ip: str = None) -> str:
    location_ip = location_ip or ip
    return (
        "HTTP/1.1 200 OK\r\n"
        "HOST: 239.255.255.250:1900\r\n"
        "EXT:\r\n"
        "CACHE-CONTROL: max-age=100\r\n"
        f"LOCATION: http://{location_ip}:80/description.xml\r\n"
        f"SERVER: {server}\r\n"
        "hue-bridgeid: 001788FFFE09A206\r\n"
        "ST: upnp:rootdevice\r\n"
        "USN: uuid:2f402f80-da50-11e1-9b23-00178809a206::upnp:rootdevice\r\n"
        "\r\n"
    )


def notify_message(ip: str) -> str:
    return (
        "NOTIFY * HTTP/1.1\r\n"
        "HOST: 239.255.255.250:1900\r\n"
        "CACHE-CONTROL: max-age=1800\r\n"
        f"LOCATION: http://{ip}:49152/rootDesc.xml\r\n"
        "NT: upnp:rootdevice\r\n"
        "NTS: ssdp:alive\r\n"
        "SERVER: Linux/3.14 UPnP/1.0 MiniUPnPd/2.0\r\n"
        "USN: uuid:0a1b2c3d::upnp:rootdevice\r\n"
        "\r\n"
    )


class FakeSocket:
    """Stands in for a bound UDP socket.

    ``replies`` holds (payload, sender ip) pairs or exceptions, returned in
    order by recvfrom. Once drained, recvfrom waits out the socket timeout
    like a real socket would.
    """

    def __init__(self, replies=(), send_error=None):
        self.replies = list(replies)
        self.send_error = send_error
        self.sent = []
        self.timeouts = []
        self.closed = False

    def sendto(self, data, address):
        if self.send_error:
            raise self.send_error
        self.sent.append((data, address))
        return len(data)

    def settimeout(self, value):
        self.timeouts.append(value)

    def recvfrom(self, bufsize):
        if self.replies:
            reply = self.replies.pop(0)
            if isinstance(reply, BaseException):
                raise reply
            payload, ip = reply
            if isinstance(payload, str):
                payload = payload.encode("utf-8")
            return payload, (ip, 1900)
        time.sleep(self.timeouts[-1])
        raise socket.timeout("timed out")

    def close(self):
        self.closed = True

