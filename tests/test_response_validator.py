import ipaddress

import pytest

from hue_discovery.errors import MalformedResponseError
from hue_discovery.validators.response_validator import is_valid_response

from tests.helpers import bridge_reply, notify_message


def test_conformant_reply_is_valid():
    assert is_valid_response(bridge_reply("192.168.1.5"), "192.168.1.5") is True


def test_accepts_ip_address_object():
    sender = ipaddress.IPv4Address("192.168.1.5")

    assert is_valid_response(bridge_reply("192.168.1.5"), sender) is True


def test_same_input_gives_same_answer():
    body = bridge_reply("192.168.1.5")

    assert is_valid_response(body, "192.168.1.5") == is_valid_response(body, "192.168.1.5")
    with pytest.raises(MalformedResponseError):
        is_valid_response(body, "192.168.1.6")
    with pytest.raises(MalformedResponseError):
        is_valid_response(body, "192.168.1.6")


def test_notify_is_silently_ignored():
    assert is_valid_response(notify_message("10.0.0.9"), "10.0.0.9") is False


def test_unknown_start_line_is_an_error():
    with pytest.raises(MalformedResponseError, match="Invalid SSDP response header"):
        is_valid_response("HTTP/1.1 404 Not Found\r\n\r\n", "10.0.0.1")


@pytest.mark.parametrize("field_name", ["USN", "ST"])
def test_missing_required_field_is_an_error(field_name):
    body = "\r\n".join(
        line for line in bridge_reply("10.0.0.1").split("\r\n")
        if not line.startswith(f"{field_name}:")
    )

    with pytest.raises(MalformedResponseError, match=field_name.lower()):
        is_valid_response(body, "10.0.0.1")


def test_non_bridge_device_is_silently_ignored():
    body = bridge_reply("10.0.0.1", server="Linux/3.14 UPnP/1.0 MiniUPnPd/2.0")

    assert is_valid_response(body, "10.0.0.1") is False


def test_vendor_marker_is_case_insensitive():
    body = bridge_reply("10.0.0.1", server="FreeRTOS UPnP/1.0 IPBRIDGE/1.10.0")

    assert is_valid_response(body, "10.0.0.1") is True


def test_custom_vendor_marker():
    body = bridge_reply("10.0.0.1", server="Linux UPnP/1.0 Sonos/57.3")

    assert is_valid_response(body, "10.0.0.1") is False
    assert is_valid_response(body, "10.0.0.1", vendor_marker="Sonos") is True


def test_missing_location_is_an_error():
    body = "\r\n".join(
        line for line in bridge_reply("10.0.0.1").split("\r\n")
        if not line.startswith("LOCATION:")
    )

    with pytest.raises(MalformedResponseError, match="no LOCATION"):
        is_valid_response(body, "10.0.0.1")


def test_location_matching_sender():
    body = bridge_reply("192.168.1.5")

    assert is_valid_response(body, "192.168.1.5") is True
    with pytest.raises(MalformedResponseError, match="mismatch"):
        is_valid_response(body, "192.168.1.6")


def test_location_without_port_does_not_match():
    body = bridge_reply("10.0.0.1").replace("http://10.0.0.1:80/", "http://10.0.0.1/")

    with pytest.raises(MalformedResponseError, match="mismatch"):
        is_valid_response(body, "10.0.0.1")


def test_error_keeps_body():
    body = "garbage"

    with pytest.raises(MalformedResponseError) as excinfo:
        is_valid_response(body, "10.0.0.1")

    assert excinfo.value.body == body
    assert excinfo.value.result is None


def test_doubled_cr_line_endings_are_valid():
    body = bridge_reply("10.0.0.5").replace("\r\n", "\r\r\n")

    assert is_valid_response(body, "10.0.0.5") is True


def test_control_character_in_header_value_is_valid():
    body = bridge_reply("10.0.0.5").replace("IpBridge/1.10.0", "IpBridge/1.10.0\x1c")

    assert is_valid_response(body, "10.0.0.5") is True
