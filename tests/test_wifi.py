import pytest

from models.wifi import WiFiCredentials
from payloads import wifi
from payloads.errors import ErrorKind, PayloadError


def test_wpa_payload_matches_wifi_grammar():
    creds = WiFiCredentials(ssid="Home", password="password123", security="WPA")
    assert wifi.validate(creds) is None
    assert wifi.encode(creds) == "WIFI:T:WPA;S:Home;P:password123;H:false;;"


def test_wpa3_is_written_as_wpa():
    creds = WiFiCredentials(ssid="Office", password="longpassword", security="WPA3", hidden=True)
    assert wifi.encode(creds) == "WIFI:T:WPA;S:Office;P:longpassword;H:true;;"


def test_open_network_has_no_password_field():
    creds = WiFiCredentials(ssid="Cafe", password="ignored", security="nopass")
    assert wifi.validate(creds) is None
    assert wifi.encode(creds) == "WIFI:T:nopass;S:Cafe;H:false;;"


def test_special_characters_are_escaped():
    creds = WiFiCredentials(ssid='My;Net,"x"\\', password="pa;ss,word", security="WPA")
    payload = wifi.encode(creds)
    assert 'S:My\\;Net\\,\\"x\\"\\\\;' in payload
    assert "P:pa\\;ss\\,word;" in payload


@pytest.mark.parametrize("length, ok", [(32, True), (33, False)])
def test_ssid_length_boundary(length, ok):
    failure = wifi.validate(WiFiCredentials(ssid="a" * length, password="password123"))
    if ok:
        assert failure is None
    else:
        assert failure.kind is ErrorKind.FORMAT_INVALID
        assert failure.field == "ssid"


def test_empty_ssid_is_missing():
    failure = wifi.validate(WiFiCredentials(ssid="", password="password123"))
    assert failure.kind is ErrorKind.MISSING_REQUIRED_FIELD


def test_ssid_with_line_break_is_rejected():
    failure = wifi.validate(WiFiCredentials(ssid="Home\nNet", password="password123"))
    assert failure.kind is ErrorKind.FORMAT_INVALID


@pytest.mark.parametrize("length, ok", [(7, False), (8, True), (63, True), (64, False)])
def test_wpa_password_length(length, ok):
    failure = wifi.validate(WiFiCredentials(ssid="Home", password="p" * length, security="WPA"))
    assert (failure is None) is ok


def test_password_required_unless_open():
    failure = wifi.validate(WiFiCredentials(ssid="Home", password=None, security="WPA"))
    assert failure.kind is ErrorKind.MISSING_REQUIRED_FIELD
    assert failure.field == "password"


@pytest.mark.parametrize(
    "password, ok",
    [
        ("abcde", True),
        ("abcdefghijklm", True),
        ("0123456789", True),
        ("0123456789ABCDEF0123456789", True),
        ("abcdef", False),
        ("012345678Z", False),
        ("pässw", False),
    ],
)
def test_wep_password_shapes(password, ok):
    failure = wifi.validate(WiFiCredentials(ssid="Old", password=password, security="WEP"))
    assert (failure is None) is ok


def test_unknown_security_type():
    creds = WiFiCredentials(ssid="Home", password="password123", security="WPA9")
    assert wifi.validate(creds).kind is ErrorKind.FORMAT_INVALID
    with pytest.raises(PayloadError):
        wifi.encode(creds)
