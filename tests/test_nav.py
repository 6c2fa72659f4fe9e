import webbrowser
from unittest.mock import MagicMock, patch

import pytest

from destinations import Destination
from nav import (
    BrowserOpener,
    OpenError,
    build_navigation_url,
    encode_params,
    go_to_destination,
)

ISTANBUL = ("41.0052041", "28.8473737")


def test_url_shape_and_param_order():
    url = build_navigation_url("41.0", "29.0", origin=ISTANBUL, host="www.google.com")
    assert url == (
        "https://www.google.com/maps/dir/?api=1"
        "&travelmode=driving"
        "&destination=41.0%2C29.0"
        "&origin=41.0052041%2C28.8473737"
    )


def test_defaults_follow_config():
    url = build_navigation_url("41.0", "29.0")
    assert url.startswith("https://www.google.com/maps/dir/?api=1&travelmode=driving&")
    query = url.split("?api=1&", 1)[1]
    keys = [pair.split("=", 1)[0] for pair in query.split("&")]
    assert keys == ["travelmode", "destination", "origin"]
    assert "destination=41.0%2C29.0" in query


def test_travel_mode_passes_through():
    url = build_navigation_url("1", "2", origin=("0", "0"), travel_mode="walking")
    assert "travelmode=walking&" in url
    url = build_navigation_url("1", "2", origin=("0", "0"), travel_mode="hovercraft")
    assert "travelmode=hovercraft&" in url


def test_values_are_encoded_as_a_unit():
    url = build_navigation_url("-12.5", "+7", origin=("0", "0"), travel_mode="a b&c=d")
    assert "travelmode=a%20b%26c%3Dd" in url
    assert "destination=-12.5%2C%2B7" in url


def test_encode_params_matches_uri_component_rules():
    assert encode_params([("k", "A-z_0.9~!*'()")]) == "k=A-z_0.9~!*'()"
    assert encode_params([("k y", "a/b?c#")]) == "k%20y=a%2Fb%3Fc%23"
    assert encode_params([("q", "é")]) == "q=%C3%A9"


def test_builder_is_idempotent():
    first = build_navigation_url("41.0", "29.0")
    second = build_navigation_url("41.0", "29.0")
    assert first == second
    # no leftovers from a call with other arguments
    build_navigation_url("1", "1", travel_mode="transit")
    assert build_navigation_url("41.0", "29.0") == first


class FakeOpener:
    def __init__(self, supported=True, fail=False):
        self.supported = supported
        self.fail = fail
        self.checked = []
        self.opened = []

    def can_open(self, url):
        self.checked.append(url)
        return self.supported

    def open(self, url):
        if self.fail:
            raise OpenError("launch_failed", url)
        self.opened.append(url)


def test_go_checks_then_opens_once():
    opener = FakeOpener()
    dest = Destination("1", "Home", "41.0", "29.0")
    url = go_to_destination(dest, opener, origin=ISTANBUL)
    assert opener.checked == [url]
    assert opener.opened == [url]
    assert "destination=41.0%2C29.0" in url


def test_go_unsupported_never_opens():
    opener = FakeOpener(supported=False)
    dest = Destination("1", "Home", "41.0", "29.0")
    with pytest.raises(OpenError) as exc:
        go_to_destination(dest, opener)
    assert exc.value.reason == "unsupported"
    assert exc.value.message == f"Don't know how to open this URL: {exc.value.url}"
    assert opener.opened == []


def test_go_launch_failure_propagates_without_retry():
    opener = FakeOpener(fail=True)
    dest = Destination("1", "Home", "41.0", "29.0")
    with pytest.raises(OpenError) as exc:
        go_to_destination(dest, opener, travel_mode="walking")
    assert exc.value.reason == "launch_failed"
    assert opener.checked == [exc.value.url]


@patch("nav.webbrowser.get")
def test_browser_opener_can_open_http_only(mock_get):
    mock_get.return_value = MagicMock()
    opener = BrowserOpener()
    assert opener.can_open("https://www.google.com/maps/dir/?api=1")
    assert opener.can_open("HTTP://example.com")
    assert not opener.can_open("geo:41.0,29.0")
    assert not opener.can_open("comgooglemaps://?daddr=1,2")


@patch("nav.webbrowser.get", side_effect=webbrowser.Error("could not locate runnable browser"))
def test_browser_opener_without_browser(mock_get):
    assert not BrowserOpener().can_open("https://www.google.com/")


@patch("nav.webbrowser.open", return_value=True)
def test_browser_opener_open(mock_open):
    BrowserOpener().open("https://www.google.com/")
    mock_open.assert_called_once_with("https://www.google.com/")


@patch("nav.webbrowser.open", return_value=False)
def test_browser_opener_open_refused(mock_open):
    with pytest.raises(OpenError) as exc:
        BrowserOpener().open("https://www.google.com/")
    assert exc.value.reason == "launch_failed"
    assert exc.value.message == "Couldn't open navigation: https://www.google.com/"
    assert mock_open.call_count == 1


@patch("nav.webbrowser.open", side_effect=webbrowser.Error("boom"))
def test_browser_opener_wraps_browser_errors(mock_open):
    with pytest.raises(OpenError) as exc:
        BrowserOpener().open("https://www.google.com/")
    assert exc.value.reason == "launch_failed"
    assert "boom" in exc.value.message
