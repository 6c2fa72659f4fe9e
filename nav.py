# nav.py
# Navigation helpers: build the Google Maps directions link for a destination
# and hand it to the browser.

import urllib.parse
import webbrowser

from config import (
    DEBUG,
    DEFAULT_ORIGIN,
    DEFAULT_TRAVEL_MODE,
    MAPS_HOST,
)

# Characters encodeURIComponent leaves alone on top of quote()'s "_.-~".
# Everything else, commas included, gets percent-encoded.
_URI_COMPONENT_SAFE = "!*'()"


class OpenError(Exception):
    """
    The link couldn't be opened.
    reason is "unsupported" (nothing here can open that URL) or
    "launch_failed" (we tried and the browser didn't come up).
    """

    def __init__(self, reason, url, message=None):
        if message is None:
            if reason == "unsupported":
                message = f"Don't know how to open this URL: {url}"
            else:
                message = f"Couldn't open navigation: {url}"
        super().__init__(message)
        self.reason = reason
        self.url = url
        self.message = message


def encode_params(params):
    """
    [(key, value), ...] -> "k1=v1&k2=v2", each key and value percent-encoded
    on its own, in the order given.
    """
    return urllib.parse.urlencode(
        params,
        safe=_URI_COMPONENT_SAFE,
        quote_via=urllib.parse.quote,
    )


def build_navigation_url(
    latitude: str,
    longitude: str,
    origin=DEFAULT_ORIGIN,
    travel_mode: str = DEFAULT_TRAVEL_MODE,
    host: str = MAPS_HOST,
) -> str:
    """
    Directions link from origin to (latitude, longitude).

    Params always go travelmode, destination, origin. travel_mode isn't
    checked; Google falls back to its own default for anything it doesn't
    know. Coordinates go in exactly as given.
    """
    origin_lat, origin_lon = origin
    params = [
        ("travelmode", travel_mode),
        ("destination", f"{latitude},{longitude}"),
        ("origin", f"{origin_lat},{origin_lon}"),
    ]
    return f"https://{host}/maps/dir/?api=1&{encode_params(params)}"


class BrowserOpener:
    """
    Opens links with the default web browser (webbrowser module).
    Anything else with can_open(url) / open(url) works as an opener too.
    """

    schemes = ("http", "https")

    def can_open(self, url: str) -> bool:
        if urllib.parse.urlsplit(url).scheme.lower() not in self.schemes:
            return False
        try:
            webbrowser.get()
        except webbrowser.Error:
            return False
        return True

    def open(self, url: str) -> None:
        if DEBUG:
            print(f"(nav: opening {url})")
        try:
            ok = webbrowser.open(url)
        except webbrowser.Error as e:
            raise OpenError("launch_failed", url, f"Couldn't open navigation: {e}") from e
        if not ok:
            raise OpenError("launch_failed", url)


def go_to_destination(destination, opener, origin=DEFAULT_ORIGIN, travel_mode=DEFAULT_TRAVEL_MODE):
    """
    Build the link for `destination` and open it.

    Asks opener.can_open() first; if that says no we raise
    OpenError("unsupported") without trying. One attempt, no retries.
    Returns the URL we opened.
    """
    url = build_navigation_url(
        destination.latitude,
        destination.longitude,
        origin=origin,
        travel_mode=travel_mode,
    )
    if not opener.can_open(url):
        if DEBUG:
            print(f"(nav: opener can't handle {url})")
        raise OpenError("unsupported", url)
    opener.open(url)
    return url
