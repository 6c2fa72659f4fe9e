# validation.py
# Checks the add-destination form before anything reaches the store.

import re

# Plain decimal notation only: optional sign, integer part, optional ".digits".
# No exponents or surrounding whitespace; no leading zeros on the integer part.
LATITUDE_RE = re.compile(r"[-+]?(?:[1-8]?\d(?:\.\d+)?|90(?:\.0+)?)", re.ASCII)
LONGITUDE_RE = re.compile(r"[-+]?(?:(?:1[0-7]\d|[1-9]?\d)(?:\.\d+)?|180(?:\.0+)?)", re.ASCII)


class ValidationError(ValueError):
    """Base for form errors. `message` is what gets shown to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingField(ValidationError):
    pass


class InvalidLatitude(ValidationError):
    def __init__(self, message="Latitude is not valid"):
        super().__init__(message)


class InvalidLongitude(ValidationError):
    def __init__(self, message="Longitude is not valid"):
        super().__init__(message)


def is_valid_latitude(text: str) -> bool:
    return LATITUDE_RE.fullmatch(text) is not None


def is_valid_longitude(text: str) -> bool:
    return LONGITUDE_RE.fullmatch(text) is not None


def validate_destination(name: str, latitude: str, longitude: str):
    """
    Validate one add-destination form.

    Checks run in a fixed order and the first failure wins:
      name, latitude, longitude present -> MissingField
      latitude in [-90, 90]             -> InvalidLatitude
      longitude in [-180, 180]          -> InvalidLongitude

    Returns (name, latitude, longitude) exactly as given. Nothing is trimmed
    or reformatted, so " 45" is rejected rather than quietly fixed.
    """
    if name == "":
        raise MissingField("Name is required")
    if latitude == "":
        raise MissingField("Latitude is required")
    if longitude == "":
        raise MissingField("Longitude is required")

    if not is_valid_latitude(latitude):
        raise InvalidLatitude()
    if not is_valid_longitude(longitude):
        raise InvalidLongitude()

    return name, latitude, longitude
