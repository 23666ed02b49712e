"""Classification of raw location input."""

import re

from weather_lookup.entities import IpAddress, LocationClassification, PlainText, ZipCode

IP_PATTERN = re.compile(r"\d{1,3}(?:\.\d{1,3}){3}", re.ASCII)
ZIP_PATTERN = re.compile(r"\d{5}(?:-\d{4})?|\d{6}", re.ASCII)


def looks_like_ip(text: str) -> bool:
    """Four dot-separated groups of 1-3 digits. Octet ranges are not checked."""
    return IP_PATTERN.fullmatch(text) is not None


def looks_like_zip(text: str) -> bool:
    """A 5-digit, ZIP+4 (12345-6789) or 6-digit postal code."""
    return ZIP_PATTERN.fullmatch(text) is not None


def classify_location(text: str) -> LocationClassification:
    """Classify trimmed, non-empty input as an IP address, postal code or plain text.

    Args:
        text: The trimmed input string

    Returns:
        Exactly one of IpAddress, ZipCode or PlainText

    Raises:
        ValueError: If text is empty
    """
    if not text:
        raise ValueError("Cannot classify an empty location")

    if looks_like_ip(text):
        return IpAddress(text)
    if looks_like_zip(text):
        return ZipCode(text)
    return PlainText(text)
