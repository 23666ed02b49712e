"""Location classification domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IpAddress:
    """Input shaped like a dotted-quad IPv4 address."""

    value: str


@dataclass(frozen=True)
class ZipCode:
    """Input shaped like a 5, 5+4 or 6 digit postal code."""

    value: str


@dataclass(frozen=True)
class PlainText:
    """Any other input, used verbatim as a query term."""

    value: str


LocationClassification = IpAddress | ZipCode | PlainText
