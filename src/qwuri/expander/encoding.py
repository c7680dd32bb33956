"""Percent-encoding for expanded values."""

from urllib.parse import quote

# RFC 3986 section 2.2
RESERVED = ":/?#[]@!$&'()*+,;="


def encode_component(value: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(value, safe="")


def encode_reserved(value: str) -> str:
    """Percent-encode everything except unreserved and reserved characters."""
    return quote(value, safe=RESERVED)
