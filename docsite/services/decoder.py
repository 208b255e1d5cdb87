"""Base64 codec for document bodies."""

import base64
import binascii

from docsite.errors import DecodeError


def encode(raw: bytes) -> str:
    """Return the standard base64 text form of *raw*."""
    return base64.b64encode(raw).decode("ascii")


def decode(encoded: str) -> bytes:
    """Decode a document body back into raw markdown bytes.

    Raises:
        DecodeError: if *encoded* is not valid standard base64.
    """
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid base64 content: {exc}") from exc
