"""URL-safe base64 over UTF-8 (RFC 4648 section 5, no padding)."""

from __future__ import annotations

import base64
import binascii
import re

_BASE64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")
_TO_STANDARD = str.maketrans("-_", "+/")


def encode_string(value: str) -> str:
    """Encode text as an unpadded base64url string."""

    encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_string(fragment: str) -> str | None:
    """Decode an unpadded base64url string back to text.

    Returns ``None`` for characters outside the base64url alphabet, impossible lengths,
    or bytes that are not valid UTF-8.
    """

    fragment = fragment.strip()
    if not _BASE64URL_RE.match(fragment):
        return None

    padded = fragment.translate(_TO_STANDARD)
    if len(padded) % 4:
        padded += "=" * (4 - len(padded) % 4)

    try:
        raw = base64.b64decode(padded, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
