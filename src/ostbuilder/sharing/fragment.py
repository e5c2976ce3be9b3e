"""Share fragment codec.

A fragment is the base64url text after ``#`` in a share URL. Current fragments wrap a
compact JSON envelope::

    {"v": 2, "m": "<markdown>", "n": "<name>", "s": "hvc", "c": "id1.id2"}

Pre-envelope (legacy) fragments are the base64url markdown alone; they still decode.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from ostbuilder.logging import get_logger
from ostbuilder.models.share import SharePayload, ShareSettings
from ostbuilder.utils.base64url import decode_string, encode_string

logger = get_logger(__name__)

ENVELOPE_VERSION = 2

# Position-wise one-letter codes for compact settings.
_DIRECTION_CODES = {"horizontal": "h", "vertical": "v"}
_DENSITY_CODES = {"compact": "c", "full": "f"}
_DIRECTION_NAMES = {v: k for k, v in _DIRECTION_CODES.items()}
_DENSITY_NAMES = {v: k for k, v in _DENSITY_CODES.items()}
_UNSET = "-"

COLLAPSED_IDS_SEPARATOR = "."


def encode_settings(settings: ShareSettings | None) -> str | None:
    """Compact settings to at most three characters (layout, experiment, density).

    Unset positions before a set one are written as ``-``; trailing unset positions are
    dropped. Returns ``None`` when nothing is set.
    """

    if settings is None:
        return None
    codes = [
        _DIRECTION_CODES.get(settings.layout_direction or "", _UNSET),
        _DIRECTION_CODES.get(settings.experiment_layout or "", _UNSET),
        _DENSITY_CODES.get(settings.view_density or "", _UNSET),
    ]
    encoded = "".join(codes).rstrip(_UNSET)
    return encoded or None


def decode_settings(value: str | None) -> ShareSettings | None:
    """Expand compact settings; unknown characters leave their position unset."""

    if not value or not isinstance(value, str):
        return None
    chars = (list(value) + ["", "", ""])[:3]
    settings = ShareSettings(
        layout_direction=_DIRECTION_NAMES.get(chars[0]),
        experiment_layout=_DIRECTION_NAMES.get(chars[1]),
        view_density=_DENSITY_NAMES.get(chars[2]),
    )
    return None if settings.is_empty() else settings


def encode_collapsed_ids(ids: Sequence[str] | None) -> str | None:
    """Join collapsed card ids with ``.``.

    Ids containing ``.`` do not survive a round trip; the wire format has no escaping.
    """

    if not ids:
        return None
    return COLLAPSED_IDS_SEPARATOR.join(ids)


def decode_collapsed_ids(value: str | None) -> list[str] | None:
    if not value or not isinstance(value, str):
        return None
    ids = [part.strip() for part in value.split(COLLAPSED_IDS_SEPARATOR)]
    ids = [i for i in ids if i]
    return ids or None


def encode_fragment(
    markdown: str,
    name: str | None = None,
    settings: ShareSettings | None = None,
    collapsed_ids: Sequence[str] | None = None,
) -> str:
    """Encode markdown and display state into a URL-safe fragment.

    Args:
        markdown: Document text.
        name: Optional project name.
        settings: Optional display settings.
        collapsed_ids: Optional ids of collapsed cards.

    Returns:
        Unpadded base64url text of the v2 JSON envelope.
    """

    envelope: dict[str, Any] = {"v": ENVELOPE_VERSION, "m": markdown, "n": name or ""}
    compact_settings = encode_settings(settings)
    if compact_settings is not None:
        envelope["s"] = compact_settings
    compact_ids = encode_collapsed_ids(collapsed_ids)
    if compact_ids is not None:
        envelope["c"] = compact_ids

    payload = json.dumps(envelope, ensure_ascii=False, separators=(",", ":"))
    return encode_string(payload)


def _settings_from_envelope(value: Any) -> ShareSettings | None:
    if isinstance(value, str):
        return decode_settings(value)
    if isinstance(value, dict):
        try:
            settings = ShareSettings.model_validate(value)
        except ValidationError:
            logger.debug("decode_fragment: dropping invalid settings object")
            return None
        return None if settings.is_empty() else settings
    return None


def decode_fragment(fragment: str) -> SharePayload | None:
    """Decode a fragment produced by :func:`encode_fragment` or the legacy format.

    Returns ``None`` (never raises) when the fragment is empty, is not base64url, or does
    not contain UTF-8 text.
    """

    if not fragment:
        return None

    decoded = decode_string(fragment)
    if not decoded:
        logger.debug("decode_fragment: not a base64url UTF-8 payload")
        return None

    try:
        envelope = json.loads(decoded)
    except (ValueError, RecursionError):
        envelope = None

    if isinstance(envelope, dict) and isinstance(envelope.get("m"), str):
        name = envelope.get("n")
        return SharePayload(
            markdown=envelope["m"],
            name=name if isinstance(name, str) and name else None,
            settings=_settings_from_envelope(envelope.get("s")),
            collapsed_ids=decode_collapsed_ids(envelope.get("c")),
        )

    logger.debug("decode_fragment: no v2 envelope, treating payload as legacy markdown")
    return SharePayload(markdown=decoded)
