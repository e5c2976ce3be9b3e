"""Share links: a base URL plus ``#<fragment>``."""

from __future__ import annotations

from ostbuilder.markdown.project_name import apply_project_name
from ostbuilder.models.share import SharePayload
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME
from ostbuilder.sharing.fragment import decode_fragment


def build_share_link(base: str, fragment: str) -> str:
    """Attach a fragment to ``base``, dropping any fragment ``base`` already has."""

    base = base.split("#", 1)[0]
    if not base.endswith("/"):
        base += "/"
    return f"{base}#{fragment}"


def extract_fragment(url_or_fragment: str) -> str:
    """Accept a full URL, ``#fragment`` or a bare fragment and return the fragment."""

    trimmed = (url_or_fragment or "").strip()
    _, sep, fragment = trimmed.partition("#")
    return fragment if sep else trimmed


def load_share_link(
    url_or_fragment: str, default_name: str = DEFAULT_PROJECT_NAME
) -> SharePayload | None:
    """Decode a share link into a ready-to-edit payload.

    The returned markdown starts with the ``# <name>`` heading and ``name`` is always set,
    falling back to ``default_name``. Returns ``None`` if the link does not decode.
    """

    payload = decode_fragment(extract_fragment(url_or_fragment))
    if payload is None:
        return None

    name = payload.name or default_name
    return payload.model_copy(
        update={"markdown": apply_project_name(payload.markdown, name, default_name), "name": name}
    )
