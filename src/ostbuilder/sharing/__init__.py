"""Fragment-only sharing: no server round trip."""

from __future__ import annotations

from ostbuilder.sharing.fragment import decode_fragment, encode_fragment
from ostbuilder.sharing.links import build_share_link, extract_fragment, load_share_link

__all__ = [
    "build_share_link",
    "decode_fragment",
    "encode_fragment",
    "extract_fragment",
    "load_share_link",
]
