"""ID utilities."""

from __future__ import annotations

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(n: int) -> str:
    """Render a non-negative integer in lowercase base36."""

    if n == 0:
        return "0"
    digits: list[str] = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def stable_hash(value: str) -> str:
    """DJB2-style (xor variant) 32-bit hash, rendered in base36.

    The hash runs over UTF-16 code units so that ids agree with the ones the web app
    computes for the same input.
    """

    h = 5381
    data = value.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h * 33) ^ unit) & 0xFFFFFFFF
    return to_base36(h)


def format_card_id(path: str, card_type: str, title: str, prefix: str = "n_") -> str:
    """Format a card id from its structural path, type and title.

    Uses the ``n_`` prefix (e.g. ``n_1x9k2ab``).
    """

    return f"{prefix}{stable_hash(f'{path}|{card_type}|{title}')}"
