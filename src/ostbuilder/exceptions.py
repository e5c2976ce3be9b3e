"""Exception hierarchy for the editing API.

Parsing, serialization and fragment decoding never raise for malformed input; these
exceptions only cover operations addressed at a specific card.
"""

from __future__ import annotations


class OSTError(Exception):
    """Base class for OST Builder errors."""


class CardNotFoundError(OSTError, KeyError):
    """Raised when a card id is not present in the tree."""

    def __init__(self, card_id: str) -> None:
        super().__init__(card_id)
        self.card_id = card_id

    def __str__(self) -> str:
        return f"card not found: {self.card_id}"
