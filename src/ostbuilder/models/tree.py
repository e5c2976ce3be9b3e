"""Tree model."""

from __future__ import annotations

import uuid
from collections import Counter

from pydantic import BaseModel, Field

from ostbuilder.exceptions import CardNotFoundError
from ostbuilder.models.card import Card, CardType

DEFAULT_PROJECT_NAME = "My Opportunity Solution Tree"


def new_tree_id() -> str:
    return uuid.uuid4().hex


class Tree(BaseModel):
    """An Opportunity Solution Tree.

    The tree owns all of its cards. ``root_ids`` lists cards without a parent in document
    order; every other card is reachable through its parent's ``children``.
    """

    id: str = Field(default_factory=new_tree_id)
    name: str = DEFAULT_PROJECT_NAME
    cards: dict[str, Card] = Field(default_factory=dict)
    root_ids: list[str] = Field(default_factory=list)

    def get(self, card_id: str) -> Card:
        """Get a card by id.

        Raises:
            CardNotFoundError: If the id is unknown.
        """

        card = self.cards.get(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def descendants(self, card_id: str) -> list[str]:
        """Return ids of all cards below ``card_id`` in parent-before-children order."""

        out: list[str] = []
        stack = list(reversed(self.get(card_id).children))
        while stack:
            cid = stack.pop()
            card = self.cards.get(cid)
            if card is None:
                continue
            out.append(cid)
            stack.extend(reversed(card.children))
        return out

    def count_by_type(self) -> dict[CardType, int]:
        """Return the number of cards per type."""

        counts = Counter(card.type for card in self.cards.values())
        return {t: counts.get(t, 0) for t in CardType}
