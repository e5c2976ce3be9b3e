"""Tree reconstruction from a flat stream of card drafts.

Heading levels drive nesting: a stack of open frames is kept, and each new card pops every
frame at the same or a deeper level before attaching to whatever remains on top. Skipped
levels (an outcome directly followed by a solution) therefore attach as ordinary children.
"""

from __future__ import annotations

from dataclasses import dataclass

from ostbuilder.logging import get_logger
from ostbuilder.markdown.extractor import CardDraft
from ostbuilder.models.card import Card
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME, Tree
from ostbuilder.utils.ids import format_card_id

logger = get_logger(__name__)


@dataclass
class _Frame:
    id: str
    level: int
    path: str
    child_count: int = 0


class TreeBuilder:
    """Accumulates cards into a fresh :class:`Tree`."""

    def __init__(self, name: str = DEFAULT_PROJECT_NAME) -> None:
        self._tree = Tree(name=name)
        self._stack: list[_Frame] = []
        self._root_count = 0

    def add(self, draft: CardDraft) -> Card:
        """Place a finished draft in the tree and return the created card."""

        while self._stack and self._stack[-1].level >= draft.level:
            self._stack.pop()
        parent = self._stack[-1] if self._stack else None

        card_type = draft.type.value
        if parent is not None:
            path = f"{parent.path}/{card_type}.{parent.child_count}"
        else:
            path = f"root.{self._root_count}/{card_type}"
        card_id = format_card_id(path, card_type, draft.title)

        if card_id in self._tree.cards:
            logger.warning("Card id collision for %s at %s", card_id, path)

        description, metrics = draft.finish()
        card = Card(
            id=card_id,
            type=draft.type,
            title=draft.title,
            description=description,
            status=draft.status,
            parent_id=parent.id if parent else None,
            metrics=metrics,
        )
        self._tree.cards[card_id] = card

        if parent is not None:
            self._tree.cards[parent.id].children.append(card_id)
            parent.child_count += 1
        else:
            self._tree.root_ids.append(card_id)
            self._root_count += 1

        self._stack.append(_Frame(id=card_id, level=draft.level, path=path))
        return card

    def build(self) -> Tree:
        return self._tree
