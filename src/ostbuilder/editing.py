"""Structured card edits.

Edits never touch the tree they are given: each returns an edited deep copy. Markdown stays
the source of truth, so callers persist an edit with :func:`rebuild`, which serializes the
edited tree and parses it again (recomputing every card id).
"""

from __future__ import annotations

import uuid
from typing import Any

from ostbuilder.exceptions import CardNotFoundError
from ostbuilder.logging import get_logger
from ostbuilder.markdown import parse, serialize
from ostbuilder.models.card import Card, CardStatus, CardType
from ostbuilder.models.tree import Tree

logger = get_logger(__name__)

# Fields callers may change through update_card.
EDITABLE_FIELDS = frozenset({"title", "description", "status", "metrics"})


def new_card_id() -> str:
    """Temporary id for a card created by an edit; replaced on the next rebuild."""

    return f"tmp_{uuid.uuid4().hex[:12]}"


def rebuild(tree: Tree, name: str | None = None) -> tuple[str, Tree]:
    """Serialize ``tree`` and parse the result.

    Returns:
        ``(markdown, tree)``; the new tree keeps the name of the old one.
    """

    markdown = serialize(tree, name)
    rebuilt = parse(markdown)
    rebuilt.name = tree.name
    return markdown, rebuilt


def add_card(
    tree: Tree,
    card_type: CardType,
    parent_id: str | None = None,
    title: str | None = None,
) -> tuple[Tree, str]:
    """Append a new card under ``parent_id`` (or as a root).

    Returns:
        ``(edited_tree, new_card_id)``.
    """

    out = tree.model_copy(deep=True)
    if parent_id is not None:
        out.get(parent_id)

    card = Card(
        id=new_card_id(),
        type=card_type,
        title=title or f"New {card_type.label}",
        status=CardStatus.NONE,
        parent_id=parent_id,
    )
    out.cards[card.id] = card
    if parent_id is not None:
        out.cards[parent_id].children.append(card.id)
    else:
        out.root_ids.append(card.id)
    return out, card.id


def update_card(tree: Tree, card_id: str, **changes: Any) -> Tree:
    """Return a tree where ``card_id`` has ``changes`` applied.

    Only title, description, status and metrics can be changed; structure is edited with
    :func:`move_card`.
    """

    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update card fields: {', '.join(sorted(unknown))}")

    out = tree.model_copy(deep=True)
    card = out.get(card_id)
    data = card.model_dump()
    data.update(changes)
    out.cards[card_id] = Card.model_validate(data)
    return out


def delete_card(tree: Tree, card_id: str) -> Tree:
    """Remove a card together with all of its descendants."""

    out = tree.model_copy(deep=True)
    card = out.get(card_id)
    doomed = {card_id, *out.descendants(card_id)}

    if card.parent_id is not None and card.parent_id in out.cards:
        parent = out.cards[card.parent_id]
        parent.children = [cid for cid in parent.children if cid != card_id]
    for cid in doomed:
        del out.cards[cid]
    out.root_ids = [rid for rid in out.root_ids if rid not in doomed]

    logger.debug("Deleted %d cards under %s", len(doomed), card_id)
    return out


def move_card(tree: Tree, card_id: str, new_parent_id: str | None) -> Tree:
    """Reattach a card (and its subtree) under ``new_parent_id``, or make it a root.

    Moving a card under itself or one of its descendants leaves the tree unchanged.
    """

    card = tree.get(card_id)
    if new_parent_id is not None:
        tree.get(new_parent_id)
        if new_parent_id == card_id or new_parent_id in tree.descendants(card_id):
            logger.debug("Refusing to move %s under its own subtree", card_id)
            return tree.model_copy(deep=True)

    out = tree.model_copy(deep=True)
    if card.parent_id is not None and card.parent_id in out.cards:
        old_parent = out.cards[card.parent_id]
        old_parent.children = [cid for cid in old_parent.children if cid != card_id]

    out.root_ids = [rid for rid in out.root_ids if rid != card_id]
    if new_parent_id is not None:
        out.cards[new_parent_id].children.append(card_id)
    else:
        out.root_ids.append(card_id)
    out.cards[card_id].parent_id = new_parent_id
    return out


def copy_card(tree: Tree, card_id: str, with_children: bool = False) -> tuple[Tree, str]:
    """Duplicate a card right after the original.

    With ``with_children`` the whole subtree is cloned, otherwise the copy has no children.

    Returns:
        ``(edited_tree, copy_id)``.
    """

    out = tree.model_copy(deep=True)
    original = out.get(card_id)

    def clone(source_id: str, parent_id: str | None) -> str:
        source = out.cards[source_id]
        copy_id = new_card_id()
        copied = source.model_copy(
            update={"id": copy_id, "parent_id": parent_id, "children": []}, deep=True
        )
        out.cards[copy_id] = copied
        if with_children:
            for child_id in list(source.children):
                copied.children.append(clone(child_id, copy_id))
        return copy_id

    copy_id = clone(card_id, original.parent_id)

    if original.parent_id is not None and original.parent_id in out.cards:
        siblings = out.cards[original.parent_id].children
    else:
        siblings = out.root_ids
    siblings.insert(siblings.index(card_id) + 1, copy_id)
    return out, copy_id


__all__ = [
    "CardNotFoundError",
    "add_card",
    "copy_card",
    "delete_card",
    "move_card",
    "new_card_id",
    "rebuild",
    "update_card",
]
