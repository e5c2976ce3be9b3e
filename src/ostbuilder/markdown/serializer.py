"""Tree -> markdown."""

from __future__ import annotations

from decimal import Decimal

from ostbuilder.models.card import Card, CardStatus, CardType
from ostbuilder.models.tree import Tree

TYPE_PREFIXES: dict[CardType, str] = {
    CardType.OUTCOME: "[Outcome]",
    CardType.OPPORTUNITY: "[Opportunity]",
    CardType.SOLUTION: "[Solution]",
    CardType.EXPERIMENT: "[Experiment]",
}

HEADING_LEVELS: dict[CardType, int] = {
    CardType.OUTCOME: 2,
    CardType.OPPORTUNITY: 3,
    CardType.SOLUTION: 4,
    CardType.EXPERIMENT: 5,
}


def format_number(value: float) -> str:
    """Render a metric value as plain decimal text.

    Integral floats lose the trailing ``.0``; small or large values are written without an
    exponent so the metric line parses back.
    """

    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_heading(card: Card) -> str:
    heading = f"{'#' * HEADING_LEVELS[card.type]} {TYPE_PREFIXES[card.type]} {card.title}"
    if card.status is not CardStatus.NONE:
        heading += f" @{card.status.value}"
    return heading


def serialize(tree: Tree, name: str | None = None) -> str:
    """Serialize a tree back to the OST markdown format.

    Cards are written parent-before-children in stored order. Each card block ends with a
    blank line. Ids are not written; they are recomputed on the next parse.

    Args:
        tree: Tree to serialize.
        name: Optional project name, written as a leading ``# name`` heading.

    Returns:
        Markdown text; empty for an empty tree without a name.
    """

    lines: list[str] = []
    if name:
        lines.append(f"# {name}")
        lines.append("")

    def emit(card_id: str) -> None:
        card = tree.cards.get(card_id)
        if card is None:
            return

        lines.append(format_heading(card))
        if card.description:
            lines.append(card.description)
        if card.type is CardType.OUTCOME and card.metrics is not None:
            lines.append(f"- start: {format_number(card.metrics.start)}")
            lines.append(f"- current: {format_number(card.metrics.current)}")
            lines.append(f"- target: {format_number(card.metrics.target)}")
        lines.append("")

        for child_id in card.children:
            emit(child_id)

    for root_id in tree.root_ids:
        emit(root_id)

    return "\n".join(lines)
