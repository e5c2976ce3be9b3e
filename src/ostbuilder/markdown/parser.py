"""Markdown -> Tree."""

from __future__ import annotations

from ostbuilder.logging import get_logger
from ostbuilder.markdown.builder import TreeBuilder
from ostbuilder.markdown.extractor import CardDraft, parse_card_heading
from ostbuilder.markdown.scanner import scan
from ostbuilder.models.tree import Tree

logger = get_logger(__name__)


def parse(markdown: str) -> Tree:
    """Parse an OST markdown document into a new tree.

    Never raises for malformed input: headings that do not resolve to a card type are
    skipped (their following lines keep belonging to the previous card), and text before
    the first card is ignored.

    Args:
        markdown: Full document text.

    Returns:
        A freshly built Tree. Card ids depend only on the document content.
    """

    builder = TreeBuilder()
    current: CardDraft | None = None

    for line in scan(markdown):
        if line.is_heading:
            draft = parse_card_heading(line.text, line.level)  # type: ignore[arg-type]
            if draft is None:
                logger.debug("Skipping non-card heading (level %s): %s", line.level, line.text)
                continue
            if current is not None:
                builder.add(current)
            current = draft
        elif current is not None:
            current.content_lines.append(line.text)

    if current is not None:
        builder.add(current)

    tree = builder.build()
    logger.debug("Parsed %d cards (%d roots)", len(tree.cards), len(tree.root_ids))
    return tree
