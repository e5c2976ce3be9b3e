"""Card extraction: heading text plus content lines to a typed card draft."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ostbuilder.logging import get_logger
from ostbuilder.models.card import CardStatus, CardType, Metrics

logger = get_logger(__name__)

TYPE_TAG_RE = re.compile(r"^\[(Outcome|Opportunity|Solution|Experiment)\]\s+", re.IGNORECASE)
LEGACY_ID_RE = re.compile(r"\{#[^}]+\}")
STATUS_RE = re.compile(r"@(on-track|at-risk|next|done|none)$", re.IGNORECASE)
# Trailing hyphenated @tag with an unknown value (e.g. @invalid-status): dropped from
# the title, status stays none. Plain @mentions such as @support stay in the title.
UNKNOWN_STATUS_RE = re.compile(r"(?:^|\s)@[A-Za-z][\w]*-[\w-]*$")
METRIC_RE = re.compile(
    r"^-\s*(?P<label>start|current|target):\s*(?P<value>-?\d+(?:\.\d+)?)\s*$",
    re.IGNORECASE,
)

# Heading level -> card type for headings without a [Type] tag.
LEVEL_TYPES: dict[int, CardType] = {
    2: CardType.OUTCOME,
    3: CardType.OPPORTUNITY,
    4: CardType.SOLUTION,
    5: CardType.EXPERIMENT,
}


@dataclass
class CardDraft:
    """A card heading that has been recognised but not yet placed in a tree."""

    type: CardType
    title: str
    status: CardStatus
    level: int
    content_lines: list[str] = field(default_factory=list)

    def finish(self) -> tuple[str | None, Metrics | None]:
        """Split the collected content into ``(description, metrics)``."""

        lines = self.content_lines
        metrics = None
        if self.type is CardType.OUTCOME:
            metrics, lines = extract_metrics(lines)
        description = "\n".join(lines).strip() or None
        return description, metrics


def parse_card_heading(content: str, level: int) -> CardDraft | None:
    """Turn heading text into a card draft.

    Returns ``None`` when the heading carries no ``[Type]`` tag and its level has no
    implied type (``#`` and ``######``); such headings are not cards.
    """

    m = TYPE_TAG_RE.match(content)
    if m:
        card_type = CardType(m.group(1).lower())
        remaining = content[m.end() :]
    elif level in LEVEL_TYPES:
        card_type = LEVEL_TYPES[level]
        remaining = content
    else:
        return None

    remaining = LEGACY_ID_RE.sub("", remaining).rstrip()

    status = CardStatus.NONE
    m = STATUS_RE.search(remaining)
    if m:
        status = CardStatus(m.group(1).lower())
        remaining = remaining[: m.start()]
    else:
        m = UNKNOWN_STATUS_RE.search(remaining)
        if m:
            logger.debug("Ignoring unknown status tag %r", m.group(0).strip())
            remaining = remaining[: m.start()]

    title = remaining.strip() or f"New {card_type.label}"
    return CardDraft(type=card_type, title=title, status=status, level=level)


def extract_metrics(lines: list[str]) -> tuple[Metrics | None, list[str]]:
    """Pull ``- start|current|target: <number>`` lines out of ``lines``.

    Returns the metrics (``None`` if no metric line matched) and the remaining lines.
    Labels with a non-numeric value stay in the remaining lines.
    """

    values: dict[str, float] = {}
    rest: list[str] = []
    for line in lines:
        m = METRIC_RE.match(line)
        if m:
            values[m.group("label").lower()] = float(m.group("value"))
        else:
            rest.append(line)

    if not values:
        return None, rest
    return Metrics(**values), rest
