"""Card models.

A card is one node of an Opportunity Solution Tree and corresponds to exactly one heading
block in the markdown format.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CardType(str, Enum):
    """The four levels of the OST taxonomy."""

    OUTCOME = "outcome"
    OPPORTUNITY = "opportunity"
    SOLUTION = "solution"
    EXPERIMENT = "experiment"

    @property
    def label(self) -> str:
        """Capitalised name, e.g. ``Outcome``."""

        return self.value.capitalize()


class CardStatus(str, Enum):
    """Progress marker written as ``@<status>`` at the end of a heading."""

    ON_TRACK = "on-track"
    AT_RISK = "at-risk"
    NEXT = "next"
    DONE = "done"
    NONE = "none"


class Metrics(BaseModel):
    """Progress metrics carried by outcome cards."""

    start: float = 0
    current: float = 0
    target: float = 0


class Card(BaseModel):
    """A single OST node."""

    id: str
    type: CardType
    title: str = Field(min_length=1)
    description: str | None = None
    status: CardStatus = CardStatus.NONE

    parent_id: str | None = None
    children: list[str] = Field(default_factory=list)

    metrics: Metrics | None = None
