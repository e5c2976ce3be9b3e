"""Pydantic models used across the project."""

from __future__ import annotations

from ostbuilder.models.card import Card, CardStatus, CardType, Metrics
from ostbuilder.models.share import ShareSettings, SharePayload
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME, Tree

__all__ = [
    "Card",
    "CardStatus",
    "CardType",
    "DEFAULT_PROJECT_NAME",
    "Metrics",
    "ShareSettings",
    "SharePayload",
    "Tree",
]
