"""Models for fragment-based sharing."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

LayoutDirection = Literal["vertical", "horizontal"]
ViewDensity = Literal["full", "compact"]


class ShareSettings(BaseModel):
    """Display settings that travel with a shared tree.

    Field aliases are camelCase so settings objects written by the web app validate as-is.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    layout_direction: LayoutDirection | None = None
    experiment_layout: LayoutDirection | None = None
    view_density: ViewDensity | None = None

    def is_empty(self) -> bool:
        return (
            self.layout_direction is None
            and self.experiment_layout is None
            and self.view_density is None
        )


class SharePayload(BaseModel):
    """Everything recovered from a share fragment."""

    markdown: str
    name: str | None = None
    settings: ShareSettings | None = None
    collapsed_ids: list[str] | None = None
