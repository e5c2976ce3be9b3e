"""Line scanner for the OST markdown format.

Splits a document into lines and classifies each one as a heading (level 1-6) or as a
plain content line.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")


@dataclass(frozen=True)
class ScannedLine:
    """One classified line.

    ``level`` is the number of ``#`` for headings and ``None`` for content lines; for a
    heading, ``text`` holds the text after the hashes, otherwise the raw line.
    """

    text: str
    level: int | None = None

    @property
    def is_heading(self) -> bool:
        return self.level is not None


def split_lines(markdown: str) -> list[str]:
    """Split a document on ``\\n``, treating ``\\r\\n`` as a single break."""

    return markdown.replace("\r\n", "\n").split("\n")


def match_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, content)`` when ``line`` is an ATX heading."""

    m = HEADING_RE.match(line)
    if not m:
        return None
    return len(m.group(1)), m.group(2)


def scan(markdown: str) -> Iterator[ScannedLine]:
    """Yield every line of ``markdown`` in order, classified."""

    for line in split_lines(markdown):
        heading = match_heading(line)
        if heading is None:
            yield ScannedLine(text=line)
        else:
            level, content = heading
            yield ScannedLine(text=content, level=level)
