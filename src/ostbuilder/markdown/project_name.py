"""Project name stored as the leading ``# <name>`` line of a document."""

from __future__ import annotations

from ostbuilder.markdown.scanner import split_lines
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME


def extract_project_name(markdown: str, default: str = DEFAULT_PROJECT_NAME) -> str:
    """Return the name from a leading ``# `` line, or ``default``."""

    lines = split_lines(markdown)
    first = lines[0].strip() if lines else ""
    if first.startswith("# "):
        return first[2:].strip() or default
    return default


def apply_project_name(markdown: str, name: str, default: str = DEFAULT_PROJECT_NAME) -> str:
    """Set the project name heading, replacing an existing one or prepending it."""

    safe_name = name.strip() or default
    lines = split_lines(markdown)
    if lines and lines[0].startswith("# "):
        lines[0] = f"# {safe_name}"
        return "\n".join(lines)
    return "\n".join([f"# {safe_name}", "", markdown]).lstrip()
