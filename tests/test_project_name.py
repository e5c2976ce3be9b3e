"""Tests for project name helpers."""

from __future__ import annotations

from ostbuilder.markdown import apply_project_name, extract_project_name
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME


def test_extract_project_name() -> None:
    """It should read the name from a leading # line only."""

    assert extract_project_name("# Roadmap\n## [Outcome] A\n") == "Roadmap"
    assert extract_project_name("## [Outcome] A\n") == DEFAULT_PROJECT_NAME
    assert extract_project_name("") == DEFAULT_PROJECT_NAME
    assert extract_project_name("#  \n", default="Fallback") == "Fallback"


def test_apply_project_name() -> None:
    """It should replace an existing heading or prepend one."""

    assert apply_project_name("# Old\n\nbody", "New") == "# New\n\nbody"
    assert apply_project_name("## [Outcome] A\n", "Plan") == "# Plan\n\n## [Outcome] A\n"
    assert apply_project_name("x", "   ") == f"# {DEFAULT_PROJECT_NAME}\n\nx"
