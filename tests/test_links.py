"""Tests for share link helpers."""

from __future__ import annotations

from ostbuilder.models.share import ShareSettings
from ostbuilder.models.tree import DEFAULT_PROJECT_NAME
from ostbuilder.sharing import build_share_link, encode_fragment, extract_fragment, load_share_link


def test_build_share_link() -> None:
    """It should replace any existing fragment and ensure a trailing slash."""

    assert build_share_link("https://x.dev", "abc") == "https://x.dev/#abc"
    assert build_share_link("https://x.dev/app/#old", "abc") == "https://x.dev/app/#abc"


def test_extract_fragment() -> None:
    """It should accept full URLs, #fragments and bare fragments."""

    assert extract_fragment("https://x.dev/#abc") == "abc"
    assert extract_fragment("#abc") == "abc"
    assert extract_fragment("  abc  ") == "abc"
    assert extract_fragment("") == ""


def test_load_share_link_applies_name() -> None:
    """It should prepend the shared name as the project heading."""

    fragment = encode_fragment(
        "## [Outcome] A\n", "Plan", ShareSettings(view_density="compact"), ["n_1"]
    )
    loaded = load_share_link(build_share_link("https://x.dev", fragment))
    assert loaded is not None
    assert loaded.markdown == "# Plan\n\n## [Outcome] A\n"
    assert loaded.name == "Plan"
    assert loaded.settings == ShareSettings(view_density="compact")
    assert loaded.collapsed_ids == ["n_1"]


def test_load_share_link_replaces_existing_heading() -> None:
    """It should overwrite an existing leading # heading with the shared name."""

    loaded = load_share_link("#" + encode_fragment("# Old\n\n## [Outcome] A\n", "New"))
    assert loaded is not None
    assert loaded.markdown == "# New\n\n## [Outcome] A\n"


def test_load_share_link_defaults_name() -> None:
    """It should fall back to the default project name."""

    loaded = load_share_link(encode_fragment("## [Outcome] A\n"))
    assert loaded is not None
    assert loaded.name == DEFAULT_PROJECT_NAME
    assert loaded.markdown.startswith(f"# {DEFAULT_PROJECT_NAME}\n\n")


def test_load_share_link_failure() -> None:
    """It should return None for links that do not decode."""

    assert load_share_link("https://x.dev/#!!!") is None
    assert load_share_link("https://x.dev/") is None
