"""Tests for card heading and metric extraction."""

from __future__ import annotations

from ostbuilder.markdown.extractor import CardDraft, extract_metrics, parse_card_heading
from ostbuilder.models.card import CardStatus, CardType, Metrics


def test_type_tag_wins_over_level() -> None:
    """It should take the card type from a [Type] tag regardless of heading level."""

    draft = parse_card_heading("[Outcome] Big goal", 3)
    assert draft is not None
    assert draft.type is CardType.OUTCOME
    assert draft.title == "Big goal"
    assert draft.level == 3


def test_type_tag_is_case_insensitive() -> None:
    """It should accept tags in any case."""

    draft = parse_card_heading("[experiment] Try it @On-Track", 5)
    assert draft is not None
    assert draft.type is CardType.EXPERIMENT
    assert draft.status is CardStatus.ON_TRACK
    assert draft.title == "Try it"


def test_level_implies_type_without_tag() -> None:
    """It should map heading levels 2-5 to the four card types."""

    expected = {
        2: CardType.OUTCOME,
        3: CardType.OPPORTUNITY,
        4: CardType.SOLUTION,
        5: CardType.EXPERIMENT,
    }
    for level, card_type in expected.items():
        draft = parse_card_heading("Untagged", level)
        assert draft is not None
        assert draft.type is card_type


def test_untyped_levels_are_not_cards() -> None:
    """It should return None for untagged level-1 and level-6 headings."""

    assert parse_card_heading("Project title", 1) is None
    assert parse_card_heading("Deep note", 6) is None


def test_status_values() -> None:
    """It should recognise every status keyword at the end of the heading."""

    for raw, status in [
        ("on-track", CardStatus.ON_TRACK),
        ("at-risk", CardStatus.AT_RISK),
        ("next", CardStatus.NEXT),
        ("done", CardStatus.DONE),
        ("none", CardStatus.NONE),
    ]:
        draft = parse_card_heading(f"[Solution] Ship it @{raw}", 4)
        assert draft is not None
        assert draft.status is status
        assert draft.title == "Ship it"


def test_unknown_status_is_ignored() -> None:
    """It should drop an unknown trailing @tag and keep status none."""

    draft = parse_card_heading("[Opportunity] Test @invalid-status", 3)
    assert draft is not None
    assert draft.status is CardStatus.NONE
    assert draft.title == "Test"


def test_status_only_in_middle_is_title_text() -> None:
    """It should only read a status at the very end of the heading."""

    draft = parse_card_heading("[Solution] Email @done later", 4)
    assert draft is not None
    assert draft.status is CardStatus.NONE
    assert draft.title == "Email @done later"


def test_legacy_id_token_is_stripped() -> None:
    """It should remove {#id} tokens and not use them as ids."""

    draft = parse_card_heading("[Outcome] Goal {#abc123} @done", 2)
    assert draft is not None
    assert draft.title == "Goal"
    assert draft.status is CardStatus.DONE


def test_empty_title_gets_default() -> None:
    """It should fall back to 'New <Type>' for an empty title."""

    draft = parse_card_heading("[Opportunity] @next", 3)
    assert draft is not None
    assert draft.title == "New Opportunity"
    assert draft.status is CardStatus.NEXT


def test_extract_metrics_defaults_missing_values() -> None:
    """It should default missing metrics to zero and keep other lines."""

    metrics, rest = extract_metrics(["Intro", "- target: 12.5", "- CURRENT: 3"])
    assert metrics == Metrics(start=0, current=3, target=12.5)
    assert rest == ["Intro"]


def test_extract_metrics_non_numeric_stays_text() -> None:
    """It should leave metric-looking lines with non-numeric values alone."""

    metrics, rest = extract_metrics(["- start: invalid", "- target: 10 users"])
    assert metrics is None
    assert rest == ["- start: invalid", "- target: 10 users"]


def test_draft_finish_only_reads_metrics_for_outcomes() -> None:
    """It should keep metric lines as description text for non-outcome cards."""

    draft = CardDraft(
        type=CardType.SOLUTION,
        title="S",
        status=CardStatus.NONE,
        level=4,
        content_lines=["- start: 1", "- target: 2"],
    )
    description, metrics = draft.finish()
    assert metrics is None
    assert description == "- start: 1\n- target: 2"


def test_draft_finish_trims_description() -> None:
    """It should trim the description and return None when it is empty."""

    draft = CardDraft(
        type=CardType.OUTCOME,
        title="O",
        status=CardStatus.NONE,
        level=2,
        content_lines=["", "- start: 4", ""],
    )
    description, metrics = draft.finish()
    assert description is None
    assert metrics == Metrics(start=4)


def test_plain_trailing_mention_stays_in_title() -> None:
    """It should keep a trailing @word without a hyphen as title text."""

    draft = parse_card_heading("[Opportunity] Ping @support", 3)
    assert draft is not None
    assert draft.status is CardStatus.NONE
    assert draft.title == "Ping @support"
