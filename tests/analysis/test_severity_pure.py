"""Tests for severity classification."""

import logging

import pytest

from atelier.analysis.severity import FALLBACK, classify, tally_severities
from atelier.models.report import EntityKind, MatchType, Severity


@pytest.mark.parametrize(
    "entity,match_type,same_context,expected",
    [
        (EntityKind.ASSET, MatchType.EXACT_PATH, None, Severity.ERROR),
        (EntityKind.WORK, MatchType.EXACT_SLUG, True, Severity.ERROR),
        (EntityKind.WORK, MatchType.EXACT_SLUG, False, Severity.WARNING),
        (EntityKind.WORK, MatchType.EXACT_NAME, True, Severity.WARNING),
        (EntityKind.WORK, MatchType.EXACT_NAME, False, Severity.INFO),
        (EntityKind.ARTIST, MatchType.EXACT_SLUG, None, Severity.ERROR),
        (EntityKind.ARTIST, MatchType.EXACT_NAME, None, Severity.WARNING),
        (EntityKind.ARTIST, MatchType.NORMALIZED_NAME, None, Severity.INFO),
        (EntityKind.CATEGORY, MatchType.EXACT_SLUG, None, Severity.ERROR),
        (EntityKind.LABEL, MatchType.EXACT_SLUG, None, Severity.ERROR),
    ],
)
def test_classify_table(entity, match_type, same_context, expected):
    severity, reason = classify(entity, match_type, same_context)
    assert severity == expected
    assert reason


def test_classify_work_slug_reasons():
    _, same = classify(EntityKind.WORK, MatchType.EXACT_SLUG, True)
    _, different = classify(EntityKind.WORK, MatchType.EXACT_SLUG, False)
    assert "same category" in same
    assert "different categories" in different


def test_classify_ignores_context_when_not_relevant():
    """Entities without a context attribute get the same answer either way."""
    assert classify(EntityKind.ARTIST, MatchType.EXACT_SLUG, True) == classify(
        EntityKind.ARTIST, MatchType.EXACT_SLUG
    )


def test_classify_gap_defaults_to_info(caplog):
    with caplog.at_level(logging.WARNING):
        result = classify(EntityKind.LABEL, MatchType.EXACT_PATH)

    assert result == FALLBACK
    assert result[0] == Severity.INFO
    assert "No severity rule" in caplog.text


def test_tally_severities_counts_every_severity():
    counts = tally_severities(
        [Severity.ERROR, Severity.INFO, Severity.ERROR]
    )
    assert counts == {Severity.ERROR: 2, Severity.WARNING: 0, Severity.INFO: 1}


def test_tally_severities_empty():
    assert tally_severities([]) == {
        Severity.ERROR: 0,
        Severity.WARNING: 0,
        Severity.INFO: 0,
    }
