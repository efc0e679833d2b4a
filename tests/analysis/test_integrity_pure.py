"""Tests for artist integrity rules."""

from atelier.analysis.integrity import check_artist, check_artists
from atelier.models.report import IssueKind, Severity


def _kinds(issues):
    return [(i.issue_kind, i.severity) for i in issues]


def test_complete_artist_has_no_issues(make_artist):
    assert check_artist(make_artist("1", "complete", "Complete")) == []


def test_missing_primary_bio_photo_and_links(make_artist):
    """Missing fr bio, no photo, no links -> exactly three issues."""
    artist = make_artist(
        "1",
        "someone",
        "Someone",
        bios={"fr": "", "en": "hello"},
        has_photo=False,
        external_link_count=0,
    )

    issues = check_artist(artist)

    assert _kinds(issues) == [
        (IssueKind.MISSING_BIO_FR, Severity.WARNING),
        (IssueKind.MISSING_PHOTO, Severity.WARNING),
        (IssueKind.MISSING_LINKS, Severity.INFO),
    ]
    assert all(i.record_id == "1" for i in issues)


def test_missing_both_bios(make_artist):
    artist = make_artist("1", "x", "X", bios={"fr": "  ", "en": None})

    assert _kinds(check_artist(artist)) == [
        (IssueKind.MISSING_BIO_BOTH, Severity.ERROR)
    ]


def test_missing_bio_locales_absent_from_dict(make_artist):
    artist = make_artist("1", "x", "X", bios={})
    assert _kinds(check_artist(artist)) == [
        (IssueKind.MISSING_BIO_BOTH, Severity.ERROR)
    ]


def test_missing_secondary_bio(make_artist):
    artist = make_artist("1", "x", "X", bios={"fr": "Bonjour", "en": ""})

    assert _kinds(check_artist(artist)) == [
        (IssueKind.MISSING_BIO_EN, Severity.INFO)
    ]


def test_check_artists_keeps_snapshot_order(make_artist):
    artists = [
        make_artist("b", "b", "B", has_photo=False),
        make_artist("a", "a", "A", external_link_count=0),
    ]

    issues = check_artists(artists)

    assert [(i.record_id, i.issue_kind) for i in issues] == [
        ("b", IssueKind.MISSING_PHOTO),
        ("a", IssueKind.MISSING_LINKS),
    ]
