"""Per-record completeness checks for artists.

Each rule is evaluated independently, so one artist can raise several
issues. At most one biography issue is raised per artist.
"""

from typing import List, Sequence

from atelier.models.base import PRIMARY_LOCALE, SECONDARY_LOCALE
from atelier.models.report import IntegrityIssue, IssueKind, Severity
from atelier.models.snapshot import ArtistRecord

_MISSING_BIO = {
    "fr": IssueKind.MISSING_BIO_FR,
    "en": IssueKind.MISSING_BIO_EN,
}


def _issue(
    artist: ArtistRecord, kind: IssueKind, severity: Severity, reason: str
) -> IntegrityIssue:
    return IntegrityIssue(
        record_id=artist.id,
        slug=artist.slug,
        issue_kind=kind,
        severity=severity,
        reason=reason,
    )


def check_biography(artist: ArtistRecord) -> List[IntegrityIssue]:
    """Flag missing biographies: both (error), primary (warning), secondary (info)."""
    has_primary = artist.bio(PRIMARY_LOCALE) is not None
    has_secondary = artist.bio(SECONDARY_LOCALE) is not None

    if not has_primary and not has_secondary:
        return [
            _issue(
                artist,
                IssueKind.MISSING_BIO_BOTH,
                Severity.ERROR,
                "biography missing in every locale",
            )
        ]
    if not has_primary:
        return [
            _issue(
                artist,
                _MISSING_BIO[PRIMARY_LOCALE],
                Severity.WARNING,
                f"biography missing in primary locale ({PRIMARY_LOCALE})",
            )
        ]
    if not has_secondary:
        return [
            _issue(
                artist,
                _MISSING_BIO[SECONDARY_LOCALE],
                Severity.INFO,
                f"biography missing in secondary locale ({SECONDARY_LOCALE})",
            )
        ]
    return []


def check_photo(artist: ArtistRecord) -> List[IntegrityIssue]:
    if artist.has_photo:
        return []
    return [
        _issue(artist, IssueKind.MISSING_PHOTO, Severity.WARNING, "no photo")
    ]


def check_links(artist: ArtistRecord) -> List[IntegrityIssue]:
    if artist.external_link_count > 0:
        return []
    return [
        _issue(
            artist, IssueKind.MISSING_LINKS, Severity.INFO, "no external links"
        )
    ]


def check_artist(artist: ArtistRecord) -> List[IntegrityIssue]:
    """Run every rule on one artist, in a fixed order (bio, photo, links)."""
    return check_biography(artist) + check_photo(artist) + check_links(artist)


def check_artists(artists: Sequence[ArtistRecord]) -> List[IntegrityIssue]:
    """Run every rule on every artist, in snapshot order."""
    issues: List[IntegrityIssue] = []
    for artist in artists:
        issues.extend(check_artist(artist))
    return issues
