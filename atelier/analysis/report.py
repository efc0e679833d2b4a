"""Assembly of the per-entity reports into one aggregate report."""

from typing import Any, Dict

from atelier.models.report import (
    AggregateReport,
    ArtistReport,
    AssetReport,
    EntityKind,
    SlugReport,
    WorkReport,
)


def aggregate_reports(reports: Dict[EntityKind, Any]) -> AggregateReport:
    """Combine the five entity reports. Totals are taken as-is.

    Args:
        reports: One report per entity kind

    Returns:
        AggregateReport

    Raises:
        KeyError: If an entity kind is missing; a report without an entity
                  kind would read as "no duplicates" for it
    """
    return AggregateReport(
        assets=_expect(reports, EntityKind.ASSET, AssetReport),
        works=_expect(reports, EntityKind.WORK, WorkReport),
        artists=_expect(reports, EntityKind.ARTIST, ArtistReport),
        categories=_expect(reports, EntityKind.CATEGORY, SlugReport),
        labels=_expect(reports, EntityKind.LABEL, SlugReport),
    )


def _expect(reports: Dict[EntityKind, Any], kind: EntityKind, report_type: type) -> Any:
    if kind not in reports:
        raise KeyError(f"Missing {kind.value} report")
    report = reports[kind]
    if not isinstance(report, report_type):
        raise TypeError(
            f"Expected {report_type.__name__} for {kind.value}, "
            f"got {type(report).__name__}"
        )
    return report
