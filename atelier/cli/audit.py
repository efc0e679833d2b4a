"""atelier-audit - run a catalog duplicate/integrity audit from the shell."""

import logging
from pathlib import Path
from typing import List, Optional

import click

from ..db.config import settings
from ..jobs.definitions.duplicates import run_catalog_audit
from ..jobs.errors import SnapshotFetchError
from ..models.report import AggregateReport, DuplicateGroup
from ..providers import StaticSnapshotProvider


def _print_groups(title: str, groups: List[DuplicateGroup]) -> None:
    if not groups:
        return
    click.echo(f"  {title}:")
    for group in groups:
        click.echo(
            f"    [{group.severity.value}] {group.identifier} "
            f"({group.count} records) - {group.reason}"
        )


def print_summary(report: AggregateReport) -> None:
    """Human-readable report."""
    totals = report.grand_totals()
    click.echo("Catalog Audit")
    click.echo("=" * 40)
    click.echo(
        f"Duplicates: {totals['total_duplicates']}  "
        f"errors: {totals['total_errors']}  "
        f"warnings: {totals['total_warnings']}  "
        f"info: {totals['total_info']}"
    )
    click.echo(f"Unused assets: {report.assets.total_unused}")
    click.echo(f"Artist integrity issues: {report.artists.total_integrity_issues}")

    if report.is_clean:
        click.echo("No issues found.")
        return

    click.echo("")
    click.echo("Assets")
    _print_groups("same path", report.assets.duplicates_by_path)
    for orphan in report.assets.unused_assets:
        click.echo(f"    [unused] {orphan.path} (created {orphan.created_at:%Y-%m-%d})")
    click.echo("Works")
    _print_groups("same slug", report.works.duplicates_by_slug)
    _print_groups("same title", report.works.duplicates_by_title)
    click.echo("Artists")
    _print_groups("same slug", report.artists.duplicates_by_slug)
    _print_groups("same name", report.artists.duplicates_by_name)
    _print_groups("similar names", report.artists.similar_names)
    for issue in report.artists.integrity_issues:
        click.echo(
            f"    [{issue.severity.value}] {issue.slug}: "
            f"{issue.issue_kind.value} - {issue.reason}"
        )
    click.echo("Categories")
    _print_groups("same slug", report.categories.duplicates_by_slug)
    click.echo("Labels")
    _print_groups("same slug", report.labels.duplicates_by_slug)


@click.command()
@click.option(
    "--snapshot",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Audit a JSON snapshot file instead of the database",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["summary", "json"]),
    default="summary",
    help="Output format",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Parallel analyzers (default: AUDIT_MAX_WORKERS)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def audit(
    snapshot: Optional[Path],
    output_format: str,
    workers: Optional[int],
    verbose: bool,
) -> None:
    """Report duplicate records, unused assets and incomplete artists."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    max_workers = workers or settings.audit_max_workers

    try:
        if snapshot is not None:
            try:
                provider = StaticSnapshotProvider.from_json_file(snapshot)
            except ValueError as e:
                raise click.ClickException(f"Invalid snapshot file: {e}") from e
            report = run_catalog_audit(provider, max_workers=max_workers)
        else:
            from ..db import get_db_session
            from ..db.repositories.snapshot import SnapshotRepository

            with get_db_session() as session:
                report = run_catalog_audit(
                    SnapshotRepository(session), max_workers=max_workers
                )
    except SnapshotFetchError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(report.model_dump_json(indent=2))
    else:
        print_summary(report)


if __name__ == "__main__":
    audit()
