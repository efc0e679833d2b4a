"""Catalog audit job definition.

Fetches the five catalog snapshots, runs the duplicate/integrity analyzer
of each entity kind and aggregates the reports.
"""

import threading
import uuid
from operator import methodcaller
from typing import Any, Dict, Optional

from atelier.analysis.duplicates import (
    analyze_artists,
    analyze_assets,
    analyze_categories,
    analyze_labels,
    analyze_works,
)
from atelier.analysis.report import aggregate_reports
from atelier.models.report import AggregateReport, EntityKind

from ..framework import JobExecutor, Stage, StagedJob, register_job


def finalize_audit(results: Dict[Any, Any]) -> AggregateReport:
    """Aggregate the per-entity reports."""
    return aggregate_reports(results)


AUDIT_STAGES = [
    Stage(EntityKind.ASSET, methodcaller("fetch_assets"), analyze_assets),
    Stage(EntityKind.WORK, methodcaller("fetch_works"), analyze_works),
    Stage(EntityKind.ARTIST, methodcaller("fetch_artists"), analyze_artists),
    Stage(EntityKind.CATEGORY, methodcaller("fetch_categories"), analyze_categories),
    Stage(EntityKind.LABEL, methodcaller("fetch_labels"), analyze_labels),
]

# Register the audit job with the global registry
catalog_audit_job: StagedJob = register_job(
    StagedJob(
        name="catalog_audit",
        stages=AUDIT_STAGES,
        finalize=finalize_audit,
        max_workers=4,
    )
)


def run_catalog_audit(
    provider: Any,
    max_workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
    job_id: Optional[str] = None,
) -> AggregateReport:
    """Run a full, stateless catalog audit.

    Args:
        provider: A SnapshotProvider
        max_workers: Parallel analyzers (1 = sequential, None = job default)
        cancel_event: Optional event to cancel the run between stages
        job_id: Optional identifier for logs

    Returns:
        AggregateReport for the current snapshot

    Raises:
        SnapshotFetchError: If any snapshot could not be fetched
        JobCancelled: If cancel_event was set during the run
    """
    executor = JobExecutor(
        catalog_audit_job, cancel_event=cancel_event, max_workers=max_workers
    )
    return executor.run(job_id or str(uuid.uuid4()), provider)
