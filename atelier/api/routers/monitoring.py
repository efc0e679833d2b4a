"""Monitoring API router - catalog duplicate and integrity report."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from ...db import get_db
from ...db.config import settings
from ...db.repositories.snapshot import SnapshotRepository
from ...jobs.definitions.duplicates import run_catalog_audit
from ...jobs.errors import SnapshotFetchError
from ...models.report import AggregateReport
from ...providers import SnapshotProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/monitoring", tags=["monitoring"])


def get_snapshot_provider(session: Session = Depends(get_db)) -> SnapshotProvider:
    """Snapshot provider backed by the request's database session."""
    return SnapshotRepository(session)


@router.get("/duplicates", response_model=AggregateReport)
def detect_duplicates(
    workers: Optional[int] = Query(None, ge=1, le=5),
    provider: SnapshotProvider = Depends(get_snapshot_provider),
) -> AggregateReport:
    """Detect duplicates, orphan assets and incomplete artists."""
    try:
        return run_catalog_audit(
            provider, max_workers=workers or settings.audit_max_workers
        )
    except SnapshotFetchError as e:
        logger.error(f"Error detecting duplicates: {e}")
        raise HTTPException(
            status_code=503, detail="Failed to load catalog snapshot"
        ) from e


@router.get("/duplicates/summary")
def duplicates_summary(
    provider: SnapshotProvider = Depends(get_snapshot_provider),
) -> Dict[str, Any]:
    """Counters only, for dashboard widgets."""
    try:
        report = run_catalog_audit(provider, max_workers=settings.audit_max_workers)
    except SnapshotFetchError as e:
        logger.error(f"Error detecting duplicates: {e}")
        raise HTTPException(
            status_code=503, detail="Failed to load catalog snapshot"
        ) from e

    summary: Dict[str, Any] = {
        kind.value: {"total_duplicates": entity.total_duplicates}
        for kind, entity in report.entity_reports().items()
    }
    summary["asset"]["total_unused"] = report.assets.total_unused
    summary["artist"]["total_integrity_issues"] = report.artists.total_integrity_issues
    summary["totals"] = report.grand_totals()
    return summary
