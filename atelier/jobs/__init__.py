"""Staged job execution for catalog audits."""

from .definitions.duplicates import catalog_audit_job, run_catalog_audit
from .errors import JobCancelled, SnapshotFetchError
from .framework import REGISTRY, JobExecutor, Stage, StagedJob

__all__ = [
    "JobCancelled",
    "JobExecutor",
    "REGISTRY",
    "SnapshotFetchError",
    "Stage",
    "StagedJob",
    "catalog_audit_job",
    "run_catalog_audit",
]
