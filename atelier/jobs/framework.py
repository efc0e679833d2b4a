"""
Generic Staged Job Framework.

This module provides a small framework for jobs that follow a common
pattern:
1. Fetch the input of every stage from a snapshot provider
2. Analyze each stage's input, optionally in parallel
3. Finalize/aggregate the per-stage results

Fetching happens before any analysis so that a provider failure aborts
the run without producing a partial result. Stages are independent: they
read disjoint inputs and produce disjoint results, so they can run in a
thread pool without locking.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .errors import JobCancelled, SnapshotFetchError

logger = logging.getLogger(__name__)

# Type variable for stage inputs (e.g., a list of asset records)
T = TypeVar("T")


@dataclass
class Stage(Generic[T]):
    """
    One independent unit of work inside a StagedJob.

    Attributes:
        name: Key of this stage's result in the results dict
        fetch: Function that loads the stage input from a provider
        analyze: Pure function that turns the input into a result
    """

    name: Any
    fetch: Callable[[Any], T]
    analyze: Callable[[T], Any]


@dataclass
class StagedJob:
    """
    Definition of a staged job.

    Attributes:
        name: Unique identifier for this job type
        stages: Stages to run; order is the fetch and sequential run order
        finalize: Function that aggregates the results dict (keyed by stage name)
        max_workers: Maximum parallel stages (default: 4, 1 runs sequentially)
    """

    name: str
    stages: List[Stage]
    finalize: Callable[[Dict[Any, Any]], Any]
    max_workers: int = 4


class JobRegistry:
    """
    Registry for job definitions.

    Provides a central place to register and retrieve job definitions
    by name.
    """

    def __init__(self) -> None:
        """Initialize an empty job registry."""
        self._jobs: Dict[str, StagedJob] = {}

    def register(self, job: StagedJob) -> None:
        """
        Register a job definition.

        Args:
            job: The StagedJob to register

        Raises:
            ValueError: If a job with the same name is already registered
        """
        if job.name in self._jobs:
            raise ValueError(f"Job '{job.name}' is already registered")
        self._jobs[job.name] = job

    def get(self, name: str) -> Optional[StagedJob]:
        """
        Retrieve a job by name.

        Args:
            name: The job name to look up

        Returns:
            The StagedJob if found, None otherwise
        """
        return self._jobs.get(name)


# Global registry instance
REGISTRY = JobRegistry()


def register_job(job: StagedJob) -> StagedJob:
    """
    Register a job in the global registry.

    Returns the same job so definitions can be registered inline:

        audit_job = register_job(StagedJob(name="audit", ...))
    """
    REGISTRY.register(job)
    return job


class JobExecutor:
    """
    Executor for staged jobs.

    JobExecutor manages the execution lifecycle of a StagedJob:
    1. Fetch - load every stage input, failing fast on provider errors
    2. Analyze - run stages sequentially or in a thread pool
    3. Finalize - aggregate stage results

    Cancellation is cooperative: the cancel event is checked before each
    fetch and before each stage starts. A cancelled run raises JobCancelled
    and returns nothing.
    """

    def __init__(
        self,
        job: StagedJob,
        cancel_event: Optional[threading.Event] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        """
        Initialize a job executor.

        Args:
            job: The StagedJob definition to execute
            cancel_event: Optional event that cancels the run when set
            max_workers: Override for job.max_workers
        """
        self.job = job
        self.cancel_event = cancel_event or threading.Event()
        self.max_workers = max_workers if max_workers is not None else job.max_workers

    def run(self, job_id: str, provider: Any) -> Any:
        """
        Execute the job against a provider.

        Args:
            job_id: Identifier for this execution (used in logs)
            provider: Object handed to every stage's fetch function

        Returns:
            Whatever the job's finalize function returns

        Raises:
            SnapshotFetchError: If any stage input cannot be fetched
            JobCancelled: If the cancel event was set during the run
        """
        logger.info(f"Starting job {self.job.name} (id={job_id})")

        inputs = self._fetch_all(job_id, provider)
        results = self._analyze_all(job_id, inputs)
        self._check_cancelled(job_id, "finalize")
        result = self.job.finalize(results)

        logger.info(f"Job {job_id} completed: {len(results)} stages")
        return result

    def _check_cancelled(self, job_id: str, stage: Any) -> None:
        if self.cancel_event.is_set():
            logger.info(f"Job {job_id} cancelled before {_stage_label(stage)}")
            raise JobCancelled(job_id, _stage_label(stage))

    def _fetch_all(self, job_id: str, provider: Any) -> Dict[Any, Any]:
        """
        Fetch the input of every stage.

        Returns:
            Dict of stage name -> input
        """
        inputs: Dict[Any, Any] = {}
        for stage in self.job.stages:
            self._check_cancelled(job_id, stage.name)
            try:
                inputs[stage.name] = stage.fetch(provider)
            except Exception as e:
                label = _stage_label(stage.name)
                logger.error(f"Job {job_id}: fetching {label} failed: {e}")
                raise SnapshotFetchError(label, e) from e
            logger.info(
                f"Job {job_id}: fetched {_size(inputs[stage.name])} "
                f"records for {_stage_label(stage.name)}"
            )
        return inputs

    def _analyze_all(self, job_id: str, inputs: Dict[Any, Any]) -> Dict[Any, Any]:
        """
        Run every stage's analysis.

        Returns:
            Dict of stage name -> result, in stage order
        """
        if self.max_workers <= 1:
            results: Dict[Any, Any] = {}
            for stage in self.job.stages:
                results[stage.name] = self._run_stage(job_id, stage, inputs)
            return results

        collected: Dict[Any, Any] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: Dict[Future[Any], Stage] = {
                executor.submit(self._run_stage, job_id, stage, inputs): stage
                for stage in self.job.stages
            }
            try:
                for future in as_completed(futures):
                    collected[futures[future].name] = future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        # Completion order varies between runs; report in stage order
        return {stage.name: collected[stage.name] for stage in self.job.stages}

    def _run_stage(self, job_id: str, stage: Stage, inputs: Dict[Any, Any]) -> Any:
        self._check_cancelled(job_id, stage.name)
        result = stage.analyze(inputs[stage.name])
        logger.info(f"Job {job_id}: analyzed {_stage_label(stage.name)}")
        return result


def _stage_label(name: Any) -> str:
    return str(getattr(name, "value", name))


def _size(value: Any) -> Any:
    try:
        return len(value)
    except TypeError:
        return "?"
