"""Tests for JobExecutor."""

import threading

import pytest

from atelier.jobs.errors import JobCancelled, SnapshotFetchError
from atelier.jobs.framework import JobExecutor, Stage, StagedJob


class Provider:
    def __init__(self):
        self.calls = []

    def numbers(self):
        self.calls.append("numbers")
        return [1, 2, 3]

    def words(self):
        self.calls.append("words")
        return ["a", "bb"]

    def broken(self):
        raise ConnectionError("store unavailable")


def _job(stages, max_workers=1):
    return StagedJob(
        name="test",
        stages=stages,
        finalize=lambda results: results,
        max_workers=max_workers,
    )


STAGES = [
    Stage("sum", lambda p: p.numbers(), sum),
    Stage("lengths", lambda p: p.words(), lambda words: [len(w) for w in words]),
]


@pytest.mark.parametrize("max_workers", [1, 4])
def test_executor_runs_fetch_analyze_finalize(max_workers):
    """Executor should fetch every stage, analyze, then finalize."""
    result = JobExecutor(_job(STAGES, max_workers)).run("job-1", Provider())

    assert result == {"sum": 6, "lengths": [1, 2]}
    assert list(result.keys()) == ["sum", "lengths"]


def test_executor_fetch_failure_aborts_before_analysis():
    analyzed = []

    stages = [
        Stage("ok", lambda p: p.numbers(), lambda items: analyzed.append(items)),
        Stage("broken", lambda p: p.broken(), lambda items: analyzed.append(items)),
    ]

    with pytest.raises(SnapshotFetchError) as exc_info:
        JobExecutor(_job(stages)).run("job-2", Provider())

    assert exc_info.value.stage == "broken"
    assert isinstance(exc_info.value.cause, ConnectionError)
    assert analyzed == []


@pytest.mark.parametrize("max_workers", [1, 3])
def test_executor_analyzer_error_propagates(max_workers):
    def explode(items):
        raise RuntimeError("analysis bug")

    stages = STAGES + [Stage("bad", lambda p: p.numbers(), explode)]

    with pytest.raises(RuntimeError):
        JobExecutor(_job(stages, max_workers)).run("job-3", Provider())


def test_executor_cancelled_before_start():
    event = threading.Event()
    event.set()
    provider = Provider()

    with pytest.raises(JobCancelled):
        JobExecutor(_job(STAGES), cancel_event=event).run("job-4", provider)

    assert provider.calls == []


def test_executor_cancelled_between_stages():
    event = threading.Event()

    def analyze_and_cancel(items):
        event.set()
        return sum(items)

    stages = [
        Stage("first", lambda p: p.numbers(), analyze_and_cancel),
        Stage("second", lambda p: p.words(), len),
    ]

    with pytest.raises(JobCancelled) as exc_info:
        JobExecutor(_job(stages), cancel_event=event).run("job-5", Provider())

    assert exc_info.value.stage == "second"


def test_executor_max_workers_override():
    executor = JobExecutor(_job(STAGES, max_workers=4), max_workers=1)
    assert executor.max_workers == 1
