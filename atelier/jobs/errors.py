"""Errors raised by job execution."""


class SnapshotFetchError(Exception):
    """A snapshot could not be loaded; the whole run is aborted."""

    def __init__(self, stage: str, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Failed to fetch {stage} snapshot: {cause}")


class JobCancelled(Exception):
    """The run was cancelled between stages; partial results are discarded."""

    def __init__(self, job_id: str, stage: str):
        self.job_id = job_id
        self.stage = stage
        super().__init__(f"Job {job_id} cancelled before stage {stage}")
