from typing import Any

import msgspec

from .job_state import JobState, TERMINAL_STATES


class JobRecord(msgspec.Struct, kw_only=True):
    """
    The registry's view of one job.

    ``state`` is the coarse lifecycle stage, ``status`` the free-form
    progress text the engine updates while the job runs. ``result`` is
    only set once the job reaches a terminal state.
    """

    id: str
    type: str
    state: JobState = JobState.QUEUED
    status: str = ""
    result: Any | None = None

    def is_completed(self) -> bool:
        return self.state in TERMINAL_STATES

    def is_failed(self) -> bool:
        return self.state == JobState.FAILED

    def is_success(self) -> bool:
        return self.state == JobState.COMPLETED
