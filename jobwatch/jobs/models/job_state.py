from enum import Enum


class JobState(str, Enum):
    """Lifecycle stage of a job. Once terminal, a job never leaves it."""

    QUEUED = "queued"  # Registered, not yet picked up by the engine
    RUNNING = "running"  # Active execution, status text may change freely
    COMPLETED = "completed"  # Finished successfully
    FAILED = "failed"  # Finished with an error

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({JobState.COMPLETED, JobState.FAILED})
