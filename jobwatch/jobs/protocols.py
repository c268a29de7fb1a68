from typing import Any, Protocol

from .models import JobRecord


class JobRegistryProtocol(Protocol):
    """Protocol defining the registry capabilities tickets and renderers consume."""

    def find(self, job_id: str) -> JobRecord:
        """Return the current record for the job, raising if none exists."""
        ...

    def is_stopped(self) -> bool:
        """Whether the hosting process has been asked to terminate."""
        ...


class JobHandle(Protocol):
    """Protocol defining the read view a renderer polls for one job."""

    @property
    def id(self) -> str: ...

    @property
    def type(self) -> str: ...

    @property
    def state(self) -> Any: ...

    @property
    def status(self) -> str: ...

    @property
    def result(self) -> Any | None: ...

    def is_completed(self) -> bool: ...

    def is_failed(self) -> bool: ...
