"""
Jobs module - Job records and registry-backed handles.

- JobRegistry: Thread-safe in-memory registry and termination flag
- Ticket: Serializable handle that looks its job up on every access
- JobRecord, JobState: The registry's view of one job
- JobRegistryProtocol, JobHandle: Contracts consumed by tickets and renderers
"""

from jobwatch.jobs.errors import (
    InvalidJobTransitionError as InvalidJobTransitionError,
    JobError as JobError,
    JobNotFoundError as JobNotFoundError,
)
from jobwatch.jobs.job_registry import JobRegistry as JobRegistry
from jobwatch.jobs.models import (
    JobRecord as JobRecord,
    JobState as JobState,
)
from jobwatch.jobs.protocols import (
    JobHandle as JobHandle,
    JobRegistryProtocol as JobRegistryProtocol,
)
from jobwatch.jobs.ticket import Ticket as Ticket
