from .jobs import (
    JobNotFoundError as JobNotFoundError,
    JobRecord as JobRecord,
    JobRegistry as JobRegistry,
    JobState as JobState,
    Ticket as Ticket,
)
from .terminal import (
    DisplayOutcome as DisplayOutcome,
    StatusRenderer as StatusRenderer,
    exit_on_failure as exit_on_failure,
)
