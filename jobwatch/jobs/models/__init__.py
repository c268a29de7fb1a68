from .job_record import JobRecord as JobRecord
from .job_state import JobState as JobState, TERMINAL_STATES as TERMINAL_STATES
