"""
Job lookup and lifecycle exceptions.

``JobNotFoundError`` is raised by a registry's ``find`` and reaches
``Ticket`` callers untouched.
"""


class JobError(Exception):
    pass


class JobNotFoundError(JobError):
    """
    Raised when the registry holds no record for a job id.
    """

    def __init__(self, job_id: str):
        super().__init__(f"Err. - no job found with id {job_id!r}")
        self.job_id = job_id


class InvalidJobTransitionError(JobError):
    """
    Raised when a job in a terminal state is moved back to a
    non-terminal one.
    """

    def __init__(self, job_id: str, current: str, requested: str):
        super().__init__(
            f"Err. - job {job_id!r} cannot move from {current} to {requested}"
        )
        self.job_id = job_id
        self.current = current
        self.requested = requested
