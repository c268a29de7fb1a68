"""
Status Renderer - Blocking terminal display for a set of running jobs.

The renderer polls each watched job, animating its current status text
on a single line that is redrawn in place. When a job's status text
changes, the previous text is finalized as a permanent line before the
new one starts animating, so every status a job passes through is left
in the transcript exactly once.

Polling stops when every job has finished or when the registry's
termination flag is set. Finished jobs get one final line each with
their lifecycle state and result; termination prints a single notice
instead. Any failed job turns the overall outcome into a failure.

In quiet mode (detailed logs are already streaming to the terminal)
nothing is animated. The renderer only waits on the same exit
conditions and reports through the logger.
"""

import os
import time
from typing import Callable, Dict, Iterable, List

from jobwatch.env import Env, load_env
from jobwatch.jobs.protocols import JobHandle, JobRegistryProtocol
from jobwatch.logging import LoggerStream, LoggingConfig, LogLevel
from jobwatch.logging.jobwatch_logging_models import (
    RendererDebug,
    RendererError,
    RendererInfo,
    RendererWarning,
)

from .display_outcome import DisplayOutcome
from .spinner import Spinner
from .terminal_writer import SPACE, TerminalWriter


TERMINATED_NOTICE = "jobwatch terminated"
LOG_LABEL = "jobwatch"


class RenderSession:
    """State owned by a single ``display`` call."""

    def __init__(
        self,
        jobs: Iterable[JobHandle],
        spinner: Spinner,
    ):
        self.jobs: List[JobHandle] = list(jobs)
        self.spinner = spinner

        # job id -> status text last drawn for that job
        self.last_statuses: Dict[str, str] = {}


class StatusRenderer:
    def __init__(
        self,
        registry: JobRegistryProtocol,
        logger: LoggerStream | None = None,
        writer: TerminalWriter | None = None,
        env: Env | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if env is None:
            env = load_env(Env)

        if writer is None:
            writer = TerminalWriter(
                width=env.JOBWATCH_TERMINAL_WIDTH,
                fallback_width=env.JOBWATCH_TERMINAL_WIDTH_FALLBACK,
            )

        if logger is None:
            logger = LoggerStream(name="jobwatch.renderer")

        self._registry = registry
        self._logger = logger
        self._writer = writer
        self._sleep = sleep
        self._spinner_name = env.JOBWATCH_SPINNER
        self._tick = env.JOBWATCH_TICK_INTERVAL

        if self._tick is None:
            self._tick = Spinner(self._spinner_name).interval / 1000

        self._config = LoggingConfig()

    @property
    def tick(self):
        return self._tick

    @property
    def log_location(self) -> str | None:
        logfile_path = self._logger.logfile_path

        # Filtered levels may have left nothing on disk.
        if logfile_path and os.path.exists(logfile_path):
            return logfile_path

        return None

    def debugging(self) -> bool:
        return self._config.enabled(self._logger.name, LogLevel.DEBUG)

    def display(
        self,
        jobs: Iterable[JobHandle],
        debug: bool | None = None,
    ) -> DisplayOutcome:
        """
        Block until every job has finished or the registry reports
        termination, rendering progress along the way.

        ``debug`` selects quiet mode. When left as None it is on whenever
        DEBUG-level logging is enabled for this renderer's logger.
        """
        session = RenderSession(
            jobs,
            Spinner(self._spinner_name),
        )

        if debug is None:
            debug = self.debugging()

        if debug:
            self._wait_for_jobs(session)

        else:
            self._display_jobs(session)

        failed_jobs = [job.id for job in session.jobs if job.is_failed()]

        if failed_jobs:
            self._logger.log(
                RendererError(
                    message="Jobs failed",
                    failed_jobs=failed_jobs,
                )
            )

            if log_location := self.log_location:
                self._display_log_info(session, log_location)

            return DisplayOutcome.FAILURE

        return DisplayOutcome.SUCCESS

    def _application_terminated(self) -> bool:
        return self._registry.is_stopped()

    def _finished(self, session: RenderSession) -> bool:
        return (
            all(job.is_completed() for job in session.jobs)
            or self._application_terminated()
        )

    def _display_jobs(self, session: RenderSession):
        while not self._finished(session):
            for job in session.jobs:
                self._print_status(session, job)

        if self._application_terminated():
            self._print_final_terminated_status(session)

        else:
            for job in session.jobs:
                self._print_final_status(session, job)

    def _wait_for_jobs(self, session: RenderSession):
        while not self._finished(session):
            self._sleep(self._tick)

        if self._application_terminated():
            self._log_terminated(session)

        else:
            for job in session.jobs:
                self._log_final_state(job)

    def _print_status(self, session: RenderSession, job: JobHandle):
        status = job.status

        if (
            job.id in session.last_statuses
            and status != session.last_statuses[job.id]
        ):
            self._print_last_status(session, job)

            self._logger.log(
                RendererDebug(
                    message="Status changed",
                    job_id=job.id,
                    job_type=job.type,
                    status=status,
                )
            )

        self._writer.clear_line()
        self._writer.write(
            f"\r{session.spinner.next_frame()} [{job.type}] {status}"
        )

        session.last_statuses[job.id] = status

        self._sleep(self._tick)

    def _print_last_status(self, session: RenderSession, job: JobHandle):
        self._writer.clear_line()
        self._writer.write(
            f"\r{self._left_space(session)} [{job.type}] {session.last_statuses[job.id]}\n"
        )

    def _print_final_status(self, session: RenderSession, job: JobHandle):
        if job.id in session.last_statuses:
            self._print_last_status(session, job)

        state = job.state
        result = job.result

        message = f"{self._left_space(session)} [{job.type}] {self._state_name(state).capitalize()}"
        if result is not None:
            message += f": {result}"

        self._writer.clear_line()
        self._writer.write_line(f"\r{message}")

        self._log_final_state(job, state=state)

    def _print_final_terminated_status(self, session: RenderSession):
        self._writer.write_line(f"\n{TERMINATED_NOTICE}")
        self._log_terminated(session)

    def _display_log_info(self, session: RenderSession, log_location: str):
        self._writer.write_line(
            f"{self._left_space(session)} [{LOG_LABEL}] Log written to {log_location}"
        )

    def _left_space(self, session: RenderSession) -> str:
        return SPACE * session.spinner.last_frame_width

    def _log_final_state(self, job: JobHandle, state=None):
        if state is None:
            state = job.state

        self._logger.log(
            RendererInfo(
                message="Job finished",
                job_id=job.id,
                job_type=job.type,
                state=self._state_name(state),
            )
        )

    def _log_terminated(self, session: RenderSession):
        self._logger.log(
            RendererWarning(
                message=TERMINATED_NOTICE,
                jobs=[job.id for job in session.jobs if not job.is_completed()],
            )
        )

    @staticmethod
    def _state_name(state) -> str:
        return str(getattr(state, "value", state))
