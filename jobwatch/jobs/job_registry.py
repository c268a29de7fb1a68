"""
Job Registry - Thread-safe in-memory store of job records.

The execution engine writes job state through this registry while
tickets and the status renderer read it. Reads hand out copies of the
stored record, so a reader never observes a half-applied update.

The registry also owns the process-wide termination flag. It can be set
directly with ``stop()`` or wired to process signals with
``register_signal_handlers()``.
"""

import signal
import threading
import uuid
from types import FrameType
from typing import Any, Callable, Dict, Iterable, Optional, Union

import msgspec

from jobwatch.logging import LoggerStream
from jobwatch.logging.jobwatch_logging_models import RegistryDebug

from .errors import InvalidJobTransitionError, JobError, JobNotFoundError
from .models import JobRecord, JobState
from .ticket import Ticket

SignalHandlers = Union[Callable[[int, Optional[FrameType]], Any], int, None]


class JobRegistry:
    def __init__(
        self,
        logger: LoggerStream | None = None,
    ):
        self._jobs: Dict[str, JobRecord] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()

        if logger is None:
            logger = LoggerStream(name="jobwatch.registry")

        self._logger = logger

        # Handlers replaced by ``register_signal_handlers``, restored on reset.
        self._dfl_sigmap: Dict[signal.Signals, SignalHandlers] = {}

    def __contains__(self, job_id: str) -> bool:
        with self._lock:
            return job_id in self._jobs

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def add(
        self,
        job_type: str,
        status: str = "",
        job_id: str | None = None,
    ) -> JobRecord:
        if job_id is None:
            job_id = uuid.uuid4().hex

        record = JobRecord(
            id=job_id,
            type=job_type,
            status=status,
        )

        with self._lock:
            if job_id in self._jobs:
                raise JobError(f"Err. - job {job_id!r} is already registered")

            self._jobs[job_id] = record

        self._log_record(record, "Registered job")

        return msgspec.structs.replace(record)

    def find(self, job_id: str) -> JobRecord:
        with self._lock:
            record = self._jobs.get(job_id)

            if record is None:
                raise JobNotFoundError(job_id)

            return msgspec.structs.replace(record)

    def ticket(self, job_id: str) -> Ticket:
        return Ticket(job_id, self)

    def update(
        self,
        job_id: str,
        status: str | None = None,
        state: JobState | str | None = None,
        result: Any | None = None,
    ) -> JobRecord:
        changes: Dict[str, Any] = {}

        if status is not None:
            changes["status"] = status

        if result is not None:
            changes["result"] = result

        with self._lock:
            record = self._jobs.get(job_id)

            if record is None:
                raise JobNotFoundError(job_id)

            if state is not None:
                state = JobState(state)

                if record.state.is_terminal and state != record.state:
                    raise InvalidJobTransitionError(
                        job_id,
                        record.state.value,
                        state.value,
                    )

                changes["state"] = state

            record = msgspec.structs.replace(record, **changes)
            self._jobs[job_id] = record

        self._log_record(record, "Updated job")

        return msgspec.structs.replace(record)

    def start(
        self,
        job_id: str,
        status: str | None = None,
    ) -> JobRecord:
        return self.update(
            job_id,
            status=status,
            state=JobState.RUNNING,
        )

    def complete(
        self,
        job_id: str,
        result: Any | None = None,
        status: str | None = None,
    ) -> JobRecord:
        return self.update(
            job_id,
            status=status,
            state=JobState.COMPLETED,
            result=result,
        )

    def fail(
        self,
        job_id: str,
        result: Any | None = None,
        status: str | None = None,
    ) -> JobRecord:
        return self.update(
            job_id,
            status=status,
            state=JobState.FAILED,
            result=result,
        )

    def remove(self, job_id: str) -> JobRecord:
        with self._lock:
            record = self._jobs.pop(job_id, None)

        if record is None:
            raise JobNotFoundError(job_id)

        return record

    def stop(self):
        self._stopped.set()

    def is_stopped(self) -> bool:
        return self._stopped.is_set()

    def register_signal_handlers(
        self,
        signals: Iterable[signal.Signals] = (signal.SIGINT, signal.SIGTERM),
    ):
        """
        Set the termination flag when any of ``signals`` is received.

        Must be called from the main thread. The handlers previously
        installed are kept and put back by ``reset_signal_handlers``.
        """
        signals = list(signals)

        # SIGKILL cannot be caught or ignored, and the receiving
        # process cannot perform any clean-up upon receiving this
        # signal.
        if signal.SIGKILL in signals:
            raise ValueError(
                "Trying to set handler for SIGKILL signal. "
                "SIGKILL cannot be caught or ignored in POSIX systems."
            )

        for sig in signals:
            if sig not in self._dfl_sigmap:
                self._dfl_sigmap[sig] = signal.getsignal(sig)

            signal.signal(sig, self._handle_signal)

    def reset_signal_handlers(self):
        for sig, sig_handler in self._dfl_sigmap.items():
            # ``signal.getsignal`` returns None for handlers not installed
            # from Python.
            signal.signal(
                sig,
                sig_handler if sig_handler is not None else signal.SIG_DFL,
            )

        self._dfl_sigmap.clear()

    def _handle_signal(self, signum: int, frame: FrameType | None):
        self.stop()

    def _log_record(self, record: JobRecord, message: str):
        self._logger.log(
            RegistryDebug(
                message=message,
                job_id=record.id,
                job_type=record.type,
                state=record.state.value,
                status=record.status,
            )
        )
