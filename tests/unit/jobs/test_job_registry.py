"""
Tests for the in-memory JobRegistry.

Tests cover:
1. Registration and lookups hand out copies
2. Lifecycle updates and terminal-state monotonicity
3. Termination flag and signal wiring
"""

import os
import signal

import pytest

from jobwatch.jobs import (
    InvalidJobTransitionError,
    JobError,
    JobNotFoundError,
    JobRegistry,
    JobState,
    Ticket,
)
from jobwatch.logging import LoggerStream, LoggingConfig


class TestJobRegistration:
    def test_add_generates_id(self, registry: JobRegistry):
        """Jobs without an explicit id get a unique one."""
        first = registry.add("provision")
        second = registry.add("provision")

        assert first.id != second.id
        assert len(registry) == 2

    def test_new_jobs_are_queued(self, registry: JobRegistry):
        record = registry.add("provision", status="waiting", job_id="job-1")

        assert record.state == JobState.QUEUED
        assert record.status == "waiting"
        assert record.result is None
        assert "job-1" in registry

    def test_duplicate_id_rejected(self, registry: JobRegistry):
        registry.add("provision", job_id="job-1")

        with pytest.raises(JobError):
            registry.add("deploy", job_id="job-1")

    def test_find_returns_copy(self, registry: JobRegistry):
        """Mutating a found record does not change the registry."""
        registry.add("provision", status="booting", job_id="job-1")

        record = registry.find("job-1")
        record.status = "tampered"

        assert registry.find("job-1").status == "booting"

    def test_find_missing_raises(self, registry: JobRegistry):
        with pytest.raises(JobNotFoundError):
            registry.find("missing")

    def test_ticket_is_bound_to_registry(self, registry: JobRegistry):
        registry.add("provision", status="booting", job_id="job-1")

        ticket = registry.ticket("job-1")

        assert isinstance(ticket, Ticket)
        assert ticket.status == "booting"

    def test_remove(self, registry: JobRegistry):
        registry.add("provision", job_id="job-1")

        removed = registry.remove("job-1")

        assert removed.id == "job-1"
        assert "job-1" not in registry

        with pytest.raises(JobNotFoundError):
            registry.remove("job-1")


class TestJobLifecycle:
    def test_status_changes_freely_while_running(self, registry: JobRegistry):
        registry.add("provision", job_id="job-1")

        registry.start("job-1", status="booting")
        registry.update("job-1", status="ready")
        registry.update("job-1", status="booting")

        record = registry.find("job-1")
        assert record.state == JobState.RUNNING
        assert record.status == "booting"

    def test_complete_sets_result(self, registry: JobRegistry):
        registry.add("provision", job_id="job-1")

        record = registry.complete("job-1", result="ok")

        assert record.state == JobState.COMPLETED
        assert record.result == "ok"
        assert record.is_completed() is True
        assert record.is_success() is True
        assert record.is_failed() is False

    def test_fail_is_terminal(self, registry: JobRegistry):
        registry.add("deploy", job_id="job-2")

        record = registry.fail("job-2")

        assert record.is_completed() is True
        assert record.is_failed() is True
        assert record.is_success() is False

    def test_terminal_state_never_reverts(self, registry: JobRegistry):
        registry.add("deploy", job_id="job-2")
        registry.fail("job-2")

        with pytest.raises(InvalidJobTransitionError) as raised:
            registry.start("job-2")

        assert raised.value.current == "failed"
        assert raised.value.requested == "running"
        assert registry.find("job-2").state == JobState.FAILED

    def test_completed_cannot_become_failed(self, registry: JobRegistry):
        registry.add("deploy", job_id="job-2")
        registry.complete("job-2")

        with pytest.raises(InvalidJobTransitionError):
            registry.fail("job-2")

    def test_state_accepts_plain_strings(self, registry: JobRegistry):
        registry.add("deploy", job_id="job-2")

        record = registry.update("job-2", state="running")

        assert record.state is JobState.RUNNING

    def test_update_missing_raises(self, registry: JobRegistry):
        with pytest.raises(JobNotFoundError):
            registry.update("missing", status="anything")

    def test_updates_are_logged_at_debug(self, tmp_path):
        """Mutations are written to the registry's log stream."""
        LoggingConfig().update(log_level="debug")
        logger = LoggerStream(
            name="jobwatch.registry",
            filename="registry.json",
            directory=str(tmp_path),
        )
        registry = JobRegistry(logger=logger)

        registry.add("provision", job_id="job-1")
        registry.start("job-1", status="booting")
        logger.close()

        lines = (tmp_path / "registry.json").read_bytes().splitlines()
        assert len(lines) == 2
        assert b'"status":"booting"' in lines[1]


class TestTerminationFlag:
    def test_stop(self, registry: JobRegistry):
        assert registry.is_stopped() is False

        registry.stop()

        assert registry.is_stopped() is True

    def test_signal_sets_flag(self, registry: JobRegistry):
        """A registered signal stops the registry and reset restores handlers."""
        previous = signal.getsignal(signal.SIGUSR1)

        registry.register_signal_handlers(signals=(signal.SIGUSR1,))
        try:
            os.kill(os.getpid(), signal.SIGUSR1)
            assert registry.is_stopped() is True

        finally:
            registry.reset_signal_handlers()

        assert signal.getsignal(signal.SIGUSR1) == previous

    def test_sigkill_rejected(self, registry: JobRegistry):
        with pytest.raises(ValueError):
            registry.register_signal_handlers(signals=(signal.SIGKILL,))
