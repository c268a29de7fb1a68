"""
Pytest configuration shared by the unit tests.

Logging configuration lives in module-level context variables, so every
test gets them restored afterwards.
"""

import io
import pytest

from jobwatch.env import Env
from jobwatch.jobs import JobRegistry
from jobwatch.logging import LoggerStream
from jobwatch.logging.config import logging_config
from jobwatch.terminal import StatusRenderer, TerminalWriter

from tests.helpers import ScriptedSleep


@pytest.fixture(autouse=True)
def restore_logging_config():
    variables = [
        logging_config._global_log_level,
        logging_config._global_disabled_loggers,
        logging_config._global_log_output_type,
        logging_config._global_logging_directory,
    ]

    saved = [(variable, variable.get()) for variable in variables]

    yield

    for variable, value in saved:
        variable.set(value)


@pytest.fixture
def logger() -> LoggerStream:
    return LoggerStream(name="jobwatch.test")


@pytest.fixture
def registry(logger: LoggerStream) -> JobRegistry:
    return JobRegistry(logger=logger)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(output: io.StringIO) -> TerminalWriter:
    return TerminalWriter(stream=output, width=0)


@pytest.fixture
def env() -> Env:
    return Env()


@pytest.fixture
def make_renderer(
    registry: JobRegistry,
    logger: LoggerStream,
    writer: TerminalWriter,
    env: Env,
):
    def create_renderer(
        sleep: ScriptedSleep,
        renderer_logger: LoggerStream | None = None,
    ) -> StatusRenderer:
        return StatusRenderer(
            registry,
            logger=renderer_logger or logger,
            writer=writer,
            env=env,
            sleep=sleep,
        )

    return create_renderer
