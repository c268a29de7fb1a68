from jobwatch.logging import LoggerStream, LoggingConfig

from .env import Env


def configure_logging(
    env: Env,
    name: str = "jobwatch",
) -> LoggerStream:
    """Apply the env's logging settings and return a stream writing
    where they point."""
    config = LoggingConfig()
    config.update(
        log_directory=env.JOBWATCH_LOGS_DIRECTORY,
        log_level=env.JOBWATCH_LOG_LEVEL,
        log_output=env.JOBWATCH_LOG_OUTPUT,
    )

    return LoggerStream(
        name=name,
        filename=env.JOBWATCH_LOG_FILENAME,
        directory=env.JOBWATCH_LOGS_DIRECTORY,
    )
