import pathlib

from pydantic import BaseModel, StrictStr, confloat, conint, field_validator
from typing import Callable, Dict, Union

from jobwatch.logging.config import LogOutput
from jobwatch.logging.models import LogLevelName

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    # None paces the loop at the spinner's own frame interval
    JOBWATCH_TICK_INTERVAL: confloat(gt=0) | None = None
    JOBWATCH_SPINNER: StrictStr = "ticks"
    JOBWATCH_TERMINAL_WIDTH: conint(ge=0) | None = None
    JOBWATCH_TERMINAL_WIDTH_FALLBACK: conint(ge=0) = 0
    JOBWATCH_LOG_LEVEL: LogLevelName = "warn"
    JOBWATCH_LOG_OUTPUT: LogOutput = "stderr"
    JOBWATCH_LOGS_DIRECTORY: StrictStr | None = None
    JOBWATCH_LOG_FILENAME: StrictStr | None = None

    @field_validator("JOBWATCH_LOG_FILENAME")
    @classmethod
    def validate_log_filename(cls, value: str | None):
        if value is not None and pathlib.Path(value).suffix != ".json":
            raise ValueError(
                f"Err. - log file {value!r} must be a JSON file (.json)"
            )

        return value

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "JOBWATCH_TICK_INTERVAL": float,
            "JOBWATCH_SPINNER": str,
            "JOBWATCH_TERMINAL_WIDTH": int,
            "JOBWATCH_TERMINAL_WIDTH_FALLBACK": int,
            "JOBWATCH_LOG_LEVEL": str,
            "JOBWATCH_LOG_OUTPUT": str,
            "JOBWATCH_LOGS_DIRECTORY": str,
            "JOBWATCH_LOG_FILENAME": str,
        }
