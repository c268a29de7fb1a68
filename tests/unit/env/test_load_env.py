import os

import pytest
from pydantic import ValidationError

from jobwatch.env import Env, configure_logging, load_env
from jobwatch.logging import LoggingConfig, LogLevel
from jobwatch.logging.config import StreamType


@pytest.fixture
def clean_environ(monkeypatch, tmp_path):
    for name in Env.types_map():
        monkeypatch.delenv(name, raising=False)

    # Keep a stray .env in the working directory out of the picture.
    monkeypatch.chdir(tmp_path)


class TestLoadEnv:
    def test_defaults(self, clean_environ):
        env = load_env(Env)

        assert env.JOBWATCH_TICK_INTERVAL is None
        assert env.JOBWATCH_SPINNER == "ticks"
        assert env.JOBWATCH_TERMINAL_WIDTH is None
        assert env.JOBWATCH_TERMINAL_WIDTH_FALLBACK == 0
        assert env.JOBWATCH_LOG_LEVEL == "warn"

    def test_reads_process_environment(self, clean_environ, monkeypatch):
        monkeypatch.setenv("JOBWATCH_TICK_INTERVAL", "0.5")
        monkeypatch.setenv("JOBWATCH_TERMINAL_WIDTH", "120")
        monkeypatch.setenv("JOBWATCH_SPINNER", "line")

        env = load_env(Env)

        assert env.JOBWATCH_TICK_INTERVAL == 0.5
        assert env.JOBWATCH_TERMINAL_WIDTH == 120
        assert env.JOBWATCH_SPINNER == "line"

    def test_env_file_wins_over_environment(self, clean_environ, monkeypatch, tmp_path):
        monkeypatch.setenv("JOBWATCH_LOG_LEVEL", "error")
        env_file = tmp_path / "jobwatch.env"
        env_file.write_text("JOBWATCH_LOG_LEVEL=debug\nUNRELATED=1\n")

        env = load_env(Env, env_file=str(env_file))

        assert env.JOBWATCH_LOG_LEVEL == "debug"

    def test_override(self, clean_environ, monkeypatch):
        monkeypatch.setenv("JOBWATCH_TICK_INTERVAL", "0.5")

        env = load_env(Env, override=Env(JOBWATCH_TICK_INTERVAL=0.05))

        assert env.JOBWATCH_TICK_INTERVAL == 0.05

    def test_invalid_values_rejected(self, clean_environ, monkeypatch):
        monkeypatch.setenv("JOBWATCH_TICK_INTERVAL", "0")

        with pytest.raises(ValidationError):
            load_env(Env)

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Env(JOBWATCH_LOG_LEVEL="loud")

    @pytest.mark.parametrize("filename", ["jw.log", "jobwatch", "logs.json.gz"])
    def test_non_json_log_filename_rejected(self, filename: str):
        """Log files must be .json so the logger can open them later."""
        with pytest.raises(ValidationError):
            Env(JOBWATCH_LOG_FILENAME=filename)

    def test_non_json_log_filename_rejected_on_load(self, clean_environ, monkeypatch):
        monkeypatch.setenv("JOBWATCH_LOG_FILENAME", "jw.log")

        with pytest.raises(ValidationError):
            load_env(Env)

    def test_json_log_filename_accepted(self):
        env = Env(JOBWATCH_LOG_FILENAME="jw.json")

        assert env.JOBWATCH_LOG_FILENAME == "jw.json"


class TestConfigureLogging:
    def test_applies_settings(self, tmp_path):
        env = Env(
            JOBWATCH_LOG_LEVEL="debug",
            JOBWATCH_LOG_OUTPUT="stdout",
            JOBWATCH_LOGS_DIRECTORY=str(tmp_path),
            JOBWATCH_LOG_FILENAME="jobwatch.json",
        )

        stream = configure_logging(env)

        config = LoggingConfig()
        assert config.level is LogLevel.DEBUG
        assert config.output is StreamType.STDOUT
        assert stream.name == "jobwatch"
        assert stream.logfile_path == os.path.join(str(tmp_path), "jobwatch.json")

    def test_console_only(self):
        stream = configure_logging(Env())

        assert stream.logfile_path is None
        assert LoggingConfig().level is LogLevel.WARN
