from .models import Entry, LogLevel


class RendererDebug(Entry, kw_only=True):
    job_id: str
    job_type: str
    status: str
    level: LogLevel = LogLevel.DEBUG

class RendererInfo(Entry, kw_only=True):
    job_id: str
    job_type: str
    state: str
    level: LogLevel = LogLevel.INFO

class RendererWarning(Entry, kw_only=True):
    jobs: list[str]
    level: LogLevel = LogLevel.WARN

class RendererError(Entry, kw_only=True):
    failed_jobs: list[str]
    level: LogLevel = LogLevel.ERROR

class RegistryDebug(Entry, kw_only=True):
    job_id: str
    job_type: str
    state: str
    status: str
    level: LogLevel = LogLevel.DEBUG
