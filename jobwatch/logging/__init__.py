from .config import LoggingConfig as LoggingConfig
from .models import Entry as Entry, Log as Log, LogLevel as LogLevel
from .streams import LoggerStream as LoggerStream
