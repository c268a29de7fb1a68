from .display_outcome import (
    DisplayOutcome as DisplayOutcome,
    exit_on_failure as exit_on_failure,
)
from .spinner import Spinner as Spinner
from .status_renderer import (
    RenderSession as RenderSession,
    StatusRenderer as StatusRenderer,
)
from .terminal_writer import TerminalWriter as TerminalWriter
