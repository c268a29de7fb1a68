import shutil
import sys
from typing import TextIO


SPACE = " "


class TerminalWriter:
    """
    Line-oriented writer that redraws the current line with carriage
    returns. The column width is read once, when the writer is created.
    Without an attached terminal the ``fallback_width`` is used, and a
    width of zero makes ``clear_line`` a bare carriage return.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        width: int | None = None,
        fallback_width: int = 0,
    ):
        if stream is None:
            stream = sys.stdout

        if width is None:
            width = self._query_width(fallback_width)

        self._stream = stream
        self._width = max(width, 0)

    @property
    def width(self):
        return self._width

    @property
    def stream(self):
        return self._stream

    def clear_line(self):
        self.write(f"\r{SPACE * self._width}")

    def write(self, text: str):
        self._stream.write(text)
        self._stream.flush()

    def write_line(self, text: str = ""):
        self.write(f"{text}\n")

    @staticmethod
    def _query_width(fallback_width: int) -> int:
        # shutil consults $COLUMNS before the terminal itself and returns
        # the fallback when stdout is not a terminal.
        terminal_size = shutil.get_terminal_size(
            fallback=(fallback_width, 0),
        )

        return terminal_size.columns
