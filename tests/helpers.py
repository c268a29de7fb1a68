from typing import Callable, Iterable


class ScriptedSleep:
    """
    Stands in for ``time.sleep``. Each call records the requested delay
    and runs the next scripted change, so job progress happens between
    renderer ticks without any real time passing.
    """

    def __init__(self, steps: Iterable[Callable[[], None]] = ()):
        self._steps = list(steps)
        self.calls: list[float] = []

    def __call__(self, seconds: float):
        self.calls.append(seconds)

        if self._steps:
            self._steps.pop(0)()

    @property
    def remaining(self):
        return len(self._steps)


def finalized_lines(output: str) -> list[str]:
    """Text left on each newline-terminated line once carriage-return
    redraws are applied."""
    return [segment.rsplit("\r", 1)[-1] for segment in output.split("\n")[:-1]]


def noop():
    pass
