from typing import (
    Dict,
    List,
    Literal,
    Tuple,
)

from .spinner_frames_set import SpinnerFramesSet
from .spinner_types import SpinnerName, spinner_frames


class Spinner:
    """
    Cyclic animation frames backed by a fixed frame list and a wrapping
    cursor. The cursor never runs out: after the last frame it returns to
    the first, and ``reset()`` restarts the cycle.
    """

    def __init__(
        self,
        spinner: SpinnerName | str = "ticks",
        reverse: bool = False,
        spinners: Dict[
            str,
            Dict[
                Literal["frames", "interval"],
                int | List[str],
            ],
        ]
        | None = None,
    ):
        frames_set = self._get_frames_set(spinner, spinners)

        self._name = spinner
        self._frames: Tuple[str, ...] = tuple(
            frames_set.frames[::-1] if reverse else frames_set.frames
        )
        self._interval = frames_set.interval

        self._position = 0
        self._last_frame: str | None = None

    @property
    def name(self):
        return self._name

    @property
    def frames(self):
        return self._frames

    @property
    def interval(self):
        return self._interval

    @property
    def position(self):
        return self._position

    @property
    def last_frame_width(self) -> int:
        if self._last_frame is None:
            return len(self._frames[0])

        return len(self._last_frame)

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next_frame()

    def next_frame(self) -> str:
        frame = self._frames[self._position]

        self._position = (self._position + 1) % len(self._frames)
        self._last_frame = frame

        return frame

    def frame_at(self, index: int) -> str:
        return self._frames[index % len(self._frames)]

    def reset(self):
        self._position = 0
        self._last_frame = None

    @staticmethod
    def _get_frames_set(
        spinner: str,
        spinners: Dict[str, Dict[str, int | List[str]]] | None,
    ) -> SpinnerFramesSet:
        available = dict(spinner_frames)

        if spinners:
            available.update(spinners)

        config = available.get(spinner)
        if config is None:
            raise ValueError(
                f"Err. - unknown spinner {spinner!r}, expected one of {sorted(available)}"
            )

        frames = list(config["frames"])

        return SpinnerFramesSet(
            frames=frames,
            interval=config.get("interval", 100),
        )
