from typing import Dict, List, Literal

SpinnerName = Literal[
    "line",
    "letters",
    "blink",
    "ticks",
]


spinner_frames: Dict[SpinnerName, Dict[Literal["frames", "interval"], List[str] | int]] = {
    "line": {
        "interval": 100,
        "frames": ["|", "/", "-", "\\"],
    },
    "letters": {
        "interval": 100,
        "frames": ["JW", "JW", "JW", "JW", "  "],
    },
    "blink": {
        "interval": 100,
        "frames": ["JW", "  "],
    },
    "ticks": {
        "interval": 100,
        "frames": ["`", "'", "-", ".", ",", ".", "-", "'"],
    },
}
