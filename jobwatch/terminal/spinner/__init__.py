from .spinner import Spinner as Spinner
from .spinner_frames_set import SpinnerFramesSet as SpinnerFramesSet
from .spinner_types import SpinnerName as SpinnerName
