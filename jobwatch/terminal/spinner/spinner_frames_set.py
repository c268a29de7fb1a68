from pydantic import (
    BaseModel,
    StrictStr,
    conint,
    conlist,
)


class SpinnerFramesSet(BaseModel):
    frames: conlist(StrictStr, min_length=1)
    # milliseconds between frames
    interval: conint(strict=True, gt=0)
