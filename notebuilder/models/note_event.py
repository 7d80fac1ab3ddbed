from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Direction(StrEnum):
    L = "L"
    R = "R"
    U = "U"  # amplitude above the upper bound, excluded from balancing


class OnsetEvent(BaseModel):
    time: float = Field(allow_inf_nan=False)  # seconds
    amplitude: float = Field(ge=0, allow_inf_nan=False)


class NoteEvent(BaseModel):
    time_ms: int  # trunc(time * 1000)
    direction: Direction


class ClassifierConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    amplitude_upper_bound: int = 50
