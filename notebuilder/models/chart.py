from pydantic import BaseModel

from notebuilder.models.note_event import NoteEvent, OnsetEvent


class ClassifyRequest(BaseModel):
    onsets: list[OnsetEvent]
    amplitude_upper_bound: int | None = None


class ChartResponse(BaseModel):
    id: str | None = None
    notes: list[NoteEvent]
    text: str  # line-oriented chart, "<time_ms> <direction>" per line
