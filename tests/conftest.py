"""Shared fixtures for the notebuilder test suite."""
from pathlib import Path

import numpy as np
import pytest

from notebuilder.config import settings
from notebuilder.models.note_event import OnsetEvent
from notebuilder.services.audio_decoder import SampleStream


def onsets(*pairs: tuple[float, float]) -> list[OnsetEvent]:
    return [OnsetEvent(time=t, amplitude=a) for t, a in pairs]


class FakeDecoder:
    """Returns a silent stream without touching the filesystem."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.opened: list[Path] = []

    def open(self, path):
        self.opened.append(Path(path))
        if self.error is not None:
            raise self.error
        return SampleStream(y=np.zeros(1000, dtype=np.float32), sr=1000)


class FakeDetector:
    """Returns a canned onset list."""

    def __init__(self, events: list[OnsetEvent] | None = None, error: Exception | None = None):
        self.events = events or []
        self.error = error

    def detect(self, stream):
        if self.error is not None:
            raise self.error
        return list(self.events)


@pytest.fixture
def storage_dir(tmp_path, monkeypatch):
    """Point chart storage at a temporary directory."""
    monkeypatch.setattr(settings, "storage_dir", tmp_path / "storage")
    return tmp_path / "storage"
