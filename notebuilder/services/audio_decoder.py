import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import librosa
import numpy as np

from notebuilder.errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass
class SampleStream:
    y: np.ndarray  # mono float samples
    sr: int

    @property
    def duration(self) -> float:
        return len(self.y) / self.sr if self.sr else 0.0


class Decoder(Protocol):
    def open(self, path: Path) -> SampleStream: ...


class LibrosaDecoder:
    """Decode any format librosa/soundfile can read into a mono stream."""

    def __init__(self, sample_rate: int = 44100) -> None:
        self.sample_rate = sample_rate

    def open(self, path: Path) -> SampleStream:
        try:
            y, sr = librosa.load(str(path), sr=self.sample_rate, mono=True)
        except Exception as e:
            raise DecodeError(f"Could not decode {path}: {e}") from e
        stream = SampleStream(y=y, sr=int(sr))
        logger.info(f"Decoded {Path(path).name}: {stream.duration:.1f}s at {stream.sr} Hz")
        return stream
