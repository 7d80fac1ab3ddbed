"""Onset detection on a decoded sample stream.

Finds *when* each onset happens with librosa's peak picking and measures
*how loud* it is, as the peak absolute sample value in a short window after
the onset expressed in percent of full scale.
"""

import logging
from typing import Protocol

import librosa
import numpy as np

from notebuilder.errors import DetectionError
from notebuilder.models.note_event import OnsetEvent
from notebuilder.services.audio_decoder import SampleStream

logger = logging.getLogger(__name__)


class Detector(Protocol):
    def detect(self, stream: SampleStream) -> list[OnsetEvent]: ...


def measure_amplitude(y: np.ndarray, sr: int, onset_sample: int, window_ms: float = 50.0) -> float:
    """Peak |y| in a window starting at an onset, scaled to 0-100."""
    window_samples = max(1, int(sr * window_ms / 1000.0))
    start = max(0, onset_sample)
    end = min(len(y), start + window_samples)
    segment = y[start:end]
    if len(segment) == 0:
        return 0.0
    return float(np.max(np.abs(segment)) * 100.0)


class LibrosaOnsetDetector:
    def __init__(
        self,
        activation_threshold: float = 0.07,
        hop_length: int = 512,
        window_ms: float = 50.0,
    ) -> None:
        if activation_threshold < 0:
            raise ValueError(f"activation_threshold must be >= 0, got {activation_threshold}")
        self.activation_threshold = activation_threshold
        self.hop_length = hop_length
        self.window_ms = window_ms

    def detect(self, stream: SampleStream) -> list[OnsetEvent]:
        """Detect onsets in a sample stream.

        Args:
            stream: Decoded mono samples

        Returns:
            OnsetEvent list sorted by time
        """
        y, sr = stream.y, stream.sr
        if len(y) == 0:
            return []

        try:
            onset_frames = librosa.onset.onset_detect(
                y=y,
                sr=sr,
                units="frames",
                hop_length=self.hop_length,
                backtrack=False,
                delta=self.activation_threshold,
            )
        except Exception as e:
            raise DetectionError(f"Onset detection failed: {e}") from e

        if len(onset_frames) == 0:
            logger.info("No onsets detected")
            return []

        onset_samples = librosa.frames_to_samples(onset_frames, hop_length=self.hop_length)
        onset_times = onset_samples / sr

        logger.info(
            f"Detected {len(onset_frames)} onsets (delta={self.activation_threshold})"
        )

        events = [
            OnsetEvent(
                time=float(time_sec),
                amplitude=measure_amplitude(y, sr, int(sample), self.window_ms),
            )
            for time_sec, sample in zip(onset_times, onset_samples, strict=True)
        ]
        events.sort(key=lambda e: e.time)
        return events
