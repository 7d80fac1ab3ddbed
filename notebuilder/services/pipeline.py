import logging
from pathlib import Path

from notebuilder.models.note_event import ClassifierConfig, NoteEvent, OnsetEvent
from notebuilder.services.audio_decoder import Decoder
from notebuilder.services.chart_writer import write_chart
from notebuilder.services.direction_classifier import DEFAULT_CONFIG, classify
from notebuilder.services.onset_detector import Detector

logger = logging.getLogger(__name__)


def detect_onsets(audio_path: Path, decoder: Decoder, detector: Detector) -> list[OnsetEvent]:
    """Decode an audio file and run onset detection on it."""
    logger.info(f"Loading {audio_path}")
    stream = decoder.open(audio_path)

    logger.info("Detecting onsets...")
    return detector.detect(stream)


def build_chart(
    audio_path: Path,
    decoder: Decoder,
    detector: Detector,
    config: ClassifierConfig = DEFAULT_CONFIG,
) -> list[NoteEvent]:
    """Decode, detect and classify, returning the note chart."""
    onsets = detect_onsets(audio_path, decoder, detector)
    logger.info("Classifying onset directions...")
    return classify(onsets, config)


def run_pipeline(
    audio_path: Path,
    output_path: Path,
    decoder: Decoder,
    detector: Detector,
    config: ClassifierConfig = DEFAULT_CONFIG,
) -> list[NoteEvent]:
    """Build a chart for ``audio_path`` and write it to ``output_path``.

    Nothing is written unless classification succeeds.
    """
    try:
        notes = build_chart(audio_path, decoder, detector, config)
    except Exception:
        logger.exception(f"Pipeline failed for {audio_path}")
        raise

    write_chart(notes, output_path)
    logger.info(f"Chart for {Path(audio_path).name} complete!")
    return notes
