"""CLI entry point: build a left/right note chart from an audio file.

Usage:
  notebuilder <sensitivity> <sound_file> <output> [upper_bound]
  python -m notebuilder.cli 0.07 ./song.mp3 ./song.txt 50

The output holds one "<time_ms> <direction>" line per detected onset,
direction being L, R or U (above the amplitude upper bound).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from notebuilder.config import settings
from notebuilder.errors import DecodeError, DetectionError, InvalidInputError
from notebuilder.models.note_event import ClassifierConfig
from notebuilder.services.audio_decoder import LibrosaDecoder
from notebuilder.services.chart_writer import write_chart
from notebuilder.services.onset_detector import LibrosaOnsetDetector
from notebuilder.services.pipeline import build_chart

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _create_output(path: Path) -> bool:
    try:
        # truncate up front so a failed run never leaves a previous chart behind
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notebuilder",
        description="Convert audio onsets into a left/right note chart",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("sensitivity", help="Onset activation threshold (librosa delta)")
    parser.add_argument("sound_file", help="Audio file to analyze")
    parser.add_argument("output", help="Chart file to write")
    parser.add_argument(
        "upper_bound",
        nargs="?",
        default=None,
        help=f"Amplitude upper bound (default: {settings.amplitude_upper_bound})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        sensitivity = float(args.sensitivity)
    except ValueError:
        _fail("Invalid sensitivity.")

    upper_bound = settings.amplitude_upper_bound
    if args.upper_bound is not None:
        try:
            upper_bound = int(args.upper_bound)
        except ValueError:
            _fail("Invalid amplitude upper bound.")

    input_path = Path(args.sound_file)
    output_path = Path(args.output)
    if not input_path.is_file():
        _fail("File not exist.")

    if not _create_output(output_path):
        _fail("Cannot create output file.")

    try:
        detector = LibrosaOnsetDetector(
            activation_threshold=sensitivity,
            hop_length=settings.hop_length,
            window_ms=settings.amplitude_window_ms,
        )
    except ValueError:
        _fail("Could not create onset detector.")

    decoder = LibrosaDecoder(settings.sample_rate)
    config = ClassifierConfig(amplitude_upper_bound=upper_bound)

    try:
        notes = build_chart(input_path, decoder, detector, config)
    except DecodeError:
        logger.debug("Decode failed", exc_info=True)
        _fail("Could not load audio source.")
    except DetectionError:
        logger.debug("Detection failed", exc_info=True)
        _fail("Could not detect onsets from audio source.")
    except InvalidInputError:
        _fail("No onsets detected.")

    try:
        write_chart(notes, output_path)
    except OSError:
        _fail("Cannot write result to output file.")


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    main()


if __name__ == "__main__":
    run()
