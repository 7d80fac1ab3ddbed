import logging
from collections.abc import Iterable
from pathlib import Path

from notebuilder.models.note_event import NoteEvent

logger = logging.getLogger(__name__)


def format_chart(notes: Iterable[NoteEvent]) -> str:
    """Render notes as "<time_ms> <direction>" lines."""
    return "".join(f"{note.time_ms} {note.direction}\n" for note in notes)


def write_chart(notes: list[NoteEvent], output_path: Path) -> Path:
    """Write a note chart to a text file."""
    output_path = Path(output_path)
    output_path.write_text(format_chart(notes), encoding="utf-8")
    logger.info(f"Chart written to {output_path} ({len(notes)} notes)")
    return output_path
