"""Left/right direction assignment for detected onsets.

Each onset's integer amplitude parity picks a side (odd → L, even → R).
Onsets louder than the configured upper bound are tagged U and skip the
balancing entirely. A run of identical picks is broken by flipping the
pick once the streak counter reaches STREAK_LIMIT.

Note: the running direction is seeded from the first onset's parity even
when that onset itself ends up tagged U.
"""

import logging
from collections.abc import Sequence

from notebuilder.errors import InvalidInputError
from notebuilder.models.note_event import ClassifierConfig, Direction, NoteEvent, OnsetEvent

logger = logging.getLogger(__name__)

STREAK_LIMIT = 3

DEFAULT_CONFIG = ClassifierConfig()


def parity_direction(amplitude: float) -> Direction:
    """Map the integer part of an amplitude to R (even) or L (odd)."""
    return Direction.L if int(amplitude) % 2 == 1 else Direction.R


def _flip(direction: Direction) -> Direction:
    return Direction.R if direction == Direction.L else Direction.L


class DirectionTracker:
    """Incremental classifier: one onset in, one note out.

    Holds the last binary direction and its streak count. Not safe to share
    between concurrent producers.
    """

    def __init__(self, config: ClassifierConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.current: Direction | None = None
        self.streak = 0

    def reset(self) -> None:
        self.current = None
        self.streak = 0

    def push(self, event: OnsetEvent) -> NoteEvent:
        if self.current is None:
            self.current = parity_direction(event.amplitude)

        time_ms = int(event.time * 1000)

        if event.amplitude > self.config.amplitude_upper_bound:
            return NoteEvent(time_ms=time_ms, direction=Direction.U)

        pick = parity_direction(event.amplitude)
        if pick != self.current:
            self.streak = 0
        else:
            self.streak += 1

        if self.streak >= STREAK_LIMIT:
            pick = _flip(pick)
            self.streak = 0

        self.current = pick
        return NoteEvent(time_ms=time_ms, direction=pick)


def classify(
    events: Sequence[OnsetEvent], config: ClassifierConfig = DEFAULT_CONFIG
) -> list[NoteEvent]:
    """Assign a direction to every onset, preserving order.

    Args:
        events: Onsets sorted by time (ordering is trusted, not checked)
        config: Classifier parameters (amplitude upper bound)

    Returns:
        One NoteEvent per input onset, in the same order.

    Raises:
        InvalidInputError: if ``events`` is empty.
    """
    if len(events) == 0:
        raise InvalidInputError("Cannot classify an empty onset sequence")

    tracker = DirectionTracker(config)
    notes = [tracker.push(event) for event in events]

    unbounded = sum(1 for n in notes if n.direction == Direction.U)
    logger.info(
        f"Classified {len(notes)} onsets ({unbounded} above bound "
        f"{config.amplitude_upper_bound})"
    )
    return notes
