class NoteBuilderError(Exception):
    """Base class for chart building failures."""


class InvalidInputError(NoteBuilderError, ValueError):
    """The onset sequence cannot be classified (e.g. it is empty)."""


class DecodeError(NoteBuilderError):
    """The audio source could not be loaded."""


class DetectionError(NoteBuilderError):
    """Onset detection failed on a decoded sample stream."""
