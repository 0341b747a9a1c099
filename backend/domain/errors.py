"""
Error types raised while recomputing the ladder.

Every error aborts the whole run; nothing is retried or skipped, the fix is
to correct the sheet and recalculate.
"""


class LadderError(Exception):
    """Base class for ladder recompute failures."""


class MalformedSourceError(LadderError, ValueError):
    """The raw game block is not rectangular or contains non-string cells."""


class DegenerateGameError(LadderError, ValueError):
    """A game cannot be rated (fewer than 2 players, or tied/unordered ranks)."""


class DuplicatePlayerError(DegenerateGameError):
    """The same player name appears more than once in a single game."""


class SinkWriteError(LadderError):
    """The leaderboard could not be written back to the sheet."""
