"""
Domain entities for the ladder.

This module contains the player, game and leaderboard types that are
independent of infrastructure concerns (sheet I/O, rating engine).
"""

from .constants import DEFAULT_MU, DEFAULT_SIGMA, INPUT_RANGE, OUTPUT_RANGE
from .errors import (
    LadderError,
    MalformedSourceError,
    DegenerateGameError,
    DuplicatePlayerError,
    SinkWriteError,
)
from .player import Player, GameResult, PlayerName, Skill
from .player_registry import PlayerRegistry
from .leaderboard import LeaderboardEntry

__all__ = [
    'DEFAULT_MU', 'DEFAULT_SIGMA', 'INPUT_RANGE', 'OUTPUT_RANGE',
    'LadderError',
    'MalformedSourceError',
    'DegenerateGameError',
    'DuplicatePlayerError',
    'SinkWriteError',
    'Player',
    'GameResult',
    'PlayerName',
    'Skill',
    'PlayerRegistry',
    'LeaderboardEntry',
]
