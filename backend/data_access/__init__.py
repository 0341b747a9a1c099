"""
Data access layer for the ladder sheet.

These functions delegate to the LadderRepository for actual sheet I/O.
"""

from typing import List, Sequence

from domain import LeaderboardEntry

from .repositories import LadderRepository

__all__ = [
    'read_raw_game_results',
    'write_trueskill_results',
]


def read_raw_game_results(repo: LadderRepository = None) -> List[List[str]]:
    """
    Read the raw game block (rows x finishing positions).

    Args:
        repo: repository to read from (defaults to LADDER_SHEET_PATH)
    """
    return (repo or LadderRepository()).get_game_rows()


def write_trueskill_results(entries: Sequence[LeaderboardEntry], repo: LadderRepository = None) -> None:
    """
    Replace the leaderboard range with the given entries.

    Args:
        entries: leaderboard entries, already sorted
        repo: repository to write to (defaults to LADDER_SHEET_PATH)
    """
    (repo or LadderRepository()).write_leaderboard(entries)
