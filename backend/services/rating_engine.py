"""
Base rating engine interface for the ladder.
"""

from typing import List, Sequence

from domain import Player


class RatingEngine:
    """
    Base class/interface for rating engines.

    An engine receives one game's participants as independent Player
    snapshots, ordered by rank ascending (1st place first), and returns an
    equally ordered list with updated skills. Ranks pass through unchanged.
    """

    def adjust_players(self, players: Sequence[Player]) -> List[Player]:
        """
        Return updated snapshots for one game.

        Raises:
            DegenerateGameError: if the game has fewer than 2 players
        """
        raise NotImplementedError
