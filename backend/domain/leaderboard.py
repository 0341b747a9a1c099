"""
Leaderboard entity written back to the ladder sheet.
"""

from dataclasses import dataclass
from typing import List

from .player import PlayerName


@dataclass(frozen=True)
class LeaderboardEntry:
    player_name: PlayerName
    trueskill: float

    def to_row(self) -> List[object]:
        return [self.player_name, self.trueskill]
