"""
Project the final registry into a sorted leaderboard.
"""

from typing import List

from domain import LeaderboardEntry, PlayerRegistry


def build_leaderboard(registry: PlayerRegistry) -> List[LeaderboardEntry]:
    """
    Entries sorted by skill mean, highest first.

    sorted() is stable, so equal means keep registry order (first appearance).
    """
    entries = [
        LeaderboardEntry(player_name=player.name, trueskill=player.mu)
        for player in registry.players()
    ]
    return sorted(entries, key=lambda entry: entry.trueskill, reverse=True)
