"""
Immutable registry of players on the ladder.

Every update returns a new registry; a registry handed to a caller is never
changed in place, so each step of a recompute can be inspected on its own.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .constants import DEFAULT_MU, DEFAULT_SIGMA
from .player import Player, PlayerName


class PlayerRegistry:
    """
    Mapping of player name -> Player, iterated in order of first appearance.
    """

    def __init__(self, players: Optional[Dict[PlayerName, Player]] = None):
        self._players: Dict[PlayerName, Player] = dict(players or {})

    def __contains__(self, name: object) -> bool:
        return name in self._players

    def __getitem__(self, name: PlayerName) -> Player:
        return self._players[name]

    def __iter__(self) -> Iterator[PlayerName]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerRegistry):
            return NotImplemented
        return self._players == other._players

    def __repr__(self) -> str:
        return f"PlayerRegistry({list(self._players.values())!r})"

    def get(self, name: PlayerName) -> Optional[Player]:
        return self._players.get(name)

    def players(self) -> List[Player]:
        """All players in insertion (first appearance) order."""
        return list(self._players.values())

    def with_rank(self, name: PlayerName, rank: int) -> "PlayerRegistry":
        """
        Return a new registry with `name` at `rank`.

        Existing players keep their skill; unknown names are inserted with the
        default prior.
        """
        players = dict(self._players)
        existing = players.get(name)
        if existing is None:
            players[name] = Player(name=name, skill=(DEFAULT_MU, DEFAULT_SIGMA), rank=rank)
        else:
            players[name] = existing.with_rank(rank)
        return PlayerRegistry(players)

    def with_updated_skills(self, updated: Iterable[Player]) -> "PlayerRegistry":
        """
        Return a new registry where each given player replaces the entry with
        the same name. Players not listed are unaffected.
        """
        players = dict(self._players)
        for player in updated:
            players[player.name] = Player(
                name=player.name,
                skill=(player.skill[0], player.skill[1]),
                rank=player.rank,
            )
        return PlayerRegistry(players)
