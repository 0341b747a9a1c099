"""
Player and game result entities.
"""

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from .constants import DEFAULT_MU, DEFAULT_SIGMA

PlayerName = str
Skill = Tuple[float, float]


@dataclass(frozen=True)
class Player:
    """
    Snapshot of a player's state on the ladder.

    Attributes:
        name: unique, case-sensitive player key
        skill: (mean, standard deviation) belief about the player's skill
        rank: finishing position in the most recent game played (1 is best)
    """

    name: PlayerName
    skill: Skill = (DEFAULT_MU, DEFAULT_SIGMA)
    rank: int = 0

    @property
    def mu(self) -> float:
        return self.skill[0]

    @property
    def sigma(self) -> float:
        return self.skill[1]

    def with_rank(self, rank: int) -> "Player":
        return replace(self, rank=rank)

    def clone(self) -> "Player":
        """Return an independent copy (skill tuple included)."""
        return Player(name=self.name, skill=(self.skill[0], self.skill[1]), rank=self.rank)


@dataclass(frozen=True)
class GameResult:
    """
    One game, players listed in finishing order (index 0 finished 1st).
    """

    players: Tuple[PlayerName, ...]

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[PlayerName]:
        return iter(self.players)

    def ranked(self) -> Iterator[Tuple[PlayerName, int]]:
        """Yield (name, rank) pairs with 1-based ranks in position order."""
        for position, name in enumerate(self.players):
            yield name, position + 1
