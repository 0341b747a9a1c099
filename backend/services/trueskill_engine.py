from __future__ import annotations

"""
TrueSkill rating engine wrapper.

Encapsulates the TrueSkill environment and rates one finished game at a
time: each participant is a one-player team, ranked by finishing position.
"""

import logging
from typing import List, Sequence

from trueskill import TrueSkill

from domain import DegenerateGameError, DuplicatePlayerError, Player
from domain.constants import (
    DEFAULT_MU,
    DEFAULT_SIGMA,
    DEFAULT_BETA,
    DEFAULT_TAU,
    DEFAULT_DRAW_PROBABILITY,
)
from services.rating_engine import RatingEngine

logger = logging.getLogger(__name__)


def conservative_rating(mu: float, sigma: float) -> float:
    return mu - 3.0 * sigma


def check_game(players: Sequence[Player]) -> None:
    """
    Reject games the engine cannot rate.

    Raises:
        DegenerateGameError: fewer than 2 players, or ranks not strictly increasing
        DuplicatePlayerError: a name appears more than once
    """
    if len(players) < 2:
        raise DegenerateGameError(
            f"A game needs at least 2 players to be rated, got {len(players)}"
        )

    seen = set()
    for player in players:
        if player.name in seen:
            raise DuplicatePlayerError(f"Player {player.name!r} appears more than once in one game")
        seen.add(player.name)

    for previous, current in zip(players, players[1:]):
        if current.rank <= previous.rank:
            raise DegenerateGameError(
                f"Ranks must be strictly increasing (ties are not supported): "
                f"{previous.name}={previous.rank}, {current.name}={current.rank}"
            )


class TrueSkillEngine(RatingEngine):
    """
    Wraps the TrueSkill environment behind the RatingEngine interface.
    """

    def __init__(self, env: TrueSkill | None = None) -> None:
        self.env = env or TrueSkill(
            mu=DEFAULT_MU,
            sigma=DEFAULT_SIGMA,
            beta=DEFAULT_BETA,
            tau=DEFAULT_TAU,
            draw_probability=DEFAULT_DRAW_PROBABILITY,
        )

    def adjust_players(self, players: Sequence[Player]) -> List[Player]:
        check_game(players)

        teams = [[self.env.create_rating(mu=p.mu, sigma=p.sigma)] for p in players]
        # TrueSkill ranks are 0-based (0 is best)
        ranks = [p.rank - 1 for p in players]

        rated_teams = self.env.rate(teams, ranks=ranks)

        updated = []
        for player, rated_team in zip(players, rated_teams):
            new_rating = rated_team[0]
            updated.append(
                Player(
                    name=player.name,
                    skill=(new_rating.mu, new_rating.sigma),
                    rank=player.rank,
                )
            )
            logger.debug(
                "Rated %s (rank %d): mu %.3f -> %.3f, sigma %.3f -> %.3f, exposed=%.3f",
                player.name,
                player.rank,
                player.mu,
                new_rating.mu,
                player.sigma,
                new_rating.sigma,
                conservative_rating(new_rating.mu, new_rating.sigma),
            )

        return updated
