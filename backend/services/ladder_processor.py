"""
Fold the game history over the player registry.

Games are processed strictly in the order given (chronological order of
play): each game's rating update starts from the skills accumulated over all
earlier games.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from domain import DuplicatePlayerError, GameResult, PlayerRegistry
from services.rating_engine import RatingEngine

logger = logging.getLogger(__name__)


class LadderProcessor:
    """
    Sequentially applies each game to an immutable PlayerRegistry.
    """

    def __init__(self, engine: RatingEngine):
        self.engine = engine

    def step(self, registry: PlayerRegistry, game: GameResult) -> PlayerRegistry:
        """
        Apply one game and return the resulting registry.

        Ranks are written first (new players get the default prior), then the
        rank-updated snapshots go to the engine and its output is merged back.
        """
        names = list(game)
        if len(set(names)) != len(names):
            raise DuplicatePlayerError(f"Game lists a player more than once: {names}")

        for name, rank in game.ranked():
            registry = registry.with_rank(name, rank)

        snapshots = [registry[name].clone() for name in names]
        updated = self.engine.adjust_players(snapshots)

        return registry.with_updated_skills(updated)

    def iter_states(
        self,
        games: Iterable[GameResult],
        registry: Optional[PlayerRegistry] = None,
    ) -> Iterator[Tuple[GameResult, PlayerRegistry]]:
        """Yield (game, registry after that game) for every game in order."""
        registry = registry if registry is not None else PlayerRegistry()
        for game in games:
            registry = self.step(registry, game)
            logger.debug("Game %s", ", ".join(game))
            yield game, registry

    def fold(self, games: Iterable[GameResult]) -> PlayerRegistry:
        """Process every game from an empty registry and return the final state."""
        registry = PlayerRegistry()
        processed = 0
        for _, registry in self.iter_states(games, registry):
            processed += 1
        logger.info("Processed %d games for %d players", processed, len(registry))
        return registry
