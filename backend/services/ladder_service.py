"""
Full ladder recompute: read the sheet, fold every game, write the leaderboard.

Nothing persists between runs except the game rows themselves; each run
rebuilds every rating from the default prior.
"""

import logging
from typing import List, Optional

from data_access import read_raw_game_results, write_trueskill_results
from data_access.repositories import LadderRepository
from domain import LeaderboardEntry
from services.game_result_normalizer import normalize_game_results
from services.ladder_processor import LadderProcessor
from services.leaderboard_builder import build_leaderboard
from services.rating_engine import RatingEngine
from services.trueskill_engine import TrueSkillEngine

logger = logging.getLogger(__name__)


def calculate_trueskill(raw_rows, engine: Optional[RatingEngine] = None) -> List[LeaderboardEntry]:
    """
    Compute the sorted leaderboard for a raw rows x columns block.

    Pure apart from logging: the same rows always give the same leaderboard.
    """
    games = normalize_game_results(raw_rows)
    processor = LadderProcessor(engine or TrueSkillEngine())
    registry = processor.fold(games)
    return build_leaderboard(registry)


def recalculate_trueskill(
    repo: Optional[LadderRepository] = None,
    engine: Optional[RatingEngine] = None,
    dry_run: bool = False,
) -> List[LeaderboardEntry]:
    """
    Recalculate every rating from the sheet and write the leaderboard back.

    Any failure aborts before the write, leaving the sheet as it was.

    Args:
        repo: sheet repository (defaults to LADDER_SHEET_PATH)
        engine: rating engine (defaults to TrueSkill)
        dry_run: compute the leaderboard without writing it

    Returns:
        The leaderboard entries, highest mean first
    """
    repo = repo or LadderRepository()
    raw_rows = read_raw_game_results(repo)
    leaderboard = calculate_trueskill(raw_rows, engine)

    if dry_run:
        logger.info("Dry run: leaderboard for %d players not written", len(leaderboard))
        return leaderboard

    write_trueskill_results(leaderboard, repo)
    return leaderboard
