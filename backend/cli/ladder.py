#!/usr/bin/env python3
"""
Ladder entry points.

- on_open: registers the "Ladder" menu with its "Recalculate True Skill" item
- on_recalculate_trueskill: rebuilds every rating from the game rows and
  writes the sorted leaderboard back to the sheet

Usage:
    python cli/ladder.py menu
    python cli/ladder.py recalculate [--sheet ladder.csv] [--dry-run] [--show-games]
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from dotenv import load_dotenv

# Add backend directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_access.repositories import LadderRepository  # noqa: E402
from domain import LeaderboardEntry  # noqa: E402
from domain.constants import MENU_TITLE, RECALCULATE_ITEM  # noqa: E402
from services.ladder_service import recalculate_trueskill  # noqa: E402

logger = logging.getLogger(__name__)

Menu = Dict[str, Dict[str, Callable[..., object]]]

# Registered menus: title -> {item label -> handler}
MENUS: Menu = {}


def on_recalculate_trueskill(
    sheet: Optional[Path] = None,
    dry_run: bool = False,
) -> List[LeaderboardEntry]:
    """Recalculate the ladder and write it back to the sheet."""
    repo = LadderRepository(sheet)
    logger.info("Recalculating TrueSkill from %s", repo.path)
    return recalculate_trueskill(repo=repo, dry_run=dry_run)


def on_open() -> Menu:
    """Register the Ladder menu. Safe to call more than once."""
    MENUS[MENU_TITLE] = {RECALCULATE_ITEM: on_recalculate_trueskill}
    return MENUS


def print_leaderboard(entries: List[LeaderboardEntry]) -> None:
    if not entries:
        print("No games recorded; leaderboard is empty.")
        return
    width = max(len(e.player_name) for e in entries)
    for position, entry in enumerate(entries, start=1):
        print(f"{position:>3}. {entry.player_name:<{width}}  {entry.trueskill:.3f}")


def main(argv: Optional[List[str]] = None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Recalculate the TrueSkill ladder from the game history sheet."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("menu", help="Register and show the Ladder menu")

    recalc = subparsers.add_parser(
        "recalculate",
        help="Replay every game and write the leaderboard back to the sheet",
    )
    recalc.add_argument(
        "--sheet",
        type=Path,
        help="Ladder sheet CSV (default: LADDER_SHEET_PATH or ladder.csv)",
    )
    recalc.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute the leaderboard without writing it to the sheet",
    )
    recalc.add_argument(
        "--show-games",
        action="store_true",
        help="Log per-game rating changes while replaying",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command == "menu":
        for title, items in on_open().items():
            print(title)
            for label, handler in items.items():
                print(f"  {label} -> {handler.__name__}")
        return

    if args.show_games:
        logging.getLogger("services.ladder_processor").setLevel(logging.DEBUG)
        logging.getLogger("services.trueskill_engine").setLevel(logging.DEBUG)

    entries = on_recalculate_trueskill(sheet=args.sheet, dry_run=args.dry_run)
    print_leaderboard(entries)
    if args.dry_run:
        print("(dry-run; sheet not updated)")


if __name__ == "__main__":
    main()
