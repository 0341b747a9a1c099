"""
Ladder repository for reading game rows and writing the leaderboard.
"""

import logging
from typing import List, Sequence

from domain import LeaderboardEntry
from domain.constants import INPUT_RANGE, OUTPUT_RANGE
from ladder_sheet import SheetRange, parse_range

from .base import BaseRepository

logger = logging.getLogger(__name__)


def _pad(row: List[str], length: int) -> List[str]:
    if len(row) < length:
        row.extend([""] * (length - len(row)))
    return row


class LadderRepository(BaseRepository):
    """
    Repository for the ladder sheet.

    Games are read from INPUT_RANGE (one game per row, 1st place leftmost);
    the leaderboard is written to OUTPUT_RANGE as (name, mean) rows.
    """

    input_range: SheetRange = parse_range(INPUT_RANGE)
    output_range: SheetRange = parse_range(OUTPUT_RANGE)

    # -------------------------------------------------------------------------
    # Query operations
    # -------------------------------------------------------------------------

    def get_game_rows(self) -> List[List[str]]:
        """
        Return the input block as a rectangular list of string rows.

        Short rows are padded with empty cells, rows past the end of the
        sheet are not returned.
        """
        rng = self.input_range
        rows = self.read_rows()
        last_row = len(rows) - 1 if rng.last_row is None else min(rng.last_row, len(rows) - 1)

        block = []
        for row in rows[rng.first_row:last_row + 1]:
            cells = row[rng.first_col:rng.last_col + 1]
            block.append(_pad(list(cells), rng.width))

        logger.info("Read %d game rows from %s", len(block), self.path)
        return block

    # -------------------------------------------------------------------------
    # Update operations
    # -------------------------------------------------------------------------

    def write_leaderboard(self, entries: Sequence[LeaderboardEntry]) -> None:
        """
        Clear the output range, then write one (name, mean) row per entry
        starting at its first row.
        """
        rng = self.output_range
        with self.edit() as rows:
            clear_to = len(rows) - 1 if rng.last_row is None else min(rng.last_row, len(rows) - 1)
            for row in rows[rng.first_row:clear_to + 1]:
                for col in range(rng.first_col, min(rng.last_col + 1, len(row))):
                    row[col] = ""

            for offset, entry in enumerate(entries):
                row_index = rng.first_row + offset
                while len(rows) <= row_index:
                    rows.append([])
                row = _pad(rows[row_index], rng.last_col + 1)
                name, mean = entry.to_row()
                row[rng.first_col] = name
                row[rng.first_col + 1] = repr(mean)

        logger.info("Wrote %d leaderboard rows to %s", len(entries), self.path)
