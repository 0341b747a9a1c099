"""
Convert raw sheet rows into ordered game results.

Each row is one game, cells left to right are finishing positions. Empty
cells are compacted away (they do not occupy a rank slot) and rows that end
up empty are dropped. Row order is preserved: it is the chronological order
the ladder is folded in.
"""

from typing import List, Sequence

from domain import GameResult, MalformedSourceError

RawRow = Sequence[object]


def validate_block(rows: Sequence[RawRow]) -> None:
    """
    Check that a raw block is rectangular and holds only string cells.

    Raises:
        MalformedSourceError: on ragged rows or non-string cells
    """
    width = None
    for row_index, row in enumerate(rows):
        if isinstance(row, (str, bytes)):
            raise MalformedSourceError(f"Row {row_index} is a string, expected a row of cells")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise MalformedSourceError(
                f"Row {row_index} has {len(row)} cells, expected {width} (block must be rectangular)"
            )
        for col_index, cell in enumerate(row):
            if not isinstance(cell, str):
                raise MalformedSourceError(
                    f"Cell ({row_index}, {col_index}) is {type(cell).__name__}, expected str"
                )


def normalize_row(row: RawRow) -> List[str]:
    """Drop empty cells, keeping the order of the rest."""
    return [value for value in row if value != ""]


def normalize_game_results(rows: Sequence[RawRow]) -> List[GameResult]:
    """
    Turn a raw rows x columns block into GameResults, in source row order.

    Duplicate names within a row are passed through untouched.
    """
    validate_block(rows)

    games: List[GameResult] = []
    for row in rows:
        players = normalize_row(row)
        if not players:
            continue
        games.append(GameResult(players=tuple(players)))
    return games
