"""
Ladder sheet location and A1 range helpers.

The ladder lives in a single CSV file standing in for the spreadsheet.
Its path comes from LADDER_SHEET_PATH (a .env file is honoured), defaulting
to ladder.csv in the working directory.
"""

import csv
import logging
import os
import re
from pathlib import Path
from typing import List, NamedTuple, Optional

from dotenv import load_dotenv

from domain import MalformedSourceError

load_dotenv()
logger = logging.getLogger(__name__)

DEFAULT_SHEET_PATH = "ladder.csv"

_A1_RANGE = re.compile(r"^([A-Z]+)(\d+):([A-Z]+)(\d*)$")


class SheetRange(NamedTuple):
    """0-based, inclusive bounds; last_row None means open-ended."""

    first_row: int
    first_col: int
    last_col: int
    last_row: Optional[int] = None

    @property
    def width(self) -> int:
        return self.last_col - self.first_col + 1


def get_sheet_path() -> Path:
    """
    Get the ladder sheet path.

    Priority:
    1. LADDER_SHEET_PATH environment variable
    2. ladder.csv in the working directory
    """
    return Path(os.getenv("LADDER_SHEET_PATH") or DEFAULT_SHEET_PATH)


def column_index(letters: str) -> int:
    """Convert column letters to a 0-based index (A -> 0, AA -> 26)."""
    index = 0
    for letter in letters:
        index = index * 26 + (ord(letter) - ord("A") + 1)
    return index - 1


def parse_range(a1: str) -> SheetRange:
    """
    Parse an A1 range such as "B2:G" or "I2:J10".

    Raises:
        ValueError: if the range is not in A1 notation
    """
    match = _A1_RANGE.match(a1.strip().upper())
    if not match:
        raise ValueError(f"Invalid A1 range: {a1!r}")

    start_col, start_row, end_col, end_row = match.groups()
    first_col = column_index(start_col)
    last_col = column_index(end_col)
    if last_col < first_col:
        raise ValueError(f"Invalid A1 range (columns reversed): {a1!r}")

    return SheetRange(
        first_row=int(start_row) - 1,
        first_col=first_col,
        last_col=last_col,
        last_row=int(end_row) - 1 if end_row else None,
    )


def load_sheet(path: Path) -> List[List[str]]:
    """
    Read every row of the sheet as lists of strings.

    Raises:
        MalformedSourceError: if the sheet cannot be read
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return [list(row) for row in csv.reader(f)]
    except FileNotFoundError as e:
        logger.error(f"Ladder sheet not found: {path}")
        raise MalformedSourceError(f"Ladder sheet not found: {path}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Failed to read ladder sheet {path}: {e}")
        raise MalformedSourceError(f"Failed to read ladder sheet {path}: {e}") from e
