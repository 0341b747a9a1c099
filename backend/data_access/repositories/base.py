"""
Base repository with sheet file management.

Provides a context manager for sheet writes that handles:
- Loading the current rows
- Replacing the file atomically on success
- Leaving the original file untouched on failure
"""

import csv
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional

from domain import SinkWriteError
from ladder_sheet import get_sheet_path, load_sheet

logger = logging.getLogger(__name__)

Rows = List[List[str]]


class BaseRepository:
    """
    Base class for sheet repositories.

    Subclasses read with self.read_rows() and write through self.edit().
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_sheet_path()

    def read_rows(self) -> Rows:
        return load_sheet(self.path)

    @contextmanager
    def edit(self) -> Generator[Rows, None, None]:
        """
        Context manager for sheet writes.

        Yields the current rows for in-place editing. On a clean exit the
        edited rows are written to a temporary file next to the sheet and
        swapped in with os.replace; on any exception nothing is written.

        Raises:
            SinkWriteError: if the edited sheet cannot be written

        Example:
            with self.edit() as rows:
                rows[1][8] = "Alice"
        """
        rows = self.read_rows()
        yield rows
        self._replace(rows)

    def _replace(self, rows: Rows) -> None:
        directory = self.path.resolve().parent
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                csv.writer(tmp).writerows(rows)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write ladder sheet {self.path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise SinkWriteError(f"Failed to write ladder sheet {self.path}: {e}") from e
