"""
Repository pattern implementations for sheet access.

This module provides a clean abstraction over the ladder sheet with atomic
writes and error handling.
"""

from .base import BaseRepository
from .ladder_repository import LadderRepository

__all__ = ['BaseRepository', 'LadderRepository']
