"""Ledgit - a minimal content-addressed version control engine."""

__version__ = '0.1.0'

from ledgit.core.repository import Repository
from ledgit.core.objects import LedgitObject, Commit
from ledgit.core.states import FileState

__all__ = [
    'Repository',
    'LedgitObject',
    'Commit',
    'FileState',
]
