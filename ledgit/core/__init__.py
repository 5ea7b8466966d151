"""Core functionality for Ledgit.

This module contains the core data structures:
- Ledgit objects (Commit)
- Content hashing and the object store
- File lifecycle states
- Staging area
- Repository management
- Configuration management

The command-line front end lives in ledgit.cli.
"""

from ledgit.core.objects import LedgitObject, Commit
from ledgit.core.repository import Repository
from ledgit.core.hash import ContentHasher, hash_object, hash_file
from ledgit.core.store import ObjectStore, FileObjectStore
from ledgit.core.states import FileState, FileStateMachine
from ledgit.core.index import StagingArea, StagingEntry
from ledgit.core.config import Config, get_config
from ledgit.core.errors import (
    LedgitError,
    DuplicatePathError,
    UnknownPathError,
    NotFoundError,
    EmptyCommitError,
)

__all__ = [
    'LedgitObject',
    'Commit',
    'Repository',
    'ContentHasher',
    'hash_object',
    'hash_file',
    'ObjectStore',
    'FileObjectStore',
    'FileState',
    'FileStateMachine',
    'StagingArea',
    'StagingEntry',
    'Config',
    'get_config',
    'LedgitError',
    'DuplicatePathError',
    'UnknownPathError',
    'NotFoundError',
    'EmptyCommitError',
]
