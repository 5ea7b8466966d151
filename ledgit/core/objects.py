"""Ledgit objects."""

import time
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping, Optional
from .hash import DEFAULT_ALGORITHM, hash_object


class LedgitObject(ABC):
    """Base class for all Ledgit objects."""
    
    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        self._hash: Optional[str] = None
        self.algorithm = algorithm
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.
        
        Returns:
            bytes: Serialized object data
        """
        pass
    
    @property
    def type(self) -> str:
        """
        Return object type name.
        
        Returns:
            str: Object type (commit)
        """
        return self.__class__.__name__.lower()
    
    def compute_hash(self) -> str:
        """
        Compute and cache object hash.
        
        Objects are hashed with a header containing the type and size.
        Format: <type> <size>\\0<content>
        
        Returns:
            str: Hex digest
        """
        if self._hash is None:
            data = self.serialize()
            header = f"{self.type} {len(data)}\0".encode()
            self._hash = hash_object(header + data, self.algorithm)
        return self._hash
    
    @property
    def hash(self) -> str:
        """
        Get object hash.
        
        Returns:
            str: Hex digest
        """
        return self.compute_hash()


class Commit(LedgitObject):
    """
    Represents a commit with metadata.
    
    A commit captures:
    - Snapshot of every tracked path (path -> blob digest)
    - Parent commit for history (None for the root commit)
    - Author info
    - Timestamp
    - Commit message
    
    Commits are values: the snapshot is exposed read-only and every
    field is fixed once the commit is created.
    """
    
    def __init__(
        self,
        snapshot: Mapping[str, str],
        parent: Optional[str],
        message: str,
        author: str,
        timestamp: int,
        algorithm: str = DEFAULT_ALGORITHM
    ):
        super().__init__(algorithm)
        self._snapshot = MappingProxyType(dict(snapshot))
        self._parent = parent
        self._message = message
        self._author = author
        self._timestamp = timestamp
    
    @property
    def snapshot(self) -> Mapping[str, str]:
        """Read-only mapping of path to blob digest."""
        return self._snapshot
    
    @property
    def parent(self) -> Optional[str]:
        return self._parent
    
    @property
    def message(self) -> str:
        return self._message
    
    @property
    def author(self) -> str:
        return self._author
    
    @property
    def timestamp(self) -> int:
        return self._timestamp
    
    @property
    def id(self) -> str:
        """Commit id, the digest of the serialized commit."""
        return self.hash
    
    def serialize(self) -> bytes:
        """
        Serialize commit to Ledgit format.
        
        Format:
        parent <parent-id>  (omitted for the root commit)
        timestamp <unix-seconds>
        author <length> <author>
        file <digest> <length> <path>  (one per snapshot entry, sorted by path)
        
        <commit message>
        
        Author and paths carry their length in characters, so a newline
        inside them cannot be read as the start of another field.
        
        Returns:
            bytes: Serialized commit data
        """
        lines = []
        
        if self._parent:
            lines.append(f'parent {self._parent}')
        
        lines.append(f'timestamp {self._timestamp}')
        lines.append(f'author {len(self._author)} {self._author}')
        
        for path in sorted(self._snapshot):
            lines.append(f'file {self._snapshot[path]} {len(path)} {path}')
        
        lines.append('')
        lines.append(self._message)
        
        return '\n'.join(lines).encode()
    
    @classmethod
    def create(
        cls,
        snapshot: Mapping[str, str],
        parent: Optional[str],
        message: str,
        author: str = '',
        timestamp: Optional[int] = None,
        algorithm: str = DEFAULT_ALGORITHM
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            snapshot: Mapping of every tracked path to its blob digest
            parent: Id of the parent commit, or None for the root commit
            message: Commit message
            author: Author name and email (e.g., "Name <email>")
            timestamp: Unix timestamp (defaults to current time)
            algorithm: Hash algorithm for the commit id
            
        Returns:
            Commit: New commit object
        """
        if timestamp is None:
            timestamp = int(time.time())
        
        return cls(snapshot, parent, message, author, timestamp, algorithm)
    
    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self._parent[:7]}" if self._parent else ""
        msg_preview = self._message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
