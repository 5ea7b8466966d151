"""Index (staging area) implementation."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class StagingEntry:
    """A path staged for the next commit and the digest of its content."""
    path: str
    digest: str
    
    def __repr__(self) -> str:
        """String representation."""
        return f"StagingEntry({self.digest[:7]} {self.path})"


class StagingArea:
    """
    Ledgit staging area.
    
    Holds the paths to be included in the next commit, each mapped to the
    digest of its staged content. Entries live until the next commit
    clears the area.
    """
    
    def __init__(self):
        """Initialize empty staging area."""
        self._entries: Dict[str, StagingEntry] = {}
    
    def stage(self, path: str, digest: str) -> StagingEntry:
        """
        Add or replace the entry for path.
        
        Args:
            path: Path relative to the working tree
            digest: Digest of the staged content
            
        Returns:
            StagingEntry: The new entry
        """
        entry = StagingEntry(path, digest)
        self._entries[path] = entry
        return entry
    
    def entries(self) -> Tuple[StagingEntry, ...]:
        """Snapshot of all entries, sorted by path."""
        return tuple(self._entries[path] for path in sorted(self._entries))
    
    def get_entry(self, path: str) -> Optional[StagingEntry]:
        """Get entry by path."""
        return self._entries.get(path)
    
    def as_dict(self) -> Dict[str, str]:
        """Mapping of staged path to digest."""
        return {path: entry.digest for path, entry in self._entries.items()}
    
    def clear(self) -> None:
        """Clear all entries."""
        self._entries = {}
    
    def __contains__(self, path: str) -> bool:
        return path in self._entries
    
    def __len__(self) -> int:
        """Number of staged entries."""
        return len(self._entries)
    
    def __repr__(self) -> str:
        """String representation."""
        return f"StagingArea(entries={len(self._entries)})"
