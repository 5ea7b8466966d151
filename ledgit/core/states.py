"""File lifecycle states and the transitions between them."""

import enum
import logging
from typing import Dict, Iterable, List
from .errors import DuplicatePathError, UnknownPathError

logger = logging.getLogger(__name__)


class FileState(enum.Enum):
    """Lifecycle state of a working-tree path."""
    
    UNTRACKED = 'untracked'
    TRACKED = 'tracked'
    MODIFIED = 'modified'
    STAGED = 'staged'


class FileStateMachine:
    """
    Tracks the lifecycle state of every known path.
    
    Transitions:
    - seed:   (absent)          -> TRACKED
    - create: (absent)          -> UNTRACKED
    - modify: TRACKED / STAGED  -> MODIFIED
    - stage:  MODIFIED          -> STAGED
    - commit: STAGED            -> TRACKED
    
    Modifying an untracked or unknown path and staging a path that is not
    MODIFIED leave the state untouched and do not raise. The transition
    methods return True when the state changed.
    """
    
    def __init__(self, tracked_paths: Iterable[str] = ()):
        """
        Initialize the state machine.
        
        Args:
            tracked_paths: Paths that start out TRACKED
        """
        self._states: Dict[str, FileState] = {}
        for path in tracked_paths:
            self.seed(path)
    
    def seed(self, path: str) -> bool:
        """Register path as TRACKED. Already known paths are left as they are."""
        if path in self._states:
            return False
        self._states[path] = FileState.TRACKED
        return True
    
    def create(self, path: str) -> None:
        """
        Register a new UNTRACKED path.
        
        Raises:
            DuplicatePathError: If the path is already known
        """
        if path in self._states:
            raise DuplicatePathError(path)
        self._states[path] = FileState.UNTRACKED
        logger.debug("%s: created (untracked)", path)
    
    def modify(self, path: str) -> bool:
        """Move a TRACKED or STAGED path to MODIFIED."""
        state = self._states.get(path)
        if state in (FileState.TRACKED, FileState.STAGED):
            self._transition(path, state, FileState.MODIFIED)
            return True
        return False
    
    def stage(self, path: str) -> bool:
        """Move a MODIFIED path to STAGED."""
        state = self._states.get(path)
        if state is FileState.MODIFIED:
            self._transition(path, state, FileState.STAGED)
            return True
        return False
    
    def commit(self) -> List[str]:
        """
        Move every STAGED path back to TRACKED.
        
        Returns:
            Paths that were committed, sorted
        """
        committed = self.paths(FileState.STAGED)
        for path in committed:
            self._transition(path, FileState.STAGED, FileState.TRACKED)
        return committed
    
    def state(self, path: str) -> FileState:
        """
        Get the state of path.
        
        Raises:
            UnknownPathError: If the path was never created or seeded
        """
        try:
            return self._states[path]
        except KeyError:
            raise UnknownPathError(path) from None
    
    def paths(self, state: FileState = None) -> List[str]:
        """Known paths, optionally filtered by state, sorted."""
        return sorted(
            path for path, current in self._states.items()
            if state is None or current is state
        )
    
    def _transition(self, path: str, old: FileState, new: FileState) -> None:
        self._states[path] = new
        logger.debug("%s: %s -> %s", path, old.value, new.value)
    
    def __contains__(self, path: str) -> bool:
        return path in self._states
    
    def __len__(self) -> int:
        return len(self._states)
    
    def __repr__(self) -> str:
        return f"FileStateMachine(paths={len(self)})"
