"""Repository management for Ledgit."""

import logging
import threading
import time
from typing import Callable, Dict, Iterable, List, Optional, Union

from .config import Config
from .errors import EmptyCommitError, NotFoundError, UnknownPathError
from .hash import ContentHasher
from .index import StagingArea, StagingEntry
from .objects import Commit
from .states import FileState, FileStateMachine
from .store import ObjectStore

logger = logging.getLogger(__name__)

ContentProvider = Callable[[str], bytes]


class Repository:
    """
    Represents a Ledgit repository.
    
    A repository owns the file state machine, the staging area and the
    commit history, and writes blob content to its object store. All
    mutations go through its methods and run under a single writer lock.
    """
    
    def __init__(
        self,
        tracked_paths: Iterable[str] = (),
        store: Optional[ObjectStore] = None,
        hasher: Optional[ContentHasher] = None,
        author: str = '',
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize repository.
        
        Args:
            tracked_paths: Paths that start out tracked
            store: Object store for blobs (defaults to an in-memory store)
            hasher: Content hasher (defaults to SHA-1)
            author: Author recorded on every commit
            clock: Returns the current Unix time for commit timestamps
        """
        self.store = store if store is not None else ObjectStore()
        self.hasher = hasher or ContentHasher()
        self.author = author
        self._clock = clock
        
        self._states = FileStateMachine(tracked_paths)
        self._staging = StagingArea()
        self._history: List[Commit] = []
        self._commits: Dict[str, Commit] = {}
        self._worktree: Dict[str, bytes] = {}
        self._lock = threading.RLock()
    
    @classmethod
    def from_config(
        cls,
        config: Config,
        tracked_paths: Iterable[str] = (),
        store: Optional[ObjectStore] = None
    ) -> 'Repository':
        """
        Build a repository from configuration.
        
        Uses core.hashalgorithm for the hasher and user.name/user.email
        for the commit author.
        """
        return cls(
            tracked_paths,
            store=store,
            hasher=ContentHasher(config.get_hash_algorithm()),
            author=config.get_author()
        )
    
    @property
    def staging(self) -> StagingArea:
        """The staging area. Mutated only by add_files and commit."""
        return self._staging
    
    @property
    def head(self) -> Optional[Commit]:
        """Most recent commit, or None before the first commit."""
        with self._lock:
            return self._history[-1] if self._history else None
    
    @property
    def history(self) -> List[Commit]:
        """All commits, oldest first."""
        with self._lock:
            return list(self._history)
    
    def state(self, path: str) -> FileState:
        """
        Get the lifecycle state of path.
        
        Raises:
            UnknownPathError: If the path was never created or seeded
        """
        with self._lock:
            return self._states.state(path)
    
    def status(self) -> Dict[FileState, List[str]]:
        """Known paths grouped by state."""
        with self._lock:
            return {state: self._states.paths(state) for state in FileState}
    
    def create_file(self, path: str, content: bytes = b'') -> None:
        """
        Add a new untracked file to the working tree.
        
        Args:
            path: Path of the new file
            content: Initial working-tree content
            
        Raises:
            DuplicatePathError: If the path is already known
        """
        with self._lock:
            self._states.create(path)
            self._worktree[path] = bytes(content)
    
    def modify_file(self, path: str, content: Optional[bytes] = None) -> None:
        """
        Mark a tracked or staged file as modified.
        
        Untracked and unknown paths are ignored. No blob is written here;
        content is captured when the file is added.
        
        Args:
            path: Path of the file
            content: New working-tree content for a known path
        """
        with self._lock:
            if self._states.modify(path):
                logger.debug("Modified %s", path)
            if content is not None and path in self._states:
                self._worktree[path] = bytes(content)
    
    def read_worktree(self, path: str) -> bytes:
        """
        Working-tree content recorded by create_file or modify_file.
        
        Raises:
            NotFoundError: If no content was recorded for path
        """
        try:
            return self._worktree[path]
        except KeyError:
            raise NotFoundError(path, 'Working-tree content for') from None
    
    def add_files(
        self,
        paths: Iterable[str],
        content_provider: Optional[ContentProvider] = None
    ) -> List[StagingEntry]:
        """
        Stage modified files for commit.
        
        Each MODIFIED path is hashed, its blob written to the store and the
        path staged. Paths in any other state, and unknown paths, are
        skipped. Paths are handled one at a time, so an error from the
        content provider leaves the earlier paths staged.
        
        Args:
            paths: Paths to stage
            content_provider: Returns the bytes of a path (defaults to
                the recorded working-tree content)
            
        Returns:
            Entries staged by this call
        """
        provider = content_provider or self.read_worktree
        staged = []
        
        with self._lock:
            for path in paths:
                if path not in self._states or self._states.state(path) is not FileState.MODIFIED:
                    continue
                
                data = provider(path)
                digest = self.hasher.hash(data)
                self.store.put(digest, data)
                
                staged.append(self._staging.stage(path, digest))
                self._states.stage(path)
                logger.debug("Staged %s as %s", path, digest[:7])
        
        return staged
    
    def commit(self, message: str) -> Commit:
        """
        Record the staged changes as a new commit.
        
        The snapshot is the previous commit's snapshot overlaid with the
        staged entries, so unchanged tracked files carry forward.
        
        Args:
            message: Commit message
            
        Returns:
            Commit: The new commit
            
        Raises:
            EmptyCommitError: If nothing is staged
        """
        with self._lock:
            if not self._staging:
                raise EmptyCommitError()
            
            parent = self.head
            snapshot = dict(parent.snapshot) if parent else {}
            snapshot.update(self._staging.as_dict())
            
            commit = Commit.create(
                snapshot=snapshot,
                parent=parent.id if parent else None,
                message=message,
                author=self.author,
                timestamp=int(self._clock()),
                algorithm=self.hasher.algorithm
            )
            
            self._history.append(commit)
            self._commits[commit.id] = commit
            self._staging.clear()
            committed = self._states.commit()
        
        logger.info("Created commit %s (%d file(s) changed)", commit.id[:7], len(committed))
        return commit
    
    def get_commit(self, commit_id: str) -> Commit:
        """
        Look up a commit by id.
        
        Raises:
            NotFoundError: If no commit has that id
        """
        with self._lock:
            commit = self._commits.get(commit_id)
        if commit is None:
            raise NotFoundError(commit_id, 'Commit')
        return commit
    
    def log(self) -> List[Commit]:
        """Commits reachable from HEAD, newest first."""
        commits = []
        with self._lock:
            commit = self._history[-1] if self._history else None
            while commit is not None:
                commits.append(commit)
                commit = self._commits.get(commit.parent) if commit.parent else None
        return commits
    
    def read_file(self, path: str, commit: Union[Commit, str, None] = None) -> bytes:
        """
        Read the content of path as recorded in a commit.
        
        Args:
            path: Path in the snapshot
            commit: Commit or commit id (defaults to HEAD)
            
        Raises:
            UnknownPathError: If the path is not in the commit's snapshot
            NotFoundError: If the commit or blob does not exist
        """
        with self._lock:
            if isinstance(commit, str):
                commit = self.get_commit(commit)
            elif commit is None:
                commit = self.head
        
        if commit is None or path not in commit.snapshot:
            raise UnknownPathError(path)
        
        return self.store.get(commit.snapshot[path])
    
    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._states
    
    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(paths={len(self._states)}, commits={len(self._history)})"
