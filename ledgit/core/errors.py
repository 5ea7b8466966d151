"""Exceptions raised by the Ledgit core."""


class LedgitError(Exception):
    """Base class for all Ledgit errors."""


class DuplicatePathError(LedgitError):
    """Raised when creating a path that is already known."""
    
    def __init__(self, path: str):
        super().__init__(f"Path already exists: {path}")
        self.path = path


class UnknownPathError(LedgitError):
    """Raised when operating on a path that was never created or seeded."""
    
    def __init__(self, path: str):
        super().__init__(f"Unknown path: {path}")
        self.path = path


class NotFoundError(LedgitError):
    """Raised when a digest is not present in the object store."""
    
    def __init__(self, digest: str, kind: str = 'Object'):
        super().__init__(f"{kind} {digest} not found")
        self.digest = digest


class EmptyCommitError(LedgitError):
    """Raised when committing with an empty staging area."""
    
    def __init__(self):
        super().__init__("Nothing to commit (staging area is empty)")
