"""Content-addressed object storage for Ledgit."""

import logging
import os
import tempfile
import zlib
from pathlib import Path
from typing import Dict, Iterator
from .errors import NotFoundError

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    In-memory content-addressed store.
    
    Content is keyed by its digest and written at most once. A put for a
    digest that is already present is a no-op, so identical content is
    stored a single time no matter how many paths or commits refer to it.
    """
    
    def __init__(self):
        """Initialize empty store."""
        self._objects: Dict[str, bytes] = {}
    
    def put(self, digest: str, data: bytes) -> None:
        """
        Store data under digest unless the digest is already present.
        
        Args:
            digest: Content digest
            data: Content bytes
        """
        # Object already exists
        if digest in self._objects:
            return

        self._objects[digest] = bytes(data)
        logger.debug("Stored object %s (%d bytes)", digest[:7], len(data))
    
    def get(self, digest: str) -> bytes:
        """
        Read content by digest.
        
        Args:
            digest: Content digest
            
        Returns:
            bytes: Stored content
            
        Raises:
            NotFoundError: If the digest was never stored
        """
        try:
            return self._objects[digest]
        except KeyError:
            raise NotFoundError(digest) from None
    
    def contains(self, digest: str) -> bool:
        """Check if digest exists in the store."""
        return digest in self._objects
    
    def __contains__(self, digest: str) -> bool:
        return self.contains(digest)
    
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._objects))
    
    def __len__(self) -> int:
        """Number of stored objects."""
        return len(self._objects)
    
    def __repr__(self) -> str:
        return f"ObjectStore(objects={len(self)})"


class FileObjectStore(ObjectStore):
    """
    Directory-backed content-addressed store.
    
    Objects are stored zlib-compressed in subdirectories named by the
    first 2 characters of the digest, with the remaining characters as
    the filename. Example: ab/cdef0123... for digest abcdef0123...
    """
    
    def __init__(self, root: str):
        """
        Initialize store.
        
        Args:
            root: Directory holding the objects (created if missing)
        """
        super().__init__()
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
    
    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.
        
        Args:
            digest: Hex digest
            
        Returns:
            Path: Full path to object file
        """
        return self.root / digest[:2] / digest[2:]
    
    def put(self, digest: str, data: bytes) -> None:
        if len(digest) < 3:
            raise ValueError(f"Invalid digest: {digest!r}")
        
        path = self.object_path(digest)
        
        # Object already exists
        if path.exists():
            return
        
        path.parent.mkdir(parents=True, exist_ok=True)
        
        # Write to a temp file in the same directory, then rename into place
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix='.tmp-')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(zlib.compress(data))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        
        logger.debug("Wrote object %s to %s", digest[:7], path)
    
    def get(self, digest: str) -> bytes:
        path = self.object_path(digest)
        
        if len(digest) < 3 or not path.is_file():
            raise NotFoundError(digest)
        
        return zlib.decompress(path.read_bytes())
    
    def contains(self, digest: str) -> bool:
        return len(digest) > 2 and self.object_path(digest).is_file()
    
    def __iter__(self) -> Iterator[str]:
        for subdir in sorted(self.root.iterdir()):
            if not subdir.is_dir() or len(subdir.name) != 2:
                continue
            for item in sorted(subdir.iterdir()):
                if not item.name.startswith('.tmp-'):
                    yield subdir.name + item.name
    
    def __len__(self) -> int:
        return sum(1 for _ in self)
    
    def __repr__(self) -> str:
        return f"FileObjectStore(root={self.root})"
