"""Work-tree content provider for the CLI."""

from pathlib import Path

from ledgit.core.errors import NotFoundError


class WorkTreeProvider:
    """
    Supplies the bytes of a single file below a work-tree root.
    
    Used as the content provider for Repository.add_files. Paths are
    resolved relative to the root and must stay inside it.
    """
    
    def __init__(self, root: str = '.'):
        self.root = Path(root).resolve()
    
    def resolve(self, path: str) -> Path:
        """Absolute filesystem path for a repository path."""
        full_path = (self.root / path).resolve()
        if full_path != self.root and self.root not in full_path.parents:
            raise ValueError(f"Path outside work tree: {path}")
        return full_path
    
    def __call__(self, path: str) -> bytes:
        full_path = self.resolve(path)
        if not full_path.is_file():
            raise NotFoundError(path, 'File')
        return full_path.read_bytes()
    
    def __repr__(self) -> str:
        return f"WorkTreeProvider(root={self.root})"
