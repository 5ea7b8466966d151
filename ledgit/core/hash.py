"""Hash utilities for Ledgit."""

import hashlib
import logging

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = 'sha1'
SUPPORTED_ALGORITHMS = ('sha1', 'sha256')


def hash_object(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Compute the content digest of data.
    
    Args:
        data: Bytes to hash
        algorithm: 'sha1' (40 hex chars) or 'sha256' (64 hex chars)
        
    Returns:
        Lowercase hex digest
    """
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    return hashlib.new(algorithm, data).hexdigest()


def hash_file(filepath: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Compute the content digest of a file.
    
    Args:
        filepath: Path to file
        algorithm: Hash algorithm name
        
    Returns:
        Lowercase hex digest
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read(), algorithm)


class ContentHasher:
    """
    Content hasher bound to a single algorithm.
    
    Holds no state besides the algorithm name, so the same input always
    yields the same digest regardless of call order.
    """
    
    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")
        self.algorithm = algorithm
    
    @property
    def digest_size(self) -> int:
        """Length of a digest in hex characters."""
        return hashlib.new(self.algorithm).digest_size * 2
    
    def hash(self, data: bytes) -> str:
        """Return the digest of data."""
        return hash_object(data, self.algorithm)
    
    def __repr__(self) -> str:
        return f"ContentHasher(algorithm={self.algorithm!r})"
