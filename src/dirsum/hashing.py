"""Hashing utilities for deterministic directory digests.

A tree digest is a single running hash over the contents of every regular
file under a root, fed in sorted relative-path order. File names are not part
of the digest; only bytes are.
"""

import hashlib
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field

from .constants import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE
from .errors import PathUnreadableError, UnsupportedAlgorithmError
from .tree import walk_relative_files

logger = logging.getLogger(__name__)


class TreeDigest(BaseModel):
    """Result of hashing a directory tree."""

    algorithm: str
    hexdigest: str  # lowercase hex
    file_count: int = Field(ge=0)


def available_algorithms() -> List[str]:
    """Digest names guaranteed on every platform, sorted.

    Variable-length (shake) digests are excluded since they need an explicit
    output length.
    """
    return sorted(a for a in hashlib.algorithms_guaranteed if not a.startswith("shake_"))


def new_digest(algorithm: str):
    """Create a fresh hashlib context for ``algorithm`` (case-insensitive).

    Raises:
        UnsupportedAlgorithmError: If hashlib does not know the name, or the
            digest has no fixed output size.
    """
    try:
        h = hashlib.new(algorithm.lower())
    except (ValueError, TypeError) as e:
        raise UnsupportedAlgorithmError(algorithm) from e
    if h.digest_size == 0:
        raise UnsupportedAlgorithmError(algorithm)
    return h


def update_from_file(h, path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
    """Stream a file's bytes into an existing digest context.

    Raises:
        PathUnreadableError: If the file cannot be opened or read.
    """
    try:
        with path.open("rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                h.update(chunk)
    except OSError as e:
        raise PathUnreadableError(path, e.strerror or str(e)) from e


def compute_file_digest(path: Path, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Compute the hex digest of a single file's contents."""
    h = new_digest(algorithm)
    update_from_file(h, Path(path))
    return h.hexdigest()


def compute_tree_digest(
    root: Union[str, Path],
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> TreeDigest:
    """Compute one digest over all files under ``root``.

    Args:
        root: Directory to hash
        algorithm: Any fixed-size hashlib digest name (default md5)
        chunk_size: Bytes read per chunk

    Returns:
        TreeDigest with the lowercase hex digest and the number of files fed

    Raises:
        UnsupportedAlgorithmError: Checked before the tree is walked
        PathUnreadableError: If any directory or file cannot be read

    Example:
        >>> compute_tree_digest("project").hexdigest  # doctest: +SKIP
        'fc5e038d38a57032085441e7fe7010b0'
    """
    h = new_digest(algorithm)
    root = Path(root)

    rel_paths = walk_relative_files(root)
    for rel in rel_paths:
        logger.debug("Hashing %s", rel)
        update_from_file(h, root / rel, chunk_size)

    return TreeDigest(
        algorithm=algorithm.lower(),
        hexdigest=h.hexdigest(),
        file_count=len(rel_paths),
    )


__all__ = [
    "TreeDigest",
    "available_algorithms",
    "new_digest",
    "update_from_file",
    "compute_file_digest",
    "compute_tree_digest",
]
