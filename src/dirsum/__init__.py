"""dirsum: list files under a directory and digest their contents."""

from .constants import DIRSUM_VERSION as __version__
from .errors import DirsumError, PathUnreadableError, UnsupportedAlgorithmError
from .hashing import TreeDigest, compute_file_digest, compute_tree_digest
from .tree import iter_relative_files, walk_relative_files

__all__ = [
    "__version__",
    "DirsumError",
    "PathUnreadableError",
    "UnsupportedAlgorithmError",
    "TreeDigest",
    "compute_file_digest",
    "compute_tree_digest",
    "iter_relative_files",
    "walk_relative_files",
]
