"""Recursive file enumeration under a root directory."""

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, List, Union

from .errors import PathUnreadableError

logger = logging.getLogger(__name__)


def _raise_unreadable(err: OSError) -> None:
    # os.walk swallows scandir failures unless onerror re-raises them
    raise PathUnreadableError(err.filename or "<unknown>", err.strerror or str(err)) from err


def _is_readable_file(path: str) -> bool:
    """Return True for a readable regular file, False for entries to skip.

    Dangling symlinks and special files are skipped. A stat failure other
    than a missing target, or a regular file without read permission,
    raises PathUnreadableError.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise PathUnreadableError(path, e.strerror or str(e)) from e

    if not stat.S_ISREG(st.st_mode):
        return False
    if not os.access(path, os.R_OK):
        raise PathUnreadableError(path, "Permission denied")
    return True


def iter_relative_files(root: Union[str, Path]) -> Iterator[str]:
    """Yield every regular file under ``root`` as a root-relative POSIX path.

    Paths are sorted lexicographically so that listing and hashing see the
    same order on every platform. Symlinked directories are not descended;
    symlinks to regular files are included.

    Raises:
        PathUnreadableError: If the root or any directory below it cannot
            be listed, or a file below it cannot be stat'ed or read.
    """
    root = Path(root)
    if not root.exists():
        raise PathUnreadableError(root, "No such file or directory")
    if not root.is_dir():
        raise PathUnreadableError(root, "Not a directory")

    found: List[str] = []
    for dirpath, _, filenames in os.walk(root, onerror=_raise_unreadable):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        for name in filenames:
            if not _is_readable_file(os.path.join(dirpath, name)):
                logger.debug("Skipping non-regular entry: %s/%s", dirpath, name)
                continue
            found.append(f"{rel_dir}/{name}" if rel_dir != "." else name)

    logger.debug("Found %d files under %s", len(found), root)
    yield from sorted(found)


def walk_relative_files(root: Union[str, Path]) -> List[str]:
    """Return the sorted relative paths of all regular files under ``root``."""
    return list(iter_relative_files(root))


__all__ = ["iter_relative_files", "walk_relative_files"]
