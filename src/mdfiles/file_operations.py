"""Directory traversal and ignore-file handling."""

import logging
import os
import stat
from collections.abc import Iterator

import pathspec

from mdfiles.models import CandidateEntry, InvalidRootError

logger = logging.getLogger(__name__)

ALWAYS_IGNORE_PATTERNS = [".git/"]


def validate_root(root: str) -> None:
    """Ensure the search root exists and is a directory.

    Raises:
        InvalidRootError: If root is missing or not a directory
    """
    if not os.path.exists(root):
        raise InvalidRootError(f"Directory not found: {root}")
    if not os.path.isdir(root):
        raise InvalidRootError(f"Not a directory: {root}")


def load_ignore_spec(root: str) -> pathspec.PathSpec:
    """Combine ALWAYS_IGNORE_PATTERNS with the root's ignore files.

    Reads .gitignore and .git/info/exclude from root if present.

    Args:
        root: Search root directory

    Returns:
        PathSpec matching root-relative POSIX paths that should be skipped
    """
    all_patterns = list(ALWAYS_IGNORE_PATTERNS)

    for ignore_path in (
        os.path.join(root, ".gitignore"),
        os.path.join(root, ".git", "info", "exclude"),
    ):
        if not os.path.isfile(ignore_path):
            continue
        try:
            with open(ignore_path, encoding="utf-8", errors="ignore") as f:
                all_patterns.extend(f.readlines())
        except OSError as e:
            logger.warning("Could not read %s: %s", ignore_path, e)

    return pathspec.PathSpec.from_lines(pathspec.patterns.GitWildMatchPattern, all_patterns)


def _relative_posix(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace(os.sep, "/")


def _stat_entry(path: str) -> CandidateEntry | None:
    """Build a CandidateEntry, or None if the path cannot be stat'ed."""
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug("Skipping unreadable entry %s: %s", path, e)
        return None
    return CandidateEntry(path=path, is_file=stat.S_ISREG(st.st_mode), modified_at=st.st_mtime)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", error.filename, error)


def walk(
    root: str,
    follow_links: bool = False,
    ignore_spec: pathspec.PathSpec | None = None,
) -> Iterator[CandidateEntry]:
    """Lazily yield every file and directory below root.

    The root itself is never yielded. Paths are built with os.path.join onto
    root as given, so "." produces "./sub/file.go". Without follow_links,
    symlinked directories are yielded but not entered. With follow_links,
    each resolved directory is entered at most once.

    Args:
        root: Directory to start from
        follow_links: Whether to descend into symlinked directories
        ignore_spec: Optional PathSpec of root-relative paths to skip

    Yields:
        CandidateEntry for each readable descendant

    Raises:
        InvalidRootError: Before yielding anything, if root is not a directory
    """
    validate_root(root)
    return _walk(root, follow_links, ignore_spec)


def _walk(
    root: str,
    follow_links: bool,
    ignore_spec: pathspec.PathSpec | None,
) -> Iterator[CandidateEntry]:
    visited = {os.path.realpath(root)}

    for dirpath, dirs, files in os.walk(
        root, topdown=True, onerror=_log_walk_error, followlinks=follow_links
    ):
        # Real directories before symlinks, then by name, so the same alias
        # wins the visit-once check on every run
        dirs.sort(key=lambda d: (os.path.islink(os.path.join(dirpath, d)), d))

        # Prune before os.walk descends
        for d in list(dirs):
            dir_path = os.path.join(dirpath, d)
            if ignore_spec is not None and ignore_spec.match_file(
                _relative_posix(dir_path, root) + "/"
            ):
                dirs.remove(d)
                continue

            entry = _stat_entry(dir_path)
            if entry is None:
                dirs.remove(d)
                continue

            if follow_links:
                real = os.path.realpath(dir_path)
                if real in visited:
                    logger.debug("Not revisiting %s (resolves to %s)", dir_path, real)
                    dirs.remove(d)
                else:
                    visited.add(real)
            yield entry

        for filename in files:
            file_path = os.path.join(dirpath, filename)
            if ignore_spec is not None and ignore_spec.match_file(_relative_posix(file_path, root)):
                continue
            entry = _stat_entry(file_path)
            if entry is not None:
                yield entry
