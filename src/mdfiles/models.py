"""Data models for mdfiles."""

from dataclasses import dataclass
from datetime import date


class MdfilesError(Exception):
    """Base class for mdfiles errors."""


class ConfigError(MdfilesError, ValueError):
    """Raised when a command-line value cannot be turned into configuration."""


class InvalidRootError(MdfilesError):
    """Raised when the search root is missing or is not a directory."""


@dataclass(frozen=True)
class SearchConfig:
    """Settings for a single search run.

    Attributes:
        target_date: Calendar date a file's modification date must equal
        suffix: Case-sensitive tail every matching file name must end with
        root: Directory to start the traversal from, as given by the user
        follow_links: Whether to descend into symlinked directories
        use_gitignore: Whether to skip paths matched by the root's ignore files
        show_progress: Whether to draw a progress counter on stderr
    """

    target_date: date
    suffix: str = ".go"
    root: str = "."
    follow_links: bool = False
    use_gitignore: bool = False
    show_progress: bool = False


@dataclass(frozen=True)
class CandidateEntry:
    """One file or directory met during traversal.

    Attributes:
        path: Path joined onto the root exactly as the root was given
        is_file: True for regular files (symlinks are resolved)
        modified_at: POSIX modification timestamp, None if unavailable
    """

    path: str
    is_file: bool
    modified_at: float | None
