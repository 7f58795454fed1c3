"""mdfiles: list files modified on a given date as markdown links.

This package walks a directory tree, keeps regular files whose name ends
with a suffix and whose modification date equals a target date, and prints
them as a sorted markdown list.
"""

__version__ = "0.1.0"

from mdfiles.cli import main  # noqa: E402
from mdfiles.models import CandidateEntry, SearchConfig  # noqa: E402

__all__ = ["main", "CandidateEntry", "SearchConfig"]
