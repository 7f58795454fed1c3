"""Markdown link output and the search runner."""

import logging
import os
import sys
from typing import TextIO

from tqdm import tqdm

from mdfiles.date_matching import matches
from mdfiles.file_operations import load_ignore_spec, walk
from mdfiles.models import InvalidRootError, SearchConfig

logger = logging.getLogger(__name__)


def format_link(path: str) -> str:
    """Render a path as a markdown list item linking to it.

    Markdown special characters in the name are not escaped. Bytes that are
    not valid UTF-8 are rendered as U+FFFD so the line can always be written.

    Args:
        path: Path as produced by the traversal

    Returns:
        Line of the form "- [name](path)"

    Examples:
        >>> format_link("./src/main.go")
        '- [main.go](./src/main.go)'
    """
    line = f"- [{os.path.basename(path)}]({path})"
    return os.fsencode(line).decode("utf-8", "replace")


def find_matches(config: SearchConfig) -> list[str]:
    """Walk config.root and collect matching paths, sorted.

    Args:
        config: Search settings

    Returns:
        Matching paths sorted lexicographically

    Raises:
        InvalidRootError: If config.root is not a directory
    """
    ignore_spec = load_ignore_spec(config.root) if config.use_gitignore else None
    entries = walk(config.root, follow_links=config.follow_links, ignore_spec=ignore_spec)

    found: list[str] = []
    with tqdm(
        desc="Scanning", unit="entry", disable=not config.show_progress, file=sys.stderr
    ) as pbar:
        for entry in entries:
            if matches(entry, config):
                found.append(entry.path)
            pbar.update(1)

    logger.debug("Found %d matching files under %s", len(found), config.root)
    return sorted(found)


def write_listing(paths: list[str], out: TextIO) -> None:
    """Write one markdown link line per path."""
    for path in paths:
        out.write(format_link(path) + "\n")


def run(config: SearchConfig, out: TextIO | None = None) -> int:
    """Run a search and print the listing.

    Args:
        config: Search settings
        out: Stream for the listing, defaults to stdout

    Returns:
        Process exit status: 0 on success (including no matches), 1 if the
        root is invalid
    """
    if out is None:
        out = sys.stdout

    try:
        paths = find_matches(config)
    except InvalidRootError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_listing(paths, out)
    return 0
