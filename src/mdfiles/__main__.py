"""Allow running mdfiles with ``python -m mdfiles``."""

from mdfiles.cli import main

main()
