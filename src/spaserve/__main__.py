"""Allow ``python -m spaserve``."""

from spaserve.cli import main

main()
