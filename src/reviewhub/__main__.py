"""Allow ``python -m reviewhub``."""

from .cli import main

main()
