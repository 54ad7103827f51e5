"""Allow ``python -m dotodo``."""

from dotodo.cli import main

main()
