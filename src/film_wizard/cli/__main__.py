"""Allow running the CLI with ``python -m film_wizard.cli``."""

from .main import main

main()
