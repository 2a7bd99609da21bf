"""Allow ``python -m readmegen``."""

from .cli import main

main()
