"""Allow running as ``python -m chatfind``."""

from chatfind.cli import app

app()
