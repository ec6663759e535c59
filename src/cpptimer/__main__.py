"""Allow running cpptimer as ``python -m cpptimer``."""

from .cli import app

app()
