"""hostfetch - one-shot terminal system summary."""

__version__ = "0.1.0"
