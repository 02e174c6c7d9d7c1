"""Interactive shell front end: command-line cleanup, typed tokenization and small text helpers."""

__version__ = "0.1.0"