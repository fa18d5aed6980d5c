"""Check pipeline files and resolve command paths from PATH, with string,
search, line-reading and formatting helpers."""

__version__ = "0.1.0"