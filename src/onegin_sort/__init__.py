"""Sort the lines of a UTF-16 text forward, by their endings, and as written."""

__all__ = [
    "adapters",
    "cli",
    "runtime",
    "text",
]

__version__ = "0.1.0"
