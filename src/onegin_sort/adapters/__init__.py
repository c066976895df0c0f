"""Host adapters for interactive front ends."""

__all__ = ["textual"]
