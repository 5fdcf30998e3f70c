"""ASCII character, string, byte-buffer, integer and linked-list helpers with a printf-style formatter."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "numbers", "strings", "linkedlist", "output", "printf"]