"""Classic algorithms on linked lists, strings and integer sequences."""

__version__ = "0.1.0"
__all__ = ["linked_list", "strings", "numbers"]