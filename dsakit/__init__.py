"""Linked-list, stack and queue, array and string algorithms."""

__version__ = "0.1.0"