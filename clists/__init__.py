"""Singly (``clists.slist``) and doubly (``clists.dlist``) linked lists."""

__version__ = "0.1.0"
__all__ = ["slist", "dlist"]