"""Containers, quicksort, glob patterns, shell quoting, path helpers and a message sink."""

__version__ = "0.3.0"

__all__ = ["module", "output", "path", "pattern", "ptrarray", "qsort", "queue", "shell", "slist"]