"""Classic data structures, sorting algorithms and list, array and tree problems."""

__version__ = "0.1.0"