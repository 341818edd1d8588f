"""Linear and tree data structures and algorithms built on them."""

__version__ = "0.1.0"