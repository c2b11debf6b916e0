"""Classic data structures and algorithms with small command-line programs."""

__version__ = "0.1.0"