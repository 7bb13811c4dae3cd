"""Small implementations of the classic object-oriented design patterns, one module each."""

__version__ = "0.1.0"