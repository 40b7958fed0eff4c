"""Report the longest line of each given file."""

__version__ = "0.1.0"

__all__ = ["__version__"]
