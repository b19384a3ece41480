"""follownet — typed, composable domain error handling for a follow graph."""

__version__ = "0.1.0"
