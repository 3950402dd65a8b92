"""Command-line launcher for 1C:Enterprise file databases with a persistent history."""

__version__ = "1.0.0"