"""Heuristic, language-aware code complexity scoring."""

__version__ = "0.1.0"
