"""Timestamp parsing, log normalisation, chat statistics and award cards for group chat exports."""

__version__ = "0.1.0"