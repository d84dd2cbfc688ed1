"""Consistency testers, sequential specifications, vector clocks and hashable collections."""

__version__ = "0.1.0"