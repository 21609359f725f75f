"""Worked answers to small programming drills, as plain Python."""

__version__ = "0.1.0"