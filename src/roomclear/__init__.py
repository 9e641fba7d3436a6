"""Autonomous room-clearing solver for protector-chained monster puzzles."""

__version__ = "0.1.0"
