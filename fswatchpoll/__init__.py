"""Stat-based file change monitor with sessions, event flags and path filters."""

__version__ = "1.18.0"