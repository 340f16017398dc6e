"""Snapshot, restore and manage named save folders across profiles."""

__version__ = "1.0.0"
