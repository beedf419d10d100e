"""Periodic statistics over filled trade orders."""

__version__ = "1.0.0"
