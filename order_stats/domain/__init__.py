"""
Domain Layer - Pure Statistics Logic

This module contains the order model and the statistics rules with no
I/O and no framework dependencies.

Structure:
- entities/: Filled order variants (Market, Limit, Stop)
- value_objects/: Summaries, selections and rounding
- services/: Statistics aggregator and ranking selector
"""
