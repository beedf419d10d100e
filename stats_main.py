"""
Order statistics worker entry point.

Publishes filled order statistics on a fixed period.

Usage:
    python stats_main.py [--period SECONDS] [--top N] [--duration SECONDS]

Stop:
    Ctrl + C (SIGINT) or SIGTERM
"""
import sys

from order_stats.presentation.cli.stats_runner import main

if __name__ == "__main__":
    sys.exit(main())
