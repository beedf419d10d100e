"""Configuration."""
from order_stats.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
