"""
Configuration loading from YAML and environment variables.
"""

from vacation_tracker.config.manager import ConfigManager

__all__ = ["ConfigManager"]
