"""
Ship, Captain & Crew Configuration.

Environment variables, settings, and logging configuration.
"""

from ship_captain_crew.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
