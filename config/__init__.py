"""
Configuration module for the Code Analysis API.
"""

from .settings import Settings, settings, get_settings, reload_settings

__all__ = ["Settings", "settings", "get_settings", "reload_settings"]
