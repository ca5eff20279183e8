"""
Configuration package for Company Forms.

Contains:
- settings: Environment-based configuration
"""

from company_forms.config.settings import Settings, get_settings, load_settings_from_env

__all__ = [
    "Settings",
    "get_settings",
    "load_settings_from_env",
]
