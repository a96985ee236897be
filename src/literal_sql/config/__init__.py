"""Configuration management for literal-sql.

Usage:
    >>> from literal_sql.config import get_settings
    >>> settings = get_settings()
    >>> settings.strict_param_objects
    True
"""

from literal_sql.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
