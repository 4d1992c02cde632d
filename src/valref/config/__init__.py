"""Configuration module using Pydantic Settings.

Usage:
    from valref.config import DemoSettings

    settings = DemoSettings(log_level="DEBUG")
"""

from valref.config.settings import DemoSettings

__all__ = [
    "DemoSettings",
]
