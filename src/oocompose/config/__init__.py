"""
Configuration module for oocompose.

Policy records (MergePolicy, InheritOptions) are pydantic models; process-wide
defaults come from pydantic-settings.
"""

from oocompose.config.settings import Settings, get_settings, reload_settings
from oocompose.config.types import InheritOptions, MergePolicy, OptionsBase

__all__ = [
    "InheritOptions",
    "MergePolicy",
    "OptionsBase",
    "Settings",
    "get_settings",
    "reload_settings",
]
