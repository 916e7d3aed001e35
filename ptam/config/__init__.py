"""
Configuration management for the admin settings screen.

This package provides the typed configuration model and its loader.
"""

from .models import AdminConfig
from .loader import build_config_from_raw, load_config_from_file

__all__ = [
    "AdminConfig",
    "build_config_from_raw",
    "load_config_from_file",
]
