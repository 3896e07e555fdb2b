"""
Utilities Module
Shared helpers for logging and configuration.
"""

from .logger import setup_logger, get_logger
from .config_loader import ConfigLoader, load_config

__all__ = [
    "setup_logger",
    "get_logger",
    "ConfigLoader",
    "load_config",
]
