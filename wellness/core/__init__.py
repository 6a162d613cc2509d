"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy mapped to HTTP responses
- validators.py     : Contact detail validation
"""
from wellness.core.config import get_settings, Settings
from wellness.core.logging_config import setup_logging, get_logger

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
]
