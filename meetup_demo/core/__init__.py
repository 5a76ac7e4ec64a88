"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy mapped to HTTP statuses
- audit.py          : Request audit logging middleware
- static.py         : Public directory middleware
- validators.py     : Request payload checks
"""
from meetup_demo.core.config import get_settings, Settings
from meetup_demo.core.logging_config import setup_logging, get_logger, LoggerMixin

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
