"""
Utilities Module

Logging helpers.

Author: config-complete Project
License: MIT
"""

from .logger import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
