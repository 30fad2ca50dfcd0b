"""
Logging module for the distribution library.

This module provides JSON-formatted logging functionality for the library.
"""

from dist_lib.logging.logger import setup_logger, get_logger, log_construction, log_empiric

__all__ = ["setup_logger", "get_logger", "log_construction", "log_empiric"]
