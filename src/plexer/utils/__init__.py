"""Utility modules for plexer.

Provides:
- logger: get_logger for logging
"""

from plexer.utils.logger import get_logger

__all__ = ["get_logger"]
