"""Utility modules for Pluma.

- logger: get_logger for logging
"""

from pluma.utils.logger import get_logger

__all__ = [
    "get_logger",
]
