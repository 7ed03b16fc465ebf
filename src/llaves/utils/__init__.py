"""Shared utilities for Llaves.

- logger: get_logger for logging
"""

from llaves.utils.logger import get_logger

__all__ = [
    "get_logger",
]
