"""Utility modules for ctxlex.

Provides:
- hashing: hash_str for content fingerprinting
- logger: get_logger for logging
"""

from ctxlex.utils.hashing import hash_str
from ctxlex.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
