"""
Utility helpers for Ministry Companion.

This module contains:
- Logging setup (loguru)
"""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]
