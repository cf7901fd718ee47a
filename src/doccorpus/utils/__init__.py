"""
Package utils: re-export all utility functions for easy import.
"""

from .logger import get_logger

__all__ = ["get_logger"]
