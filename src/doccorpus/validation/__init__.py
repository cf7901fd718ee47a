"""
Package 'validation'
"""

from .validator import ReferenceValidator, validate, sort_issues, resolve_target
from .runner import run_validation

__all__ = [
    "ReferenceValidator",
    "validate",
    "sort_issues",
    "resolve_target",
    "run_validation",
]
