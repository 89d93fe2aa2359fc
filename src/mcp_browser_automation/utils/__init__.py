"""Utility functions for browser automation."""

from .diagnostics import collect_diagnostics
from .retry import retry_op
from .validation import validate_arguments

__all__ = [
    "collect_diagnostics",
    "retry_op",
    "validate_arguments",
]
