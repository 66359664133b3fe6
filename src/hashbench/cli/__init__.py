"""
CLI Module

Output formatting utilities for the command-line interface.
"""

from .formatting import format_result_summary, display_error, display_success

__all__ = [
    "format_result_summary",
    "display_error",
    "display_success",
]
