"""Utility modules for lcctl.

This module exports commonly used utility functions.
"""

from lcctl.utils.formatting import (
    console,
    create_table,
    err_console,
    format_toggle,
    print_error,
    print_info,
    print_success,
    print_warning,
    set_quiet,
)

__all__ = [
    "console",
    "create_table",
    "err_console",
    "format_toggle",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "set_quiet",
]
