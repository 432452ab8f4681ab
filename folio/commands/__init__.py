"""
Command handlers for Folio.

This module provides command handlers for the Folio CLI.
"""

from folio.commands.catalog import (
    check_command,
    list_command,
    load_catalog,
    show_command,
    tags_command,
)

__all__ = [
    "check_command",
    "list_command",
    "load_catalog",
    "show_command",
    "tags_command",
]
