"""
Utilities module for Folio.
"""

from folio.utils.logging import configure_structlog, get_logger, setup_logging

__all__ = [
    "configure_structlog",
    "get_logger",
    "setup_logging",
]
