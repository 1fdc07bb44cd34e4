"""
Core infrastructure shared across the Hive Intelligence plugin.

The package stays dependency-free apart from the standard library and only
hosts cross-cutting helpers such as structured logging.
"""

from .logging import ContextLoggerAdapter, StructuredLogFormatter, configure_logging, get_logger

__all__ = [
    "ContextLoggerAdapter",
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
]
