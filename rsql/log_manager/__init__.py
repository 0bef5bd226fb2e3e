"""
Logging package for the RSQL filter translator.

Loggers are silent by default; set RSQL_LOG_DIR to write rotating log files.
"""

from .manager import LoggingManager, get_logger, configure_logging, get_logging_manager

__all__ = ['LoggingManager', 'get_logger', 'configure_logging', 'get_logging_manager']
