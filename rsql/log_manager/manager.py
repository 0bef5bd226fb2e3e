#!/usr/bin/env python3
"""
Centralized Logging Manager for the RSQL filter translator

Loggers live under the ``rsql`` namespace and stay silent unless the host
application configures logging or RSQL_LOG_DIR points at a log directory.
"""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Dict, Any

from ..config import Config


ROOT_LOGGER_NAME = 'rsql'


class LoggingManager:
    """
    Manages loggers for all RSQL components.

    Features:
    - Silent by default (NullHandler on the package logger)
    - Optional rotating log files when RSQL_LOG_DIR is set
    - Component-specific log files
    - Debug mode support via RSQL_DEBUG
    """

    _instance = None
    _initialized = False

    def __new__(cls, config: Optional[Config] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config: Optional[Config] = None):
        """Initialize the logging manager (singleton)"""
        if not self._initialized:
            config = config or Config.from_env()
            self.log_dir = Path(config.log_dir) if config.log_dir else None
            self.debug_mode = config.debug
            self.loggers: Dict[str, logging.Logger] = {}
            self._initialized = True

            if self.log_dir:
                self._ensure_log_directories()

            self._configure_package_logger()

    def _ensure_log_directories(self):
        """Create necessary log directories"""
        for directory in [self.log_dir, self.log_dir / 'backends']:
            directory.mkdir(parents=True, exist_ok=True)

    def _configure_package_logger(self):
        """Keep library output quiet unless the application opts in"""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        # The host application owns the level unless RSQL_DEBUG asks for DEBUG
        if self.debug_mode:
            package_logger.setLevel(logging.DEBUG)
        if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
            package_logger.addHandler(logging.NullHandler())

    def get_logger(self, name: str, component: Optional[str] = None) -> logging.Logger:
        """
        Get or create a logger for a specific component.

        Args:
            name: Logger name (e.g., 'RSQLParser')
            component: Component category ('backend', None for main)

        Returns:
            Configured logger instance
        """
        logger_key = f"{component}.{name}" if component else name

        if logger_key in self.loggers:
            return self.loggers[logger_key]

        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{logger_key}")

        if self.log_dir:
            self._add_file_handlers(logger, name, component)

        self.loggers[logger_key] = logger
        return logger

    def _add_file_handlers(self, logger: logging.Logger, name: str,
                           component: Optional[str]):
        if component == 'backend':
            log_file = self.log_dir / 'backends' / f"{name.lower()}.log"
        else:
            log_file = self.log_dir / f"{name.lower()}.log"

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )

        if self.debug_mode:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        # Error-only handler
        error_handler = logging.handlers.RotatingFileHandler(
            self.log_dir / 'error.log',
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        error_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d]\n%(message)s\n',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        error_handler.setLevel(logging.ERROR)
        logger.addHandler(error_handler)

    def log_with_context(self, logger: logging.Logger, level: int, message: str,
                         context: Optional[Dict[str, Any]] = None):
        """
        Log a message with additional context.

        Args:
            logger: Logger instance
            level: Log level
            message: Log message
            context: Additional context dict
        """
        if context:
            context_str = json.dumps(context, default=str)
            message = f"{message} | Context: {context_str}"
        logger.log(level, message)

    @classmethod
    def reset(cls):
        """Drop the singleton so the next call re-reads configuration."""
        if cls._instance is not None:
            if cls._instance.debug_mode:
                logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)
            for logger in cls._instance.loggers.values():
                for handler in logger.handlers[:]:
                    handler.close()
                    logger.removeHandler(handler)
        cls._instance = None
        cls._initialized = False


_logging_manager = None


def get_logging_manager(config: Optional[Config] = None) -> LoggingManager:
    """Get the singleton LoggingManager instance"""
    global _logging_manager
    if _logging_manager is None or LoggingManager._instance is None:
        _logging_manager = LoggingManager(config)
    return _logging_manager


def get_logger(name: str, component: Optional[str] = None) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name: Logger name
        component: Component type ('backend' or None)

    Returns:
        Configured logger
    """
    return get_logging_manager().get_logger(name, component)


def configure_logging(config: Optional[Config] = None) -> LoggingManager:
    """Re-initialize the logging system from config (or the environment)"""
    global _logging_manager
    LoggingManager.reset()
    _logging_manager = LoggingManager(config)
    return _logging_manager
