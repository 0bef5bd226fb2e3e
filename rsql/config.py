"""
Configuration helpers for the RSQL filter translator.
Supports environment variables for easy deployment configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_BACKEND = "mongo"

_TRUTHY = ('1', 'true', 'yes')


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').lower() in _TRUTHY


@dataclass
class Config:
    """
    Configuration for RSQLParser.

    Environment variables:
        RSQL_BACKEND: Default backend identifier (default: mongo)
        RSQL_STRICT: Raise on malformed segments instead of dropping them
        RSQL_DEBUG: Log at DEBUG level
        RSQL_LOG_DIR: Directory for rotating log files (unset: no files)
    """
    backend: str = DEFAULT_BACKEND
    strict: bool = False
    debug: bool = False
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'Config':
        """
        Create configuration from environment variables.

        Example:
            from rsql import RSQLParser
            from rsql.config import Config

            parser = RSQLParser(config=Config.from_env())
        """
        log_dir = os.getenv("RSQL_LOG_DIR")
        return cls(
            backend=os.getenv("RSQL_BACKEND", DEFAULT_BACKEND),
            strict=_env_flag("RSQL_STRICT"),
            debug=_env_flag("RSQL_DEBUG"),
            log_dir=os.path.expanduser(log_dir) if log_dir else None
        )

    @classmethod
    def defaults(cls) -> 'Config':
        """Configuration that ignores the environment."""
        return cls()
