#!/usr/bin/env python3
"""
RSQL parser entry point.
Selects the backend, splits the query string and converts the triples.
"""

import logging
from typing import Any, List, Optional

from .config import Config
from .exceptions import RSQLError
from .filters import QueryTriple, get_backend, split_query
from .log_manager import get_logger, get_logging_manager


class RSQLParser:
    """
    Translates RSQL-like query strings into native filters.

    Example:
        parser = RSQLParser(backend="mongo")
        parser.parse("name==John;age==gt==30")
        # {"name": {"$eq": "John"}, "age": {"$gt": "30"}}
    """

    def __init__(self,
                 backend: Optional[str] = None,
                 strict: Optional[bool] = None,
                 config: Optional[Config] = None):
        """
        Initialize the parser.

        Args:
            backend: Backend identifier (default from config, "mongo")
            strict: Raise on malformed segments instead of dropping them
            config: Configuration (default: Config.from_env())
        """
        self.config = config or Config.from_env()
        self.backend = backend if backend is not None else self.config.backend
        self.strict = strict if strict is not None else self.config.strict
        self.logger = get_logger('RSQLParser')

    def split(self, query: str) -> List[QueryTriple]:
        """Split a query string into triples without translating them."""
        return split_query(query, strict=self.strict)

    def parse(self, query: str) -> Any:
        """
        Parse a query string into the backend's native filter.

        Args:
            query: RSQL-like query, e.g. "name==John;age==gt==30"

        Returns:
            Native filter (a dict for MongoDB)

        Raises:
            UnsupportedBackendError: If the backend is unknown (nothing is parsed)
            InvalidOperatorError: If any triple has an unrecognized operator
            MalformedSegmentError: On a malformed segment in strict mode
            MalformedListValueError: If an in/out value is not "(a,b,c)"
        """
        try:
            backend = get_backend(self.backend)
            triples = self.split(query)
            self.logger.debug(f"Parsed {len(triples)} triples for backend {self.backend}")
            return backend.convert(triples)
        except RSQLError as e:
            get_logging_manager().log_with_context(
                self.logger, logging.ERROR, f"Failed to parse query: {e}",
                {"query": query, "backend": self.backend, "strict": self.strict}
            )
            raise


def parse(query: str, backend: Optional[str] = None, strict: Optional[bool] = None) -> Any:
    """
    Parse an RSQL-like query string into a native filter.

    Args:
        query: RSQL-like query string
        backend: Backend identifier (default: RSQL_BACKEND or "mongo")
        strict: Raise on malformed segments (default: RSQL_STRICT or False)

    Returns:
        Native filter for the backend

    Example:
        >>> parse("name==in==(John,Jane,Doe)", "mongo")
        {'name': {'$in': ['John', 'Jane', 'Doe']}}
    """
    return RSQLParser(backend=backend, strict=strict).parse(query)
