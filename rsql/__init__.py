"""
RSQL Filter
Translates RSQL-like query strings into MongoDB filter documents.
"""

from .parser import RSQLParser, parse
from .filters import RSQLOperator, QueryTriple, split_query
from .exceptions import (
    RSQLError, UnsupportedBackendError, InvalidOperatorError,
    MalformedSegmentError, MalformedListValueError
)
from .config import Config, DEFAULT_BACKEND

__version__ = "1.0.0"

__all__ = [
    "RSQLParser",
    "parse",
    "RSQLOperator",
    "QueryTriple",
    "split_query",
    "RSQLError",
    "UnsupportedBackendError",
    "InvalidOperatorError",
    "MalformedSegmentError",
    "MalformedListValueError",
    "Config",
    "DEFAULT_BACKEND"
]
