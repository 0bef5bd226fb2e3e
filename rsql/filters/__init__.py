"""
RSQL filter translation for multiple backends.

This module splits RSQL-like query strings into (field, operator, value)
triples and converts them to a native filter for a registered backend.

Example usage:
    from rsql.filters import split_query, get_backend

    triples = split_query("name==John;age==gt==30")
    backend = get_backend("mongo")
    backend.convert(triples)
    # {"name": {"$eq": "John"}, "age": {"$gt": "30"}}
"""

from .base import (
    RSQLOperator,
    QueryTriple,
    FilterBackend,
    split_query,
    register_backend,
    get_backend,
    available_backends,
    TRIPLE_DELIMITER,
    PART_DELIMITER
)

from .mongo_backend import MongoFilterBackend

__all__ = [
    # Core
    'RSQLOperator',
    'QueryTriple',
    'FilterBackend',
    'split_query',
    'TRIPLE_DELIMITER',
    'PART_DELIMITER',

    # Registry
    'register_backend',
    'get_backend',
    'available_backends',

    # Backends
    'MongoFilterBackend'
]
