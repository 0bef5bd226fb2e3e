#!/usr/bin/env python3
"""
Base RSQL filter model.
Splits RSQL-like query strings into (field, operator, value) triples and
provides the abstraction that each native backend (MongoDB, ...) implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from ..exceptions import (
    InvalidOperatorError, MalformedSegmentError, UnsupportedBackendError
)
from ..log_manager import get_logger


# Separates triples
TRIPLE_DELIMITER = ";"
# Separates field, operator and value inside a triple
PART_DELIMITER = "=="


class RSQLOperator(Enum):
    """RSQL-like query operators."""
    # Equality ("==" is the implicit form of field==value)
    EQUALS = "=="
    EQ = "eq"
    NE = "ne"

    # Comparison
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

    # Membership, value is "(a,b,c)"
    IN = "in"
    OUT = "out"

    # Pattern
    LIKE = "like"
    ILIKE = "ilike"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid operator."""
        return value in {op.value for op in cls}

    @classmethod
    def from_string(cls, value: str) -> Optional['RSQLOperator']:
        """Convert string to operator."""
        for op in cls:
            if op.value == value:
                return op
        return None


@dataclass(frozen=True)
class QueryTriple:
    """
    One filter condition extracted from a query string.
    The value is kept as the raw string; typing is left to the native store.
    """
    field: str
    operator: str
    value: str


def split_query(query: str, strict: bool = False) -> List[QueryTriple]:
    """
    Split an RSQL-like query string into ordered triples.

    Segments are separated by ";" and take the form "field==value" (implicit
    equality) or "field==op==value". Empty segments are skipped. Any other
    shape is dropped with a warning, or raised when strict is set.

    Args:
        query: Raw query string
        strict: Raise MalformedSegmentError instead of dropping bad segments

    Returns:
        Triples in input order

    Raises:
        MalformedSegmentError: On a bad segment in strict mode
    """
    triples = []

    for segment in query.split(TRIPLE_DELIMITER):
        if not segment:
            continue

        parts = segment.split(PART_DELIMITER)
        if len(parts) == 2 and parts[0]:
            triples.append(QueryTriple(parts[0], RSQLOperator.EQUALS.value, parts[1]))
        elif len(parts) == 3 and parts[0]:
            triples.append(QueryTriple(parts[0], parts[1], parts[2]))
        elif strict:
            raise MalformedSegmentError(segment)
        else:
            get_logger('Splitter').warning(f"Dropping malformed query segment: {segment!r}")

    return triples


class FilterBackend(ABC):
    """
    Abstract base class for filter backends.
    Each data store implements this to convert triples into its native
    query format.
    """

    # Identifier used to select the backend in parse()
    name: str = ""

    SUPPORTED_OPERATORS: FrozenSet[RSQLOperator] = frozenset(RSQLOperator)

    @abstractmethod
    def convert(self, triples: List[QueryTriple]) -> Any:
        """
        Convert triples to the backend's native format.

        Args:
            triples: Triples in query order

        Returns:
            Backend-specific query object
        """
        pass

    def supports_operator(self, operator: RSQLOperator) -> bool:
        """Check if this backend supports a specific operator."""
        return operator in self.SUPPORTED_OPERATORS

    def resolve_operator(self, operator: str) -> RSQLOperator:
        """
        Resolve an operator string for this backend.

        Raises:
            InvalidOperatorError: If the operator is unknown or unsupported here
        """
        op = RSQLOperator.from_string(operator)
        if op is None or not self.supports_operator(op):
            raise InvalidOperatorError(operator)
        return op


_BACKENDS: Dict[str, FilterBackend] = {}


def register_backend(backend: FilterBackend) -> FilterBackend:
    """Register a backend under its name, replacing any previous one."""
    if not backend.name:
        raise ValueError(f"{backend.__class__.__name__} has no name")
    _BACKENDS[backend.name] = backend
    return backend


def get_backend(name: str) -> FilterBackend:
    """
    Look up a registered backend.

    Raises:
        UnsupportedBackendError: If nothing is registered under name
    """
    try:
        return _BACKENDS[name]
    except KeyError:
        raise UnsupportedBackendError(name) from None


def available_backends() -> List[str]:
    """Names of all registered backends."""
    return sorted(_BACKENDS)
