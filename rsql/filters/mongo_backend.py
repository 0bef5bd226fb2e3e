#!/usr/bin/env python3
"""
MongoDB backend for RSQL filters.
Converts query triples to a MongoDB filter document.
"""

from typing import Dict, List, Union

from .base import FilterBackend, QueryTriple, RSQLOperator, register_backend
from ..exceptions import MalformedListValueError
from ..log_manager import get_logger


ClauseValue = Union[str, List[str]]

# Inline flag understood by MongoDB's PCRE regex engine
CASE_INSENSITIVE_FLAG = "(?i)"


class MongoFilterBackend(FilterBackend):
    """
    Converts query triples to a MongoDB filter document.

    Each field maps to a single-operator clause such as {"$gt": "30"}.
    Values are passed through as strings; a field that appears twice keeps
    the clause of its last triple.
    """

    name = "mongo"

    # Native operator for each RSQL operator
    OPERATOR_MAP = {
        RSQLOperator.EQUALS: "$eq",
        RSQLOperator.EQ: "$eq",
        RSQLOperator.NE: "$ne",
        RSQLOperator.GT: "$gt",
        RSQLOperator.GE: "$gte",
        RSQLOperator.LT: "$lt",
        RSQLOperator.LE: "$lte",
        RSQLOperator.IN: "$in",
        RSQLOperator.OUT: "$nin",
        RSQLOperator.LIKE: "$regex",
        RSQLOperator.ILIKE: "$regex",
    }

    SUPPORTED_OPERATORS = frozenset(OPERATOR_MAP)

    @property
    def logger(self):
        return get_logger('MongoFilterBackend', component='backend')

    def convert(self, triples: List[QueryTriple]) -> Dict[str, Dict[str, ClauseValue]]:
        """
        Convert triples to a MongoDB filter.

        Args:
            triples: Triples in query order

        Returns:
            Filter document, e.g. {"age": {"$gt": "30"}}

        Raises:
            InvalidOperatorError: On the first unrecognized operator
            MalformedListValueError: If an in/out value is not "(a,b,c)"
        """
        query: Dict[str, Dict[str, ClauseValue]] = {}

        for triple in triples:
            op = self.resolve_operator(triple.operator)
            if triple.field in query:
                self.logger.debug(f"Overwriting clause for field {triple.field!r}")
            query[triple.field] = self._convert_triple(triple, op)

        return query

    def _convert_triple(self, triple: QueryTriple, op: RSQLOperator) -> Dict[str, ClauseValue]:
        """Convert a single triple to a MongoDB clause."""
        native = self.OPERATOR_MAP[op]

        if op in {RSQLOperator.IN, RSQLOperator.OUT}:
            return {native: self._parse_list(triple.field, triple.value)}

        elif op == RSQLOperator.ILIKE:
            return {native: CASE_INSENSITIVE_FLAG + triple.value}

        else:
            return {native: triple.value}

    def _parse_list(self, field: str, value: str) -> List[str]:
        """
        Parse "(a,b,c)" into ["a", "b", "c"].
        "()" gives [""], the same as any empty item; items are not trimmed.
        """
        if len(value) < 2 or value[0] != "(" or value[-1] != ")":
            raise MalformedListValueError(field, value)

        return value[1:-1].split(",")


register_backend(MongoFilterBackend())
