"""
Helpers that run an RSQL query against a pymongo collection.
"""

from typing import Any, Dict, Mapping, Optional

from pymongo.collection import Collection
from pymongo.cursor import Cursor

from .filters import MongoFilterBackend
from .parser import RSQLParser


def to_mongo_filter(query: str, strict: Optional[bool] = None) -> Dict[str, Any]:
    """Parse query into a MongoDB filter document."""
    return RSQLParser(backend=MongoFilterBackend.name, strict=strict).parse(query)


def find(collection: Collection, query: str, strict: Optional[bool] = None,
         **kwargs: Any) -> Cursor:
    """collection.find() with the parsed query as filter."""
    return collection.find(to_mongo_filter(query, strict), **kwargs)


def find_one(collection: Collection, query: str, strict: Optional[bool] = None,
             **kwargs: Any) -> Optional[Mapping[str, Any]]:
    """collection.find_one() with the parsed query as filter."""
    return collection.find_one(to_mongo_filter(query, strict), **kwargs)


def count_documents(collection: Collection, query: str, strict: Optional[bool] = None,
                    **kwargs: Any) -> int:
    """collection.count_documents() with the parsed query as filter."""
    return collection.count_documents(to_mongo_filter(query, strict), **kwargs)
