#!/usr/bin/env python3
"""
End-to-end tests for rsql.parse and RSQLParser.
"""

from unittest.mock import patch

import pytest

from rsql import (
    Config, InvalidOperatorError, MalformedListValueError, MalformedSegmentError,
    RSQLParser, UnsupportedBackendError, parse
)
from rsql.filters import QueryTriple


class TestParse:
    """Scenarios for the module-level parse()."""

    def test_equals_single(self):
        assert parse("name==John", "mongo") == {"name": {"$eq": "John"}}

    def test_greater_than(self):
        assert parse("age==gt==30", "mongo") == {"age": {"$gt": "30"}}

    def test_greater_than_or_equal(self):
        assert parse("age==ge==30", "mongo") == {"age": {"$gte": "30"}}

    def test_less_than(self):
        assert parse("price==lt==30.5", "mongo") == {"price": {"$lt": "30.5"}}

    def test_less_than_or_equal(self):
        assert parse("age==le==30", "mongo") == {"age": {"$lte": "30"}}

    def test_not_equal(self):
        assert parse("name==ne==John", "mongo") == {"name": {"$ne": "John"}}

    def test_in(self):
        assert parse("name==in==(John,Jane,Doe)", "mongo") == {
            "name": {"$in": ["John", "Jane", "Doe"]}
        }

    def test_out(self):
        assert parse("name==out==(John,Jane,Doe)", "mongo") == {
            "name": {"$nin": ["John", "Jane", "Doe"]}
        }

    def test_in_empty_parentheses(self):
        """'()' is stripped and split like any other list value."""
        assert parse("name==in==()", "mongo") == {"name": {"$in": [""]}}

    def test_like(self):
        assert parse("name==like==John", "mongo") == {"name": {"$regex": "John"}}

    def test_ilike(self):
        assert parse("name==ilike==John", "mongo") == {"name": {"$regex": "(?i)John"}}

    def test_multiple(self):
        """Each segment contributes one entry, in input order."""
        result = parse("name==eq==John;age==gt==30;city==like==New York", "mongo")

        assert result == {
            "name": {"$eq": "John"},
            "age": {"$gt": "30"},
            "city": {"$regex": "New York"},
        }
        assert list(result) == ["name", "age", "city"]

    def test_repeated_field_last_wins(self):
        assert parse("age==gt==18;age==lt==65", "mongo") == {"age": {"$lt": "65"}}

    def test_empty_query(self):
        assert parse("", "mongo") == {}

    def test_default_backend_is_mongo(self):
        assert parse("name==John") == {"name": {"$eq": "John"}}

    @pytest.mark.parametrize("query", ["name==invalid==John", "age==eqs==30"])
    def test_invalid_operator(self, query):
        with pytest.raises(InvalidOperatorError):
            parse(query, "mongo")

    def test_invalid_operator_after_valid_segments(self):
        """No partial mapping is returned."""
        with pytest.raises(InvalidOperatorError) as exc_info:
            parse("name==John;age==gt==30;city==near==Berlin", "mongo")

        assert exc_info.value.operator == "near"

    def test_unsupported_backend(self):
        with pytest.raises(UnsupportedBackendError) as exc_info:
            parse("name==John", "MySQL")

        assert exc_info.value.backend == "MySQL"

    def test_unsupported_backend_checked_before_parsing(self):
        """The query is never split when the backend is unknown."""
        with patch("rsql.parser.split_query") as split:
            with pytest.raises(UnsupportedBackendError):
                parse("name==invalid==John", "MySQL")

        split.assert_not_called()

    def test_malformed_segment_dropped(self):
        assert parse("junk;name==John", "mongo") == {"name": {"$eq": "John"}}

    def test_malformed_segment_strict(self):
        with pytest.raises(MalformedSegmentError):
            parse("junk;name==John", "mongo", strict=True)

    def test_malformed_list_value(self):
        with pytest.raises(MalformedListValueError):
            parse("name==in==John", "mongo")


class TestRSQLParser:
    """Test parser configuration."""

    def test_defaults_from_config(self):
        parser = RSQLParser(config=Config(strict=True))

        assert parser.backend == "mongo"
        assert parser.strict is True

    def test_arguments_override_config(self):
        parser = RSQLParser(backend="other", strict=False, config=Config(strict=True))

        assert parser.backend == "other"
        assert parser.strict is False

    def test_strict_from_environment(self, monkeypatch):
        monkeypatch.setenv("RSQL_STRICT", "true")

        with pytest.raises(MalformedSegmentError):
            parse("junk", "mongo")

    def test_backend_from_environment(self, monkeypatch):
        monkeypatch.setenv("RSQL_BACKEND", "MySQL")

        with pytest.raises(UnsupportedBackendError):
            parse("name==John")

    def test_split(self):
        parser = RSQLParser()
        assert parser.split("name==John;age==gt==30") == [
            QueryTriple("name", "==", "John"),
            QueryTriple("age", "gt", "30"),
        ]

    def test_parser_is_reusable(self):
        parser = RSQLParser(backend="mongo")

        assert parser.parse("a==1") == {"a": {"$eq": "1"}}
        assert parser.parse("b==ne==2") == {"b": {"$ne": "2"}}

    def test_failure_is_logged(self, log_dir):
        parser = RSQLParser(backend="mongo")

        with pytest.raises(InvalidOperatorError):
            parser.parse("name==bogus==John")

        error_log = (log_dir / "error.log").read_text()
        assert "Failed to parse query: invalid operator: bogus" in error_log
        assert '"query": "name==bogus==John"' in error_log
        assert '"backend": "mongo"' in error_log
