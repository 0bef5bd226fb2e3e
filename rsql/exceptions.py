"""
Exception classes for the RSQL filter translator.
"""


class RSQLError(Exception):
    """Base exception for all RSQL filter errors."""
    pass


class UnsupportedBackendError(RSQLError):
    """Raised when no translator is registered for a backend identifier."""
    def __init__(self, backend: str):
        super().__init__(f"unsupported database type: {backend}")
        self.backend = backend


class InvalidOperatorError(RSQLError):
    """Raised when a triple uses an operator outside the recognized set."""
    def __init__(self, operator: str):
        super().__init__(f"invalid operator: {operator}")
        self.operator = operator


class MalformedSegmentError(RSQLError):
    """Raised in strict mode when a segment is not field==value or field==op==value."""
    def __init__(self, segment: str):
        super().__init__(f"malformed query segment: {segment!r}")
        self.segment = segment


class MalformedListValueError(RSQLError):
    """Raised when an in/out value is not wrapped in parentheses."""
    def __init__(self, field: str, value: str):
        super().__init__(
            f"malformed list value for field {field!r}: {value!r} "
            f"(expected '(a,b,c)')"
        )
        self.field = field
        self.value = value
