"""
Error taxonomy for identifier validation and temporal parsing.

Every failure is raised as a ValueError subclass that carries the kind of
failure and the offending input, so callers can recover by re-supplying input.
"""

from enum import Enum, auto


class ErrorKind(Enum):
    """
    Kinds of validation failure.
    The first seven concern CURIEs, the last four concern TimeElements.
    """
    EMPTY_IDENTIFIER = auto()
    MISSING_SEPARATOR = auto()
    STRAY_WHITESPACE = auto()
    MULTIPLE_SEPARATORS = auto()
    EMPTY_PREFIX = auto()
    EMPTY_SUFFIX = auto()
    INVALID_SUFFIX_CHARACTERS = auto()

    INVALID_DURATION = auto()
    INVALID_GESTATIONAL_AGE = auto()
    INVALID_TIMESTAMP = auto()
    UNRECOGNIZED_TEMPORAL_EXPRESSION = auto()


class ValidationError(ValueError):
    """
    Base class for all validation failures.

    Attributes:
        kind: The ErrorKind that was detected.
        value: The original input that failed validation.
    """

    def __init__(self, kind: ErrorKind, value, message: str):
        super().__init__(message)
        self.kind = kind
        self.value = value


class CurieError(ValidationError):
    """Raised when an identifier is not a well-formed CURIE."""


class TimeElementError(ValidationError):
    """Raised when a string cannot be turned into a TimeElement."""


class BuilderError(ValueError):
    """Raised when a record is assembled in a way the schema does not allow."""
