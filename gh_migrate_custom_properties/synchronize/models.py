"""Models describing decisions made by the property sync engine."""

from enum import Enum


class RemoteErrorKind(str, Enum):
    """How a failed create call is handled."""

    LIST_OF_STRINGS = "list_of_strings"
    OTHER = "other"


class FetchOutcome(str, Enum):
    """Result of fetching one repository's custom property values."""

    FETCHED = "fetched"
    EMPTY = "empty"
    FAILED = "failed"
