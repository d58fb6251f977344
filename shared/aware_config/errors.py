"""
Exception taxonomy for config requests.

Every failure is a local validation failure: raised synchronously to the
caller, never retryable, never partially applied. All of them derive from
InvalidConfigError, which is a ValueError.
"""

from typing import Any


class InvalidConfigError(ValueError):
    """A config request value or payload is not acceptable.

    Attributes:
        field: Name of the offending field, or None when the error is not
            tied to a single field
        value: The rejected value (or payload size for truncated input)
    """

    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class NegativePreferenceError(InvalidConfigError):
    """Master preference below zero."""


class ReservedOrOutOfRangePreferenceError(InvalidConfigError):
    """Master preference is a reserved value (1 or 255) or above 255."""


class NegativeClusterIdError(InvalidConfigError):
    """Cluster ID bound below CLUSTER_ID_MIN."""


class ClusterIdOutOfRangeError(InvalidConfigError):
    """Cluster ID bound above CLUSTER_ID_MAX."""


class ClusterLowExceedsHighError(InvalidConfigError):
    """Lower cluster ID bound is greater than the upper bound."""


class TruncatedInputError(InvalidConfigError):
    """Binary payload is shorter than one encoded record."""


class MalformedValueError(InvalidConfigError):
    """A loaded value could not be parsed into the field's type."""


class UnknownFieldError(InvalidConfigError):
    """A loaded mapping contains a key that is not a config request field."""
