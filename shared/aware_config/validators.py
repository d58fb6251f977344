"""
Invariant checks for config request fields.

Each invariant is expressed once here and used both by the builder's
per-field setters and by whole-request validation:
- check_master_preference: 0..255, excluding the reserved values 1 and 255
- check_cluster_bound: CLUSTER_ID_MIN..CLUSTER_ID_MAX
- check_cluster_ordering: low <= high
- check_all: all of the above, in that order
- check_support_alt_band: the flag must be a real bool (raises TypeError)

Checks return None on success and raise an InvalidConfigError subclass on
failure.
"""

from .errors import (
    ClusterIdOutOfRangeError,
    ClusterLowExceedsHighError,
    NegativeClusterIdError,
    NegativePreferenceError,
    ReservedOrOutOfRangePreferenceError,
)


CLUSTER_ID_MIN = 0
CLUSTER_ID_MAX = 0xFFFF

MASTER_PREFERENCE_MAX = 255
RESERVED_MASTER_PREFERENCES = frozenset({1, 255})


def _require_int(value: object, field_name: str) -> None:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field_name} must be an int, got {type(value).__name__}")


def check_support_alt_band(value: bool) -> None:
    """Check the alternate band flag.

    Raises:
        TypeError: If value is not a bool
    """
    if not isinstance(value, bool):
        raise TypeError(f"support_alt_band must be a bool, got {type(value).__name__}")


def check_master_preference(value: int) -> None:
    """Check a master preference value.

    Args:
        value: The requested master preference

    Raises:
        TypeError: If value is not an int
        NegativePreferenceError: If value is below zero
        ReservedOrOutOfRangePreferenceError: If value is 1, 255 or above 255
    """
    _require_int(value, "master_preference")

    if value < 0:
        raise NegativePreferenceError(
            f"Master preference must be non-negative, got {value}",
            field="master_preference",
            value=value,
        )
    if value in RESERVED_MASTER_PREFERENCES or value > MASTER_PREFERENCE_MAX:
        raise ReservedOrOutOfRangePreferenceError(
            f"Master preference must not exceed {MASTER_PREFERENCE_MAX} or use "
            f"1 or 255 (reserved values), got {value}",
            field="master_preference",
            value=value,
        )


def check_cluster_bound(value: int, field_name: str = "cluster_id") -> None:
    """Check one end of the cluster ID range.

    Args:
        value: The requested bound
        field_name: Field reported on the raised error

    Raises:
        TypeError: If value is not an int
        NegativeClusterIdError: If value is below CLUSTER_ID_MIN
        ClusterIdOutOfRangeError: If value is above CLUSTER_ID_MAX
    """
    _require_int(value, field_name)

    if value < CLUSTER_ID_MIN:
        raise NegativeClusterIdError(
            f"Cluster ID must be non-negative, got {value}",
            field=field_name,
            value=value,
        )
    if value > CLUSTER_ID_MAX:
        raise ClusterIdOutOfRangeError(
            f"Cluster ID must not exceed 0x{CLUSTER_ID_MAX:X}, got {value}",
            field=field_name,
            value=value,
        )


def check_cluster_ordering(low: int, high: int) -> None:
    """Check that the cluster ID range is not inverted.

    Equal bounds are allowed and pin the cluster ID to that value.

    Raises:
        ClusterLowExceedsHighError: If low > high
    """
    if low > high:
        raise ClusterLowExceedsHighError(
            f"Invalid argument combination - must have cluster_low <= cluster_high, "
            f"got {low} > {high}",
            value=(low, high),
        )


def check_all(master_preference: int, cluster_low: int, cluster_high: int) -> None:
    """Validate every invariant of a whole request.

    Checks run in a fixed order (preference, low bound, high bound, ordering)
    and the first failure is raised.
    """
    check_master_preference(master_preference)
    check_cluster_bound(cluster_low, "cluster_low")
    check_cluster_bound(cluster_high, "cluster_high")
    check_cluster_ordering(cluster_low, cluster_high)
