"""
Wi-Fi Aware cluster configuration request.

ConfigRequest describes the parameters requested when joining or forming a
Wi-Fi Aware discovery cluster:
- support_alt_band: whether the alternate (5 GHz) band is requested
- master_preference: willingness to act as cluster master
- cluster_low / cluster_high: inclusive range for the random cluster ID

The actual configuration achieved by the cluster may differ from the
request, since different clients may request different configurations.

Requests are immutable and always valid when produced by the builder or by
calling ConfigRequest(...) directly. Only the permissive decoder in
aware_config.codec can produce an unvalidated instance.
"""

from dataclasses import dataclass
from typing import Any

from aware_logging import get_logger

from .base import ValidationResult
from .errors import InvalidConfigError
from .validators import (
    CLUSTER_ID_MAX,
    CLUSTER_ID_MIN,
    check_all,
    check_cluster_bound,
    check_cluster_ordering,
    check_master_preference,
    check_support_alt_band,
)


logger = get_logger("aware-config", component="request")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


@dataclass(frozen=True)
class ConfigRequest:
    """Immutable cluster configuration request.

    Attributes:
        support_alt_band: Alternate band support is requested
        master_preference: Requested master preference, 0..255 excluding 1 and 255
        cluster_low: Lower bound of the cluster ID range
        cluster_high: Upper bound of the cluster ID range
    """

    support_alt_band: bool = False
    master_preference: int = 0
    cluster_low: int = CLUSTER_ID_MIN
    cluster_high: int = CLUSTER_ID_MAX

    def __post_init__(self) -> None:
        check_support_alt_band(self.support_alt_band)
        self.validate()

    @classmethod
    def _unchecked(
        cls,
        support_alt_band: bool,
        master_preference: int,
        cluster_low: int,
        cluster_high: int,
    ) -> "ConfigRequest":
        """Construct without running validation (decoder use only)."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "support_alt_band", support_alt_band)
        object.__setattr__(instance, "master_preference", master_preference)
        object.__setattr__(instance, "cluster_low", cluster_low)
        object.__setattr__(instance, "cluster_high", cluster_high)
        return instance

    @classmethod
    def builder(cls) -> "ConfigRequestBuilder":
        """Return a new builder populated with the defaults."""
        return ConfigRequestBuilder()

    @classmethod
    def default(cls) -> "ConfigRequest":
        """Return the request with every field at its default."""
        return cls()

    def validate(self) -> None:
        """Re-check every invariant.

        Construction already validates, so this only matters for requests
        obtained from the permissive decoder.

        Raises:
            InvalidConfigError: The first invariant that does not hold
        """
        check_all(self.master_preference, self.cluster_low, self.cluster_high)

    def check(self) -> ValidationResult:
        """Validate without raising.

        Returns:
            ValidationResult holding the first error, or a valid result with a
            warning when the cluster ID range is pinned to a single value
        """
        try:
            self.validate()
        except InvalidConfigError as e:
            return ValidationResult.invalid([str(e)])

        warnings = []
        if self.cluster_low == self.cluster_high:
            warnings.append(f"cluster ID pinned to {self.cluster_low}")
        return ValidationResult.valid(warnings)

    def is_non_default(self) -> bool:
        """Return True if any field differs from its default."""
        return (
            self.support_alt_band
            or self.master_preference != 0
            or self.cluster_low != CLUSTER_ID_MIN
            or self.cluster_high != CLUSTER_ID_MAX
        )

    def fingerprint(self) -> int:
        """Return a hash that is stable across interpreter runs.

        Folds the fields in declaration order as result = 31 * result + field,
        starting from 17, wrapped to a signed 32-bit integer.
        """
        result = 17
        for value in (
            1 if self.support_alt_band else 0,
            self.master_preference,
            self.cluster_low,
            self.cluster_high,
        ):
            result = _to_int32(31 * result + value)
        return result

    def __hash__(self) -> int:
        return self.fingerprint()

    def __str__(self) -> str:
        return (
            f"ConfigRequest [support_alt_band={self.support_alt_band}, "
            f"master_preference={self.master_preference}, "
            f"cluster_low={self.cluster_low}, cluster_high={self.cluster_high}]"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a dictionary, in declaration order."""
        return {
            "support_alt_band": self.support_alt_band,
            "master_preference": self.master_preference,
            "cluster_low": self.cluster_low,
            "cluster_high": self.cluster_high,
        }


class ConfigRequestBuilder:
    """Builder used to create ConfigRequest objects.

    Each setter validates its own field immediately and returns the builder,
    so calls can be chained:

        request = (
            ConfigRequest.builder()
            .set_master_preference(10)
            .set_cluster_low(5)
            .set_cluster_high(20)
            .build()
        )

    The ordering between cluster_low and cluster_high is checked by build(),
    since either bound may be set first. A failed setter leaves the
    previously stored value in place.

    A builder is meant to be used by one caller at a time.
    """

    def __init__(self) -> None:
        self._support_alt_band = False
        self._master_preference = 0
        self._cluster_low = CLUSTER_ID_MIN
        self._cluster_high = CLUSTER_ID_MAX

    def set_support_alt_band(self, support_alt_band: bool) -> "ConfigRequestBuilder":
        """Specify whether alternate band support is requested. Disabled by default.

        Only True or False are accepted; strings such as "false" raise TypeError.
        """
        check_support_alt_band(support_alt_band)
        self._support_alt_band = support_alt_band
        return self

    def set_master_preference(self, master_preference: int) -> "ConfigRequestBuilder":
        """Specify the requested master preference.

        The permitted range is 0 (the default) to 255, with 1 and 255 reserved.
        """
        check_master_preference(master_preference)
        self._master_preference = master_preference
        return self

    def set_cluster_low(self, cluster_low: int) -> "ConfigRequestBuilder":
        """Specify the lower bound of the generated cluster ID.

        Defaults to CLUSTER_ID_MIN. Setting low equal to high restricts the
        cluster ID to that single value.
        """
        check_cluster_bound(cluster_low, "cluster_low")
        self._cluster_low = cluster_low
        return self

    def set_cluster_high(self, cluster_high: int) -> "ConfigRequestBuilder":
        """Specify the upper bound of the generated cluster ID.

        Defaults to CLUSTER_ID_MAX.
        """
        check_cluster_bound(cluster_high, "cluster_high")
        self._cluster_high = cluster_high
        return self

    def build(self) -> ConfigRequest:
        """Build a ConfigRequest from the values set so far.

        Raises:
            ClusterLowExceedsHighError: If cluster_low > cluster_high
        """
        check_cluster_ordering(self._cluster_low, self._cluster_high)

        request = ConfigRequest(
            support_alt_band=self._support_alt_band,
            master_preference=self._master_preference,
            cluster_low=self._cluster_low,
            cluster_high=self._cluster_high,
        )
        logger.debug("Built config request", **request.to_dict())
        return request
