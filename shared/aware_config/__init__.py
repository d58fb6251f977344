"""
Wi-Fi Aware cluster configuration requests.

This package provides:
- ConfigRequest: Immutable, validated cluster configuration request
- ConfigRequestBuilder: Fluent builder with per-field validation
- encode / decode: Fixed-width 16-byte binary records
- Validators and the InvalidConfigError exception family
- Loaders for mappings, environment variables, .env and YAML files

Usage:
    from aware_config import ConfigRequest, decode, encode

    request = (
        ConfigRequest.builder()
        .set_support_alt_band(True)
        .set_master_preference(254)
        .set_cluster_low(10)
        .set_cluster_high(10)
        .build()
    )
    assert decode(encode(request)) == request
"""

from .base import ConfigStatus, ValidationResult
from .codec import ENCODED_SIZE, decode, encode
from .errors import (
    ClusterIdOutOfRangeError,
    ClusterLowExceedsHighError,
    InvalidConfigError,
    MalformedValueError,
    NegativeClusterIdError,
    NegativePreferenceError,
    ReservedOrOutOfRangePreferenceError,
    TruncatedInputError,
    UnknownFieldError,
)
from .request import ConfigRequest, ConfigRequestBuilder
from .validators import (
    CLUSTER_ID_MAX,
    CLUSTER_ID_MIN,
    check_all,
    check_cluster_bound,
    check_cluster_ordering,
    check_master_preference,
    check_support_alt_band,
)


__all__ = [
    "CLUSTER_ID_MAX",
    "CLUSTER_ID_MIN",
    "ENCODED_SIZE",
    "ClusterIdOutOfRangeError",
    "ClusterLowExceedsHighError",
    "ConfigRequest",
    "ConfigRequestBuilder",
    "ConfigStatus",
    "InvalidConfigError",
    "MalformedValueError",
    "NegativeClusterIdError",
    "NegativePreferenceError",
    "ReservedOrOutOfRangePreferenceError",
    "TruncatedInputError",
    "UnknownFieldError",
    "ValidationResult",
    "check_all",
    "check_cluster_bound",
    "check_cluster_ordering",
    "check_master_preference",
    "check_support_alt_band",
    "decode",
    "encode",
]
