"""
Fixed-width binary encoding of config requests.

A record is four little-endian signed 32-bit integers, in field order:

    offset  field
    0       support_alt_band (1 or 0)
    4       master_preference
    8       cluster_low
    12      cluster_high

There is no version or length prefix. Decoding reads one record and leaves
any following bytes alone, so records can be stored back to back.
"""

import struct

from .errors import TruncatedInputError
from .request import ConfigRequest


_RECORD = struct.Struct("<4i")

ENCODED_SIZE = _RECORD.size


def encode(request: ConfigRequest) -> bytes:
    """Encode a request as a 16-byte record."""
    return _RECORD.pack(
        1 if request.support_alt_band else 0,
        request.master_preference,
        request.cluster_low,
        request.cluster_high,
    )


def decode(
    data: bytes | bytearray | memoryview,
    offset: int = 0,
    *,
    strict: bool = False,
) -> ConfigRequest:
    """Decode one record starting at offset.

    By default the decoded fields are taken as-is, without validation, so a
    corrupted payload can yield a request that violates its invariants. Call
    validate() on the result, or pass strict=True, before trusting data from
    outside the process.

    Args:
        data: Buffer holding the record
        offset: Byte offset of the record within data
        strict: Validate the decoded request before returning it

    Returns:
        The decoded ConfigRequest

    Raises:
        ValueError: If offset is negative
        TruncatedInputError: If fewer than ENCODED_SIZE bytes follow offset
        InvalidConfigError: If strict is set and the record is invalid
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    available = len(data) - offset
    if available < ENCODED_SIZE:
        raise TruncatedInputError(
            f"Config request record needs {ENCODED_SIZE} bytes, got {max(available, 0)}",
            value=max(available, 0),
        )

    support_alt_band, master_preference, cluster_low, cluster_high = _RECORD.unpack_from(
        data, offset
    )
    request = ConfigRequest._unchecked(
        support_alt_band != 0,
        master_preference,
        cluster_low,
        cluster_high,
    )
    if strict:
        request.validate()
    return request
