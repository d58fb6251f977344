"""
Tests for aware_config.codec module.
"""

import struct

import pytest

from aware_config.codec import ENCODED_SIZE, decode, encode
from aware_config.errors import (
    ClusterLowExceedsHighError,
    InvalidConfigError,
    ReservedOrOutOfRangePreferenceError,
    TruncatedInputError,
)
from aware_config.request import ConfigRequest, ConfigRequestBuilder


class TestEncode:
    """Tests for encode function."""

    def test_size(self):
        """Test the record is always 16 bytes."""
        assert ENCODED_SIZE == 16
        assert len(encode(ConfigRequest())) == 16
        assert len(encode(ConfigRequest(True, 254, 65535, 65535))) == 16

    def test_default_layout(self):
        """Test the default request encodes as little-endian int32s."""
        assert encode(ConfigRequest()).hex() == "000000000000000000000000ffff0000"

    def test_field_order(self):
        """Test flag, preference, low and high appear in that order."""
        record = encode(ConfigRequest(True, 254, 7, 9))

        assert struct.unpack("<4i", record) == (1, 254, 7, 9)

    def test_flag_false_is_zero(self):
        """Test an unset flag encodes as 0."""
        record = encode(ConfigRequest(False, 2, 3, 4))

        assert record[:4] == b"\x00\x00\x00\x00"


class TestDecode:
    """Tests for decode function."""

    def test_full_request_round_trip(self):
        """Test a fully configured request survives encode/decode."""
        request = (
            ConfigRequestBuilder()
            .set_support_alt_band(True)
            .set_master_preference(254)
            .set_cluster_low(0)
            .set_cluster_high(65535)
            .build()
        )

        record = encode(request)

        assert record.hex() == "01000000fe00000000000000ffff0000"
        assert decode(record) == request

    def test_round_trip_samples(self):
        """Test decode(encode(v)) == v on a spread of valid requests."""
        requests = [
            ConfigRequest(),
            ConfigRequest(support_alt_band=True),
            ConfigRequest(master_preference=2),
            ConfigRequest(cluster_low=10, cluster_high=10),
            ConfigRequest(False, 128, 300, 40000),
        ]
        for request in requests:
            assert decode(encode(request)) == request

    def test_nonzero_flag_is_true(self):
        """Test any non-zero flag value decodes as True."""
        record = struct.pack("<4i", 7, 0, 0, 65535)

        assert decode(record).support_alt_band is True

    def test_truncated(self):
        """Test short input raises TruncatedInputError."""
        record = encode(ConfigRequest())

        with pytest.raises(TruncatedInputError) as exc_info:
            decode(record[:15])
        assert exc_info.value.value == 15

    def test_empty(self):
        """Test empty input raises TruncatedInputError."""
        with pytest.raises(TruncatedInputError):
            decode(b"")

    def test_truncated_is_invalid_config(self):
        """Test truncation belongs to the InvalidConfigError family."""
        with pytest.raises(InvalidConfigError):
            decode(b"\x00" * 8)

    def test_offset(self):
        """Test records can be read back to back from one buffer."""
        first = ConfigRequest(master_preference=20)
        second = ConfigRequest(cluster_low=5, cluster_high=6)
        buffer = b"\xff" * 3 + encode(first) + encode(second)

        assert decode(buffer, 3) == first
        assert decode(buffer, 3 + ENCODED_SIZE) == second

    def test_offset_past_end(self):
        """Test an offset leaving too few bytes raises TruncatedInputError."""
        buffer = encode(ConfigRequest())

        with pytest.raises(TruncatedInputError):
            decode(buffer, 1)
        with pytest.raises(TruncatedInputError) as exc_info:
            decode(buffer, 40)
        assert exc_info.value.value == 0

    def test_negative_offset(self):
        """Test a negative offset is rejected."""
        with pytest.raises(ValueError, match="offset"):
            decode(encode(ConfigRequest()), -1)

    def test_trailing_bytes_ignored(self):
        """Test bytes after the record do not affect decoding."""
        request = ConfigRequest(master_preference=9)

        assert decode(encode(request) + b"extra") == request

    def test_accepts_bytearray_and_memoryview(self):
        """Test non-bytes buffers are decoded too."""
        record = encode(ConfigRequest(master_preference=9))

        assert decode(bytearray(record)).master_preference == 9
        assert decode(memoryview(record)).master_preference == 9


class TestPermissiveDecode:
    """Tests for decoding records that violate invariants."""

    def test_inverted_range_decoded_as_is(self):
        """Test decode does not validate by default."""
        record = struct.pack("<4i", 0, 0, 100, 50)

        request = decode(record)

        assert request.cluster_low == 100
        assert request.cluster_high == 50
        with pytest.raises(ClusterLowExceedsHighError):
            request.validate()

    def test_strict_rejects(self):
        """Test strict=True validates the decoded record."""
        record = struct.pack("<4i", 0, 0, 100, 50)

        with pytest.raises(ClusterLowExceedsHighError):
            decode(record, strict=True)

    def test_strict_reports_first_error(self):
        """Test strict decode uses the whole-request check order."""
        record = struct.pack("<4i", 0, 255, 100, 50)

        with pytest.raises(ReservedOrOutOfRangePreferenceError):
            decode(record, strict=True)

    def test_strict_accepts_valid(self):
        """Test strict decode returns valid records unchanged."""
        request = ConfigRequest(True, 10, 1, 2)

        assert decode(encode(request), strict=True) == request

    def test_invalid_record_re_encodes(self):
        """Test an unvalidated request still encodes to the same bytes."""
        record = struct.pack("<4i", 1, -5, 70000, -1)

        assert encode(decode(record)) == record
