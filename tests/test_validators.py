"""Tests for MH-AC-WIFI-1 input validation."""

import pytest

from custom_components.mhacwifi1.infrastructure.validation import (
    validate_datapoint_value,
    validate_host,
    validate_retry_policy,
    validate_uid,
)


class TestValidateHost:
    """Test validate_host function."""

    @pytest.mark.parametrize("host", ["192.168.1.50", "10.0.0.1", "acwm.local", "airco-living"])
    def test_valid_hosts(self, host):
        assert validate_host(host) == (True, None)

    def test_empty_host(self):
        is_valid, error = validate_host("  ")

        assert is_valid is False
        assert error == "Host cannot be empty"

    def test_url_scheme(self):
        is_valid, error = validate_host("http://192.168.1.50")

        assert is_valid is False
        assert "scheme" in error

    def test_shell_characters(self):
        is_valid, _ = validate_host("192.168.1.50; rm -rf /")

        assert is_valid is False

    @pytest.mark.parametrize("host", ["127.0.0.1", "169.254.1.1", "224.0.0.1"])
    def test_invalid_ranges(self, host):
        is_valid, error = validate_host(host)

        assert is_valid is False
        assert error == "Invalid IP address range"

    def test_invalid_hostname(self):
        is_valid, error = validate_host("-bad-.host")

        assert is_valid is False
        assert error == "Invalid hostname format"


class TestValidateUid:
    """Test validate_uid function."""

    @pytest.mark.parametrize("uid", [1, 9, 37, 1000])
    def test_valid(self, uid):
        assert validate_uid(uid) == (True, None)

    @pytest.mark.parametrize("uid", [0, -1, "9", 1.5, True, None])
    def test_invalid(self, uid):
        is_valid, error = validate_uid(uid)

        assert is_valid is False
        assert error == "uid must be a positive integer"


class TestValidateDatapointValue:
    """Test validate_datapoint_value function."""

    @pytest.mark.parametrize("value", [0, 1, -32768, 65535, 225])
    def test_valid(self, value):
        assert validate_datapoint_value(value) == (True, None)

    @pytest.mark.parametrize("value", [-32769, 65536])
    def test_out_of_range(self, value):
        is_valid, error = validate_datapoint_value(value)

        assert is_valid is False
        assert "between" in error

    @pytest.mark.parametrize("value", ["1", 1.5, False])
    def test_not_integer(self, value):
        assert validate_datapoint_value(value) == (False, "Value must be an integer")


class TestValidateRetryPolicy:
    """Test validate_retry_policy function."""

    def test_defaults(self):
        assert validate_retry_policy(5, 0.1) == (True, None)

    def test_zero_delay(self):
        assert validate_retry_policy(1, 0) == (True, None)

    def test_no_attempts(self):
        assert validate_retry_policy(0, 0.1) == (False, "At least one attempt is required")

    def test_negative_delay(self):
        assert validate_retry_policy(3, -1) == (False, "Delay cannot be negative")
