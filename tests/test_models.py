"""Tests for MH-AC-WIFI-1 data models."""

import pytest
from pydantic import ValidationError

from custom_components.mhacwifi1.models import (
    CommandResult,
    DataPointValue,
    DeviceReference,
    celsius_to_device,
    device_to_celsius,
    parse_datapoint_values,
)


class TestTemperatureConversion:
    """Test conversion between tenths of a degree and Celsius."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(215, 21.5), (0, 0.0), (-15, -1.5), ("245", 24.5), (None, None), ("n/a", None)],
    )
    def test_device_to_celsius(self, raw, expected):
        assert device_to_celsius(raw) == expected

    @pytest.mark.parametrize("celsius,expected", [(22.5, 225), (18, 180), (21.04, 210), (-3.5, -35)])
    def test_celsius_to_device(self, celsius, expected):
        assert celsius_to_device(celsius) == expected


class TestCommandResult:
    """Test CommandResult model."""

    def test_success(self):
        result = CommandResult.from_response({"success": True, "data": {"info": {}}}, 200)

        assert result.success is True
        assert result.data == {"info": {}}
        assert result.error is None
        assert result.error_code is None
        assert result.error_message == ""
        assert result.is_session_expired is False

    def test_error(self):
        """Test the error record and transport status are kept."""
        result = CommandResult.from_response(
            {"success": False, "error": {"code": 1, "message": "invalid session"}}, 503
        )

        assert result.success is False
        assert result.error_code == 1
        assert result.error_message == "invalid session"
        assert result.status == 503
        assert result.is_session_expired is True

    def test_other_error_is_not_session_expiry(self):
        result = CommandResult(success=False, error={"code": 4})

        assert result.is_session_expired is False
        assert result.error_message == ""

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            CommandResult.from_response([{"success": True}], 200)

    def test_missing_success(self):
        with pytest.raises(ValidationError):
            CommandResult.from_response({"data": {}}, 200)


class TestDataPointValues:
    """Test parsing of getdatapointvalue payloads."""

    def test_datapoint_value(self):
        point = DataPointValue.from_api({"uid": 9, "value": 220, "status": 0})

        assert point.uid == 9
        assert point.value == 220
        assert point.status == 0

    def test_parse_list(self):
        dpval = [{"uid": 1, "value": 1}, {"uid": 10, "value": -12}]

        assert parse_datapoint_values(dpval) == {1: 1, 10: -12}

    def test_parse_single(self):
        assert parse_datapoint_values({"uid": 9, "value": 220}) == {9: 220}

    def test_parse_none(self):
        assert parse_datapoint_values(None) == {}

    def test_parse_invalid(self):
        with pytest.raises(ValidationError):
            parse_datapoint_values([{"uid": "x", "value": 1}])


class TestDeviceReference:
    """Test DeviceReference model."""

    def test_get(self):
        reference = DeviceReference(data={"version": 3})

        assert reference.get("version") == 3
        assert reference.get("missing", "default") == "default"

    def test_get_non_dict(self):
        reference = DeviceReference(data=[1, 2])

        assert reference.get("version") is None

    def test_frozen(self):
        reference = DeviceReference(data={})

        with pytest.raises(ValidationError):
            reference.data = {"x": 1}
