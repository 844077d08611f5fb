"""Tests for the MH-AC-WIFI-1 data point coordinator."""

from datetime import timedelta

import pytest
from homeassistant.helpers.update_coordinator import UpdateFailed

from custom_components.mhacwifi1.coordinator import AcwmDataPointCoordinator
from custom_components.mhacwifi1.infrastructure.errors import (
    AcwmConnectionError,
    AcwmDecodeError,
)


@pytest.mark.asyncio
async def test_coordinator_returns_datapoints(mock_hass, mock_api, mock_config_entry, datapoints):
    """Test one poll returns the flattened data point values."""
    mock_api.async_get_data_point_values.return_value = datapoints
    coordinator = AcwmDataPointCoordinator(mock_hass, mock_api, config_entry=mock_config_entry)

    result = await coordinator._async_update_data()

    assert result == datapoints
    mock_api.async_get_data_point_values.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [AcwmConnectionError("reset"), AcwmDecodeError("garbage")])
async def test_coordinator_update_failed(mock_hass, mock_api, mock_config_entry, error):
    """Test client errors become UpdateFailed."""
    mock_api.async_get_data_point_values.side_effect = error
    coordinator = AcwmDataPointCoordinator(mock_hass, mock_api, config_entry=mock_config_entry)

    with pytest.raises(UpdateFailed):
        await coordinator._async_update_data()


def test_coordinator_polling_interval(mock_hass, mock_api, mock_config_entry):
    coordinator = AcwmDataPointCoordinator(
        mock_hass, mock_api, config_entry=mock_config_entry, polling_interval=60
    )

    assert coordinator.update_interval == timedelta(seconds=60)
    assert coordinator.api is mock_api
