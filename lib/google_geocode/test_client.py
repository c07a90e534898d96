"""
Unit tests for Google Geocoding API Client

This module contains unit tests for the GoogleGeocodeClient class, testing
URL building through the client, custom fetch functions and HTTP error handling.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from lib.google_geocode import (
    ENDPOINT,
    ComponentType,
    GeocodeDecodeError,
    GeocodeStatus,
    GeocodeTransportError,
    GoogleGeocodeClient,
    LocationType,
    Viewport,
    forAddress,
)

OK_BODY = json.dumps(
    {
        "results": [
            {
                "address_components": [{"long_name": "Toledo", "short_name": "Toledo", "types": ["locality"]}],
                "formatted_address": "Toledo, Spain",
                "geometry": {
                    "location": {"lat": 39.8628316, "lng": -4.0273231},
                    "location_type": "APPROXIMATE",
                    "viewport": {
                        "northeast": {"lat": 39.88605099999999, "lng": -3.9192423},
                        "southwest": {"lat": 39.8154099, "lng": -4.1353113},
                    },
                },
                "place_id": "ChIJ8f21C60Lag0R_q11auhbf8Y",
                "types": ["locality", "political"],
            }
        ],
        "status": "OK",
    }
)


@pytest.fixture
def fetch():
    """Fake transport returning successful body"""
    return AsyncMock(return_value=OK_BODY)


@pytest.mark.asyncio
async def test_geocode_with_custom_fetch(fetch):
    """Test prepared request goes through fetch and decoder, dood!"""
    client = GoogleGeocodeClient(apiKey="unused", fetch=fetch)

    response = await client.geocode(forAddress("k", "Toledo"))

    fetch.assert_awaited_once_with(f"{ENDPOINT}?key=k&address=Toledo")
    assert response.status == GeocodeStatus.OK
    assert response.results[0].formattedAddress == "Toledo, Spain"
    assert response.results[0].geometry.locationType == LocationType.APPROXIMATE


@pytest.mark.asyncio
async def test_search_with_components(fetch):
    """Test search builds address-and-components request, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key", fetch=fetch)

    await client.search(
        "Toledo",
        components=[("Toledo", ComponentType.ADMINISTRATIVE_AREA), ("Spain", ComponentType.COUNTRY)],
        bounds=Viewport.fromPairs((39.8, -4.1), (39.9, -3.9)),
        language="es",
        region="es",
    )

    fetch.assert_awaited_once_with(
        f"{ENDPOINT}?key=test_key&address=Toledo"
        "&components=administrative_area%3AToledo%7Ccountry%3ASpain"
        "&bounds=39.8%2C-4.1%7C39.9%2C-3.9&language=es&region=es"
    )


@pytest.mark.asyncio
async def test_search_components_only(fetch):
    client = GoogleGeocodeClient(apiKey="test_key", fetch=fetch)

    await client.search(components=[("Spain", ComponentType.COUNTRY)])

    fetch.assert_awaited_once_with(f"{ENDPOINT}?key=test_key&components=country%3ASpain")


@pytest.mark.asyncio
async def test_search_requires_subject(fetch):
    client = GoogleGeocodeClient(apiKey="test_key", fetch=fetch)

    with pytest.raises(ValueError):
        await client.search()

    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_client_defaults_used(fetch):
    """Test client-level language and region apply when call doesn't set them, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key", language="ru", region="ru", fetch=fetch)

    await client.search("Angarsk")
    await client.search("Angarsk", language="en")

    assert fetch.await_args_list[0].args[0] == f"{ENDPOINT}?key=test_key&address=Angarsk&language=ru&region=ru"
    assert fetch.await_args_list[1].args[0] == f"{ENDPOINT}?key=test_key&address=Angarsk&language=en&region=ru"


@pytest.mark.asyncio
async def test_reverse(fetch):
    client = GoogleGeocodeClient(apiKey="test_key", fetch=fetch)

    await client.reverse(
        37.8489277,
        -122.4031502,
        resultTypes=[ComponentType.STREET_ADDRESS],
        locationTypes=[LocationType.ROOFTOP],
    )

    fetch.assert_awaited_once_with(
        f"{ENDPOINT}?key=test_key&latlng=37.8489277%2C-122.4031502"
        "&result_type=street_address&location_type=ROOFTOP"
    )


@pytest.mark.asyncio
async def test_lookup(fetch):
    client = GoogleGeocodeClient(apiKey="test_key", language="en", fetch=fetch)

    await client.lookup("ChIJ8f21C60Lag0R_q11auhbf8Y")

    fetch.assert_awaited_once_with(f"{ENDPOINT}?key=test_key&place_id=ChIJ8f21C60Lag0R_q11auhbf8Y&language=en")


@pytest.mark.asyncio
async def test_decode_error_propagates():
    """Test broken body surfaces as GeocodeDecodeError, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key", fetch=AsyncMock(return_value='{"status": "BOGUS"}'))

    with pytest.raises(GeocodeDecodeError):
        await client.search("Test")


@pytest.mark.asyncio
async def test_default_transport_success():
    """Test httpx transport returns body for 200, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key", requestTimeout=5)

    with patch("httpx.AsyncClient") as mock_client:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = OK_BODY
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=mock_response)

        response = await client.search("Toledo")

        mock_client.assert_called_once_with(timeout=5)
        mock_client.return_value.__aenter__.return_value.get.assert_awaited_once_with(
            f"{ENDPOINT}?key=test_key&address=Toledo"
        )
        assert response.isOk


@pytest.mark.asyncio
@pytest.mark.parametrize("statusCode", [400, 403, 429, 500, 503])
async def test_default_transport_http_errors(statusCode):
    """Test non-200 statuses raise transport error with status code, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key")

    with patch("httpx.AsyncClient") as mock_client:
        mock_response = MagicMock()
        mock_response.status_code = statusCode
        mock_response.text = "error"
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=mock_response)

        with pytest.raises(GeocodeTransportError) as excInfo:
            await client.search("Test")

        assert excInfo.value.statusCode == statusCode


@pytest.mark.asyncio
async def test_timeout_exception():
    """Test handling of timeout exception, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key")

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.TimeoutException("Timeout")
        )

        with pytest.raises(GeocodeTransportError) as excInfo:
            await client.search("Test")

        assert excInfo.value.statusCode is None
        assert isinstance(excInfo.value.__cause__, httpx.TimeoutException)


@pytest.mark.asyncio
async def test_network_error():
    """Test handling of network error, dood!"""
    client = GoogleGeocodeClient(apiKey="test_key")

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.RequestError("Network error")
        )

        with pytest.raises(GeocodeTransportError):
            await client.search("Test")
