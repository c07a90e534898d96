"""
Google Geocoding API Async Client

This module provides the GoogleGeocodeClient class which glues request builders,
the query encoder, an HTTP fetch function and the response decoder together.
"""

import logging
from typing import Awaitable, Callable, Iterable, Optional, Sequence, Tuple

import httpx

from . import builders
from .decoder import parseResponse
from .encoder import buildUrl
from .enums import ComponentType, LocationType
from .exceptions import GeocodeTransportError
from .models import GeocodeRequest, GeocodeResponse, Viewport

logger = logging.getLogger(__name__)

FetchFunction = Callable[[str], Awaitable[str]]
"""Transport: takes complete URL, returns raw body or raises GeocodeTransportError"""


class GoogleGeocodeClient:
    """Async client for Google Geocoding API, dood!

    Creates new HTTP session for each request to support proper concurrent
    operations. No caching, retries or rate limiting is done here.

    Example:
        >>> from lib.google_geocode import GoogleGeocodeClient, ComponentType
        >>>
        >>> client = GoogleGeocodeClient(apiKey="your_api_key", language="en")
        >>>
        >>> # Forward geocoding
        >>> response = await client.search("77 Battery St.")
        >>>
        >>> # Forward geocoding with component filter
        >>> response = await client.search("Toledo", components=[("Spain", ComponentType.COUNTRY)])
        >>>
        >>> # Reverse geocoding
        >>> response = await client.reverse(37.8489277, -122.4031502)
        >>>
        >>> # Place ID lookup
        >>> response = await client.lookup("ChIJd8BlQ2BZwokRAFUEcm_qrcA")
    """

    def __init__(
        self,
        apiKey: str,
        *,
        requestTimeout: int = 10,
        language: Optional[str] = None,
        region: Optional[str] = None,
        fetch: Optional[FetchFunction] = None,
    ):
        """Initialize Google Geocoding client, dood!

        Args:
            apiKey: Google Maps Platform API key (required)
            requestTimeout: HTTP request timeout in seconds (default: 10)
            language: Default language for results (e.g., "en", "ru") (default: None)
            region: Default region bias for forward geocoding (e.g., "es") (default: None)
            fetch: Custom transport function (default: httpx GET)
        """
        self.apiKey = apiKey
        self.requestTimeout = requestTimeout
        self.language = language
        self.region = region
        self._fetch: FetchFunction = fetch if fetch is not None else self._makeRequest

    async def geocode(self, request: GeocodeRequest) -> GeocodeResponse:
        """Send prepared request and decode the response.

        Args:
            request: Forward or reverse request

        Returns:
            Decoded response. Non-OK statuses (e.g. ZERO_RESULTS) are returned
            as is, check ``response.status``

        Raises:
            GeocodeTransportError: If no body was received
            GeocodeDecodeError: If body can't be decoded
        """
        url = buildUrl(request)
        logger.debug(f"Geocoding {type(request).__name__}: {request.subject}")
        body = await self._fetch(url)
        response = parseResponse(body)
        logger.debug(f"Got {response.status} with {len(response.results)} results")
        return response

    async def search(
        self,
        address: Optional[str] = None,
        *,
        components: Optional[Iterable[Tuple[str, ComponentType]]] = None,
        bounds: Optional[Viewport] = None,
        language: Optional[str] = None,
        region: Optional[str] = None,
    ) -> GeocodeResponse:
        """Forward geocoding: convert address to coordinates, dood!

        Args:
            address: Free-form address (e.g., "77 Battery St.")
            components: Component filters as (value, kind) pairs
            bounds: Viewport to bias results to
            language: Language for results, client default if omitted
            region: Region bias, client default if omitted

        Returns:
            Decoded response

        Raises:
            ValueError: If neither address nor components are given
        """
        request = builders.forSearch(self.apiKey, address, components)
        request = builders.withBounds(request, bounds)
        request = builders.withLanguage(request, language or self.language)
        request = builders.withRegion(request, region or self.region)
        return await self.geocode(request)

    async def reverse(
        self,
        lat: float,
        lng: float,
        *,
        language: Optional[str] = None,
        resultTypes: Optional[Sequence[ComponentType]] = None,
        locationTypes: Optional[Sequence[LocationType]] = None,
    ) -> GeocodeResponse:
        """Reverse geocoding: convert coordinates to address, dood!

        Args:
            lat: Latitude
            lng: Longitude
            language: Language for results, client default if omitted
            resultTypes: Only return results of these address types
            locationTypes: Only return results of these location types

        Returns:
            Decoded response
        """
        request = builders.reverseForLatLng(self.apiKey, (lat, lng))
        request = builders.reverseWithLanguage(request, language or self.language)
        request = builders.withResultTypes(request, resultTypes)
        request = builders.withLocationTypes(request, locationTypes)
        return await self.geocode(request)

    async def lookup(self, placeId: str, *, language: Optional[str] = None) -> GeocodeResponse:
        """Get address for Google place ID, dood!

        Args:
            placeId: Place ID (e.g., "ChIJd8BlQ2BZwokRAFUEcm_qrcA")
            language: Language for results, client default if omitted

        Returns:
            Decoded response
        """
        request = builders.reverseForPlaceId(self.apiKey, placeId)
        request = builders.reverseWithLanguage(request, language or self.language)
        return await self.geocode(request)

    async def _makeRequest(self, url: str) -> str:
        """Make HTTP request to Google Geocoding API, dood!

        Single point for all HTTP requests. Creates new session per request.
        Google answers 200 even for REQUEST_DENIED and similar statuses, those
        are reported in the body and handled by the decoder.

        Args:
            url: Complete request URL

        Returns:
            Raw response body

        Raises:
            GeocodeTransportError: On non-200 status, timeout or network error
        """
        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.get(url)

                if response.status_code == 200:
                    logger.debug(f"API request successful: {response.status_code}")
                    return response.text

                elif response.status_code == 403:
                    logger.error("Access forbidden, check API key restrictions")

                elif response.status_code == 429:
                    logger.error("Rate limit exceeded")

                elif response.status_code >= 500:
                    logger.error(f"Server error: {response.status_code}")

                else:
                    logger.error(f"API request failed: {response.status_code}")
                    logger.error(f"Response text: {response.text}")

                raise GeocodeTransportError("Geocoding request failed", statusCode=response.status_code)

        except httpx.TimeoutException as e:
            logger.error("Request timeout")
            raise GeocodeTransportError(f"Request timeout: {e}") from e

        except httpx.RequestError as e:
            logger.error(f"Network error: {e}")
            raise GeocodeTransportError(f"Network error: {e}") from e
