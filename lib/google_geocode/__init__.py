"""
Google Geocoding API Client Library

This module provides a Python client library for the Google Geocoding API
(maps.googleapis.com/maps/api/geocode) with immutable request builders,
deterministic URL encoding and typed response decoding.

Example usage:
    from lib.google_geocode import (
        ComponentType,
        GoogleGeocodeClient,
        buildUrl,
        forAddress,
        withComponent,
    )

    # Build request step by step, every call returns a new request
    request = forAddress("your_api_key", "Toledo")
    request = withComponent(request, ("Spain", ComponentType.COUNTRY))
    print(buildUrl(request))

    # Send it
    client = GoogleGeocodeClient(apiKey="your_api_key")
    response = await client.geocode(request)

    # Or use shortcuts
    response = await client.search("77 Battery St.")
    response = await client.reverse(37.8489277, -122.4031502)
    response = await client.lookup("ChIJd8BlQ2BZwokRAFUEcm_qrcA")
"""

from lib.google_geocode.builders import (
    forAddress,
    forComponents,
    forSearch,
    reverseForLatLng,
    reverseForPlaceId,
    reverseWithLanguage,
    withAddress,
    withBounds,
    withComponent,
    withLanguage,
    withLocationTypes,
    withRegion,
    withResultTypes,
)
from lib.google_geocode.client import GoogleGeocodeClient
from lib.google_geocode.decoder import parseResponse
from lib.google_geocode.encoder import ENDPOINT, buildUrl, queryParams
from lib.google_geocode.enums import (
    ComponentType,
    GeocodeStatus,
    LocationType,
    componentTypeFromToken,
    componentTypeToToken,
    locationTypeFromToken,
    locationTypeToToken,
)
from lib.google_geocode.exceptions import GeocodeDecodeError, GeocodeError, GeocodeTransportError
from lib.google_geocode.models import (
    AddressAndComponents,
    AddressComponent,
    AddressOnly,
    ComponentsOnly,
    ForwardRequest,
    GeocodeRequest,
    GeocodeResponse,
    GeocodingResult,
    Geometry,
    LatLng,
    LatLngSubject,
    PlaceIdSubject,
    ReverseRequest,
    Viewport,
)

__all__ = [
    "GoogleGeocodeClient",
    # Builders
    "forAddress",
    "forComponents",
    "forSearch",
    "withAddress",
    "withComponent",
    "withLanguage",
    "withRegion",
    "withBounds",
    "reverseForLatLng",
    "reverseForPlaceId",
    "reverseWithLanguage",
    "withResultTypes",
    "withLocationTypes",
    # Encoding / decoding
    "ENDPOINT",
    "buildUrl",
    "queryParams",
    "parseResponse",
    # Enums
    "ComponentType",
    "LocationType",
    "GeocodeStatus",
    "componentTypeFromToken",
    "componentTypeToToken",
    "locationTypeFromToken",
    "locationTypeToToken",
    # Exceptions
    "GeocodeError",
    "GeocodeDecodeError",
    "GeocodeTransportError",
    # Models
    "LatLng",
    "Viewport",
    "AddressOnly",
    "ComponentsOnly",
    "AddressAndComponents",
    "ForwardRequest",
    "GeocodeRequest",
    "LatLngSubject",
    "PlaceIdSubject",
    "ReverseRequest",
    "AddressComponent",
    "Geometry",
    "GeocodingResult",
    "GeocodeResponse",
]
