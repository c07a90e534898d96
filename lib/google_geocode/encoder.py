"""
Query encoder for Google Geocoding API

Turns request models into ordered query parameters and a complete request URL.
Parameter order is stable so that produced URLs can be compared literally:

- forward: key, address, components, bounds, language, region
- reverse: key, latlng | place_id, language, result_type, location_type

Encoding never fails: empty optional pieces are simply left out.
"""

from decimal import Decimal
from typing import Iterable, List, Tuple
from urllib.parse import urlencode

from .enums import ComponentType, LocationType, componentTypeToToken, locationTypeToToken
from .models import (
    AddressAndComponents,
    AddressOnly,
    ComponentFilters,
    ComponentsOnly,
    ForwardRequest,
    GeocodeRequest,
    LatLng,
    LatLngSubject,
    Number,
    PlaceIdSubject,
    ReverseRequest,
    Viewport,
)

ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"

QueryParams = List[Tuple[str, str]]


def formatNumber(value: Number) -> str:
    """Format coordinate without locale and without exponent notation.

    Trailing zeros given by the caller (e.g. ``Decimal("1.50")``) are kept.
    Booleans never get here, ``LatLng`` refuses them.
    """
    text = str(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def formatLatLng(location: LatLng) -> str:
    return f"{formatNumber(location.lat)},{formatNumber(location.lng)}"


def formatViewport(viewport: Viewport) -> str:
    return f"{formatLatLng(viewport.southwest)}|{formatLatLng(viewport.northeast)}"


def formatComponents(components: ComponentFilters) -> str:
    """Format component filters as ``kind:value`` joined with ``|``.

    Entries go in descending order of their values.
    """
    return "|".join(
        f"{componentTypeToToken(componentType)}:{value}"
        for value, componentType in sorted(components, key=lambda item: item[0], reverse=True)
    )


def formatComponentTypes(componentTypes: Iterable[ComponentType]) -> str:
    return "|".join(componentTypeToToken(componentType) for componentType in componentTypes)


def formatLocationTypes(locationTypes: Iterable[LocationType]) -> str:
    return "|".join(locationTypeToToken(locationType) for locationType in locationTypes)


def _forwardParams(request: ForwardRequest) -> QueryParams:
    params: QueryParams = [("key", request.apiKey)]

    address = ""
    components: ComponentFilters = ()
    match request.subject:
        case AddressOnly(address=address):
            pass
        case ComponentsOnly(components=components):
            pass
        case AddressAndComponents(address=address, components=components):
            pass

    if address:
        params.append(("address", address))
    if components:
        params.append(("components", formatComponents(components)))

    if request.bounds is not None:
        params.append(("bounds", formatViewport(request.bounds)))
    if request.language is not None:
        params.append(("language", request.language))
    if request.region is not None:
        params.append(("region", request.region))

    return params


def _reverseParams(request: ReverseRequest) -> QueryParams:
    params: QueryParams = [("key", request.apiKey)]

    match request.subject:
        case LatLngSubject(location=location):
            params.append(("latlng", formatLatLng(location)))
        case PlaceIdSubject(placeId=placeId):
            params.append(("place_id", placeId))

    if request.language is not None:
        params.append(("language", request.language))
    if request.resultTypes:
        params.append(("result_type", formatComponentTypes(request.resultTypes)))
    if request.locationTypes:
        params.append(("location_type", formatLocationTypes(request.locationTypes)))

    return params


def queryParams(request: GeocodeRequest) -> QueryParams:
    """Get ordered query parameters for request, dood!"""
    if isinstance(request, ForwardRequest):
        return _forwardParams(request)
    return _reverseParams(request)


def buildUrl(request: GeocodeRequest) -> str:
    """Build full request URL with percent-encoded query.

    Example:
        >>> buildUrl(forAddress("k", "77 Battery St."))
        'https://maps.googleapis.com/maps/api/geocode/json?key=k&address=77+Battery+St.'
    """
    return f"{ENDPOINT}?{urlencode(queryParams(request))}"
