"""
Request builders for Google Geocoding API

All functions here are pure: they take a request and a refinement and return a
new request built with ``dataclasses.replace``. The request passed in is never
changed, so a previously returned request can be safely reused.

Example:
    >>> request = forAddress("your_api_key", "Toledo")
    >>> request = withComponent(request, ("Spain", ComponentType.COUNTRY))
    >>> request = withLanguage(request, "es")
"""

from dataclasses import replace
from typing import Iterable, Optional, Sequence, Tuple

from .enums import ComponentType, LocationType
from .models import (
    AddressAndComponents,
    AddressOnly,
    ComponentsOnly,
    ForwardRequest,
    LatLng,
    LatLngPair,
    LatLngSubject,
    PlaceIdSubject,
    ReverseRequest,
    Viewport,
    freezeComponents,
)

ComponentFilter = Tuple[str, ComponentType]

# Forward requests


def forAddress(apiKey: str, address: str) -> ForwardRequest:
    """Create forward request for free-form address"""
    return ForwardRequest(subject=AddressOnly(address=address), apiKey=apiKey)


def forComponents(apiKey: str, components: Iterable[ComponentFilter]) -> ForwardRequest:
    """Create forward request from component filters.

    Filters are keyed by value, so a later filter with the same value
    replaces the kind of an earlier one.
    """
    return ForwardRequest(subject=ComponentsOnly(components=freezeComponents(components)), apiKey=apiKey)


def forSearch(
    apiKey: str,
    address: Optional[str] = None,
    components: Optional[Iterable[ComponentFilter]] = None,
) -> ForwardRequest:
    """Create forward request from an optional address and optional component filters.

    Raises:
        ValueError: If neither address nor components are given
    """
    if address is not None:
        request = forAddress(apiKey, address)
        for component in components or []:
            request = withComponent(request, component)
        return request
    if components is not None:
        return forComponents(apiKey, components)
    raise ValueError("Either address or components must be provided")


def withAddress(request: ForwardRequest, address: str) -> ForwardRequest:
    """Set address text, keeping any component filters.

    A components-only request becomes an address-and-components one.
    """
    match request.subject:
        case AddressOnly():
            subject = AddressOnly(address=address)
        case ComponentsOnly(components=components) | AddressAndComponents(components=components):
            subject = AddressAndComponents(address=address, components=components)
    return replace(request, subject=subject)


def withComponent(request: ForwardRequest, component: ComponentFilter) -> ForwardRequest:
    """Merge single component filter into the request.

    Calling it twice with the same value overwrites the kind instead of adding
    a second entry. An address-only request becomes an address-and-components one.
    """
    value, componentType = component
    match request.subject:
        case AddressOnly(address=address):
            subject = AddressAndComponents(address=address, components={value: componentType})
        case ComponentsOnly(components=components):
            subject = ComponentsOnly(components={**dict(components), value: componentType})
        case AddressAndComponents(address=address, components=components):
            subject = AddressAndComponents(address=address, components={**dict(components), value: componentType})
    return replace(request, subject=subject)


def withLanguage(request: ForwardRequest, language: Optional[str]) -> ForwardRequest:
    """Set result language, last call wins"""
    return replace(request, language=language)


def withRegion(request: ForwardRequest, region: Optional[str]) -> ForwardRequest:
    """Set region bias, last call wins"""
    return replace(request, region=region)


def withBounds(request: ForwardRequest, bounds: Optional[Viewport]) -> ForwardRequest:
    """Set viewport bias, last call wins"""
    return replace(request, bounds=bounds)


# Reverse requests


def reverseForLatLng(apiKey: str, location: LatLngPair) -> ReverseRequest:
    """Create reverse request for (lat, lng) pair"""
    return ReverseRequest(subject=LatLngSubject(location=LatLng.fromPair(location)), apiKey=apiKey)


def reverseForPlaceId(apiKey: str, placeId: str) -> ReverseRequest:
    """Create reverse request for place ID"""
    return ReverseRequest(subject=PlaceIdSubject(placeId=placeId), apiKey=apiKey)


def reverseWithLanguage(request: ReverseRequest, language: Optional[str]) -> ReverseRequest:
    """Set result language, last call wins"""
    return replace(request, language=language)


def withResultTypes(request: ReverseRequest, resultTypes: Optional[Sequence[ComponentType]]) -> ReverseRequest:
    """Replace result type filter as a whole"""
    return replace(request, resultTypes=tuple(resultTypes) if resultTypes is not None else None)


def withLocationTypes(request: ReverseRequest, locationTypes: Optional[Sequence[LocationType]]) -> ReverseRequest:
    """Replace location type filter as a whole"""
    return replace(request, locationTypes=tuple(locationTypes) if locationTypes is not None else None)
