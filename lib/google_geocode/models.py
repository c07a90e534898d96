"""
Google Geocoding API Data Models

This module defines immutable request and response models for the Google
Geocoding API. Requests are refined through functions from builders.py, which
return new instances and never touch the original one.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Tuple, Union

from .enums import ComponentType, GeocodeStatus, LocationType

Number = Union[int, float, Decimal]
LatLngPair = Tuple[Number, Number]
ComponentFilters = Tuple[Tuple[str, ComponentType], ...]


@dataclass(frozen=True, slots=True)
class LatLng:
    """Latitude/longitude pair, dood!"""

    lat: Number
    lng: Number

    def __post_init__(self):
        # bool is an int subclass but never a coordinate
        if isinstance(self.lat, bool) or isinstance(self.lng, bool):
            raise TypeError(f"Coordinates must be numbers, got lat={self.lat!r}, lng={self.lng!r}")

    @classmethod
    def fromPair(cls, pair: LatLngPair) -> "LatLng":
        """Create LatLng from (lat, lng) tuple"""
        lat, lng = pair
        return cls(lat=lat, lng=lng)


@dataclass(frozen=True, slots=True)
class Viewport:
    """
    Rectangle described by south-west and north-east corners

    Used both as a request bias (``bounds``) and as a response hint.
    Corners are not checked: keeping south-west actually south-west is up to the caller.
    """

    southwest: LatLng
    northeast: LatLng

    @classmethod
    def fromPairs(cls, southwest: LatLngPair, northeast: LatLngPair) -> "Viewport":
        """Create Viewport from (lat, lng) tuples of south-west and north-east corners"""
        return cls(southwest=LatLng.fromPair(southwest), northeast=LatLng.fromPair(northeast))


# Forward request subjects


def freezeComponents(
    components: Union[Mapping[str, ComponentType], Iterable[Tuple[str, ComponentType]]],
) -> ComponentFilters:
    """Turn component filters into a tuple of (value, kind) pairs, dood!

    Accepts a mapping or (value, kind) pairs; a repeated value keeps the last kind.
    Pairs are sorted by value in descending order, so equal filter sets compare
    and hash equal whatever order they were added in.
    """
    return tuple(sorted(dict(components).items(), key=lambda item: item[0], reverse=True))


@dataclass(frozen=True, slots=True)
class AddressOnly:
    """Free-form address only"""

    address: str


@dataclass(frozen=True, slots=True)
class ComponentsOnly:
    """Component filters only, keyed by filter value"""

    components: ComponentFilters

    def __post_init__(self):
        object.__setattr__(self, "components", freezeComponents(self.components))


@dataclass(frozen=True, slots=True)
class AddressAndComponents:
    """Free-form address restricted by component filters"""

    address: str
    components: ComponentFilters

    def __post_init__(self):
        object.__setattr__(self, "components", freezeComponents(self.components))


ForwardSubject = Union[AddressOnly, ComponentsOnly, AddressAndComponents]


@dataclass(frozen=True, slots=True)
class ForwardRequest:
    """Forward geocoding request (address -> coordinates)"""

    subject: ForwardSubject
    apiKey: str
    bounds: Optional[Viewport] = None
    """Viewport to bias results to"""
    language: Optional[str] = None
    """Language of returned results (e.g. "en", "ru")"""
    region: Optional[str] = None
    """Region bias as ccTLD code (e.g. "es")"""


# Reverse request subjects


@dataclass(frozen=True, slots=True)
class LatLngSubject:
    """Coordinates to look up"""

    location: LatLng


@dataclass(frozen=True, slots=True)
class PlaceIdSubject:
    """Place ID to look up"""

    placeId: str


ReverseSubject = Union[LatLngSubject, PlaceIdSubject]


@dataclass(frozen=True, slots=True)
class ReverseRequest:
    """Reverse geocoding request (coordinates or place ID -> address)"""

    subject: ReverseSubject
    apiKey: str
    language: Optional[str] = None
    resultTypes: Optional[Tuple[ComponentType, ...]] = None
    """Filter results by address type, in given order"""
    locationTypes: Optional[Tuple[LocationType, ...]] = None
    """Filter results by location type, in given order"""


GeocodeRequest = Union[ForwardRequest, ReverseRequest]


# Response models


@dataclass(frozen=True, slots=True)
class AddressComponent:
    """Single component of a result address"""

    types: Tuple[ComponentType, ...]
    longName: Optional[str] = None
    """Full text description, e.g. "Spain" """
    shortName: Optional[str] = None
    """Abbreviated name, e.g. "ES" """


@dataclass(frozen=True, slots=True)
class Geometry:
    """Result location with its accuracy and viewport"""

    location: LatLng
    locationType: LocationType
    viewport: Viewport
    bounds: Optional[Viewport] = None
    """Box which can fully contain the result, if the provider sent one"""


@dataclass(frozen=True, slots=True)
class GeocodingResult:
    """Single geocoding result"""

    addressComponents: Tuple[AddressComponent, ...]
    formattedAddress: str
    geometry: Geometry
    types: Tuple[ComponentType, ...]
    placeId: str
    partialMatch: bool = False
    """Provider couldn't match the whole request"""


@dataclass(frozen=True, slots=True)
class GeocodeResponse:
    """Decoded geocoding response, dood!"""

    status: GeocodeStatus
    results: Tuple[GeocodingResult, ...]
    errorMessage: Optional[str] = None
    """Provider's diagnostic message, usually present for non-OK statuses"""

    @property
    def isOk(self) -> bool:
        return self.status == GeocodeStatus.OK
