"""
Google Geocoding API enumerations and their wire tokens.

Component types and location types are open-ended on the provider side: new
tokens may appear at any time. Decoding an unknown token therefore yields the
``OTHER`` catch-all instead of failing. ``OTHER`` has no wire token of its own,
so encoding it gives an empty string.

Response status is a closed set: an unknown status token is a decode error.
"""

from enum import Enum, StrEnum, auto
from typing import Dict, Tuple

from .exceptions import GeocodeDecodeError


class ComponentType(Enum):
    """Address component type, also used for ``result_type`` filters"""

    STREET_ADDRESS = auto()
    STREET_NUMBER = auto()
    ROUTE = auto()
    INTERSECTION = auto()
    POLITICAL = auto()
    COUNTRY = auto()
    ADMINISTRATIVE_AREA = auto()
    """Only meaningful as a component filter"""
    ADMINISTRATIVE_AREA_LEVEL_1 = auto()
    ADMINISTRATIVE_AREA_LEVEL_2 = auto()
    ADMINISTRATIVE_AREA_LEVEL_3 = auto()
    ADMINISTRATIVE_AREA_LEVEL_4 = auto()
    ADMINISTRATIVE_AREA_LEVEL_5 = auto()
    COLLOQUIAL_AREA = auto()
    LOCALITY = auto()
    WARD = auto()
    SUBLOCALITY = auto()
    SUBLOCALITY_LEVEL_1 = auto()
    SUBLOCALITY_LEVEL_2 = auto()
    SUBLOCALITY_LEVEL_3 = auto()
    SUBLOCALITY_LEVEL_4 = auto()
    SUBLOCALITY_LEVEL_5 = auto()
    NEIGHBORHOOD = auto()
    PREMISE = auto()
    SUBPREMISE = auto()
    PLUS_CODE = auto()
    POSTAL_CODE = auto()
    POSTAL_CODE_PREFIX = auto()
    POSTAL_CODE_SUFFIX = auto()
    POSTAL_TOWN = auto()
    NATURAL_FEATURE = auto()
    AIRPORT = auto()
    PARK = auto()
    POINT_OF_INTEREST = auto()
    ESTABLISHMENT = auto()
    FLOOR = auto()
    PARKING = auto()
    POST_BOX = auto()
    ROOM = auto()
    BUS_STATION = auto()
    TRAIN_STATION = auto()
    TRANSIT_STATION = auto()

    OTHER = auto()
    """Any token not listed above"""


class LocationType(Enum):
    """Accuracy of the returned geometry location"""

    ROOFTOP = auto()
    RANGE_INTERPOLATED = auto()
    GEOMETRIC_CENTER = auto()
    APPROXIMATE = auto()

    OTHER = auto()
    """Any token not listed above"""


COMPONENT_TYPE_TOKENS: Tuple[Tuple[str, ComponentType], ...] = (
    ("street_address", ComponentType.STREET_ADDRESS),
    ("street_number", ComponentType.STREET_NUMBER),
    ("route", ComponentType.ROUTE),
    ("intersection", ComponentType.INTERSECTION),
    ("political", ComponentType.POLITICAL),
    ("country", ComponentType.COUNTRY),
    ("administrative_area", ComponentType.ADMINISTRATIVE_AREA),
    ("administrative_area_level_1", ComponentType.ADMINISTRATIVE_AREA_LEVEL_1),
    ("administrative_area_level_2", ComponentType.ADMINISTRATIVE_AREA_LEVEL_2),
    ("administrative_area_level_3", ComponentType.ADMINISTRATIVE_AREA_LEVEL_3),
    ("administrative_area_level_4", ComponentType.ADMINISTRATIVE_AREA_LEVEL_4),
    ("administrative_area_level_5", ComponentType.ADMINISTRATIVE_AREA_LEVEL_5),
    ("colloquial_area", ComponentType.COLLOQUIAL_AREA),
    ("locality", ComponentType.LOCALITY),
    ("ward", ComponentType.WARD),
    ("sublocality", ComponentType.SUBLOCALITY),
    ("sublocality_level_1", ComponentType.SUBLOCALITY_LEVEL_1),
    ("sublocality_level_2", ComponentType.SUBLOCALITY_LEVEL_2),
    ("sublocality_level_3", ComponentType.SUBLOCALITY_LEVEL_3),
    ("sublocality_level_4", ComponentType.SUBLOCALITY_LEVEL_4),
    ("sublocality_level_5", ComponentType.SUBLOCALITY_LEVEL_5),
    ("neighborhood", ComponentType.NEIGHBORHOOD),
    ("premise", ComponentType.PREMISE),
    ("subpremise", ComponentType.SUBPREMISE),
    ("plus_code", ComponentType.PLUS_CODE),
    ("postal_code", ComponentType.POSTAL_CODE),
    ("postal_code_prefix", ComponentType.POSTAL_CODE_PREFIX),
    ("postal_code_suffix", ComponentType.POSTAL_CODE_SUFFIX),
    ("postal_town", ComponentType.POSTAL_TOWN),
    ("natural_feature", ComponentType.NATURAL_FEATURE),
    ("airport", ComponentType.AIRPORT),
    ("park", ComponentType.PARK),
    ("point_of_interest", ComponentType.POINT_OF_INTEREST),
    ("establishment", ComponentType.ESTABLISHMENT),
    ("floor", ComponentType.FLOOR),
    ("parking", ComponentType.PARKING),
    ("post_box", ComponentType.POST_BOX),
    ("room", ComponentType.ROOM),
    ("bus_station", ComponentType.BUS_STATION),
    ("train_station", ComponentType.TRAIN_STATION),
    ("transit_station", ComponentType.TRANSIT_STATION),
)

LOCATION_TYPE_TOKENS: Tuple[Tuple[str, LocationType], ...] = (
    ("ROOFTOP", LocationType.ROOFTOP),
    ("RANGE_INTERPOLATED", LocationType.RANGE_INTERPOLATED),
    ("GEOMETRIC_CENTER", LocationType.GEOMETRIC_CENTER),
    ("APPROXIMATE", LocationType.APPROXIMATE),
)

_COMPONENT_TYPE_BY_TOKEN: Dict[str, ComponentType] = dict(COMPONENT_TYPE_TOKENS)
_LOCATION_TYPE_BY_TOKEN: Dict[str, LocationType] = dict(LOCATION_TYPE_TOKENS)


def componentTypeFromToken(token: str) -> ComponentType:
    """Decode component type token, unknown tokens give ComponentType.OTHER"""
    return _COMPONENT_TYPE_BY_TOKEN.get(token, ComponentType.OTHER)


def componentTypeToToken(componentType: ComponentType) -> str:
    """Encode component type, ComponentType.OTHER gives empty string"""
    for token, value in COMPONENT_TYPE_TOKENS:
        if value == componentType:
            return token
    return ""


def locationTypeFromToken(token: str) -> LocationType:
    """Decode location type token, unknown tokens give LocationType.OTHER"""
    return _LOCATION_TYPE_BY_TOKEN.get(token, LocationType.OTHER)


def locationTypeToToken(locationType: LocationType) -> str:
    """Encode location type, LocationType.OTHER gives empty string"""
    for token, value in LOCATION_TYPE_TOKENS:
        if value == locationType:
            return token
    return ""


class GeocodeStatus(StrEnum):
    """
    Top-level status of a geocoding response
    """

    OK = "OK"
    """At least one result was returned."""
    ZERO_RESULTS = "ZERO_RESULTS"
    """Request was fine but nothing matched."""
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    """Quota exceeded."""
    REQUEST_DENIED = "REQUEST_DENIED"
    """Request was denied, usually because of the API key."""
    INVALID_REQUEST = "INVALID_REQUEST"
    """Query is missing a subject (address, components, latlng or place_id)."""
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Server error, request may succeed if tried again."""

    @classmethod
    def fromToken(cls, token: str) -> "GeocodeStatus":
        """Decode status token.

        Raises:
            GeocodeDecodeError: If token isn't a documented status
        """
        try:
            return cls(token)
        except ValueError as e:
            raise GeocodeDecodeError(f"Unknown geocode status: {token!r}", path="status") from e
