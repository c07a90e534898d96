"""
JSON decoder for Google Geocoding API responses

This module converts raw response bodies into the GeocodeResponse model.

Two kinds of tolerance differ on purpose:
- Unknown component and location type tokens decode to the ``OTHER`` catch-all,
  since the provider may document new types at any time.
- Unknown status tokens, missing required fields and wrong JSON types are fatal:
  GeocodeDecodeError is raised and no partial response is returned.

Example:
    ```python
    try:
        response = parseResponse(body)
    except GeocodeDecodeError as e:
        print(f"Failed to parse response: {e}")
    else:
        for result in response.results:
            print(result.formattedAddress, result.geometry.location)
    ```
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

from .enums import ComponentType, GeocodeStatus, componentTypeFromToken, locationTypeFromToken
from .exceptions import GeocodeDecodeError
from .models import AddressComponent, GeocodeResponse, GeocodingResult, Geometry, LatLng, Viewport

_MISSING = object()


def _jsonTypeName(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _field(data: Dict[str, Any], key: str, path: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        raise GeocodeDecodeError(f"Missing required field '{key}'", path=path)
    return value


def _expectObject(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise GeocodeDecodeError(f"Expected object, got {_jsonTypeName(value)}", path=path)
    return value


def _expectArray(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise GeocodeDecodeError(f"Expected array, got {_jsonTypeName(value)}", path=path)
    return value


def _expectString(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise GeocodeDecodeError(f"Expected string, got {_jsonTypeName(value)}", path=path)
    return value


def _expectNumber(value: Any, path: str) -> Union[int, float]:
    # bool is an int subclass, but JSON true/false is not a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GeocodeDecodeError(f"Expected number, got {_jsonTypeName(value)}", path=path)
    return value


def _optionalString(data: Dict[str, Any], key: str, path: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    return _expectString(value, f"{path}.{key}")


def parseLatLng(data: Any, path: str) -> LatLng:
    """Parse ``{"lat": .., "lng": ..}`` object"""
    obj = _expectObject(data, path)
    return LatLng(
        lat=_expectNumber(_field(obj, "lat", path), f"{path}.lat"),
        lng=_expectNumber(_field(obj, "lng", path), f"{path}.lng"),
    )


def parseViewport(data: Any, path: str) -> Viewport:
    """Parse ``{"northeast": {..}, "southwest": {..}}`` object"""
    obj = _expectObject(data, path)
    return Viewport(
        southwest=parseLatLng(_field(obj, "southwest", path), f"{path}.southwest"),
        northeast=parseLatLng(_field(obj, "northeast", path), f"{path}.northeast"),
    )


def parseComponentTypes(data: Any, path: str) -> Tuple[ComponentType, ...]:
    """Parse array of component type tokens, unknown tokens become ComponentType.OTHER"""
    tokens = _expectArray(data, path)
    return tuple(componentTypeFromToken(_expectString(token, f"{path}[{i}]")) for i, token in enumerate(tokens))


def parseAddressComponent(data: Any, path: str) -> AddressComponent:
    """Parse single entry of ``address_components``"""
    obj = _expectObject(data, path)
    return AddressComponent(
        types=parseComponentTypes(_field(obj, "types", path), f"{path}.types"),
        longName=_optionalString(obj, "long_name", path),
        shortName=_optionalString(obj, "short_name", path),
    )


def parseGeometry(data: Any, path: str) -> Geometry:
    """Parse ``geometry`` object of a result"""
    obj = _expectObject(data, path)

    locationTypeToken = obj.get("location_type")
    locationType = locationTypeFromToken(locationTypeToken if isinstance(locationTypeToken, str) else "")

    bounds = None
    if obj.get("bounds") is not None:
        bounds = parseViewport(obj["bounds"], f"{path}.bounds")

    return Geometry(
        location=parseLatLng(_field(obj, "location", path), f"{path}.location"),
        locationType=locationType,
        viewport=parseViewport(_field(obj, "viewport", path), f"{path}.viewport"),
        bounds=bounds,
    )


def parseResult(data: Any, path: str) -> GeocodingResult:
    """Parse single entry of ``results``"""
    obj = _expectObject(data, path)

    componentsPath = f"{path}.address_components"
    addressComponents = tuple(
        parseAddressComponent(component, f"{componentsPath}[{i}]")
        for i, component in enumerate(_expectArray(_field(obj, "address_components", path), componentsPath))
    )

    partialMatch = obj.get("partial_match", False)
    if not isinstance(partialMatch, bool):
        raise GeocodeDecodeError(f"Expected boolean, got {_jsonTypeName(partialMatch)}", path=f"{path}.partial_match")

    return GeocodingResult(
        addressComponents=addressComponents,
        formattedAddress=_expectString(_field(obj, "formatted_address", path), f"{path}.formatted_address"),
        geometry=parseGeometry(_field(obj, "geometry", path), f"{path}.geometry"),
        types=parseComponentTypes(_field(obj, "types", path), f"{path}.types"),
        placeId=_expectString(_field(obj, "place_id", path), f"{path}.place_id"),
        partialMatch=partialMatch,
    )


def parseResponse(body: Union[str, bytes, Dict[str, Any]]) -> GeocodeResponse:
    """
    Parse Google Geocoding API response.

    Args:
        body: Raw JSON text (str or bytes) or already parsed JSON object

    Returns:
        GeocodeResponse: Decoded response

    Raises:
        GeocodeDecodeError: If body isn't valid JSON, status is unknown or any
            required field is missing or has the wrong type. The error's ``path``
            names the failing field.
    """
    if isinstance(body, (str, bytes)):
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GeocodeDecodeError(f"Invalid JSON: {e}") from e
    else:
        data = body

    obj = _expectObject(data, "$")

    # Status goes first: unknown status fails everything else
    status = GeocodeStatus.fromToken(_expectString(_field(obj, "status", "$"), "status"))

    results = tuple(
        parseResult(result, f"results[{i}]")
        for i, result in enumerate(_expectArray(_field(obj, "results", "$"), "results"))
    )

    return GeocodeResponse(
        status=status,
        results=results,
        errorMessage=_optionalString(obj, "error_message", "$"),
    )
