"""
Geocode - command line client for the Google Geocoding API with TOML configuration.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from internal.config.manager import ConfigManager
from lib.google_geocode import (
    ComponentType,
    GeocodeError,
    GeocodeRequest,
    GeocodeResponse,
    GoogleGeocodeClient,
    Viewport,
    buildUrl,
    componentTypeFromToken,
    componentTypeToToken,
    forSearch,
    locationTypeToToken,
    reverseForLatLng,
    reverseForPlaceId,
    reverseWithLanguage,
    withBounds,
    withLanguage,
    withRegion,
)
from lib.logging_utils import initLogging
from lib.utils import jsonDumps

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def parseComponent(value: str) -> Tuple[str, ComponentType]:
    """Parse ``KIND:VALUE`` component filter, e.g. ``country:Spain``"""
    kind, sep, text = value.partition(":")
    if not sep or not text:
        raise argparse.ArgumentTypeError(f"Expected KIND:VALUE, got {value!r}")
    componentType = componentTypeFromToken(kind)
    if componentType == ComponentType.OTHER:
        raise argparse.ArgumentTypeError(f"Unknown component kind: {kind!r}")
    return text, componentType


def parseNumbers(value: str, count: int) -> List[float]:
    parts = value.split(",")
    if len(parts) != count:
        raise argparse.ArgumentTypeError(f"Expected {count} comma-separated numbers, got {value!r}")
    try:
        return [float(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected numbers, got {value!r}")


def parseLatLng(value: str) -> Tuple[float, float]:
    lat, lng = parseNumbers(value, 2)
    return lat, lng


def parseBounds(value: str) -> Viewport:
    swLat, swLng, neLat, neLng = parseNumbers(value, 4)
    return Viewport.fromPairs((swLat, swLng), (neLat, neLng))


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Geocode - Google Geocoding API command line client, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )
    parser.add_argument("--language", help="Language of results (overrides config)")
    parser.add_argument(
        "--url-only",
        action="store_true",
        help="Print request URL instead of sending the request",
    )

    subparsers = parser.add_subparsers(dest="command")

    searchParser = subparsers.add_parser("search", help="Forward geocoding: address to coordinates")
    searchParser.add_argument("address", nargs="?", help="Free-form address")
    searchParser.add_argument(
        "--component",
        action="append",
        type=parseComponent,
        default=[],
        help="Component filter KIND:VALUE, e.g. country:Spain (can be specified multiple times)",
    )
    searchParser.add_argument("--bounds", type=parseBounds, help="Viewport bias: swLat,swLng,neLat,neLng")
    searchParser.add_argument("--region", help="Region bias as ccTLD code (overrides config)")

    reverseParser = subparsers.add_parser("reverse", help="Reverse geocoding: coordinates to address")
    reverseParser.add_argument("latlng", type=parseLatLng, help="Coordinates as LAT,LNG")

    lookupParser = subparsers.add_parser("lookup", help="Address for Google place ID")
    lookupParser.add_argument("placeId", help="Place ID")

    args = parser.parse_args(argv)
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dir_path) for dir_path in args.config_dir]

    if not args.print_config:
        if args.command is None:
            parser.error("command is required")
        if args.command == "search" and args.address is None and not args.component:
            parser.error("search needs an address or at least one --component")

    return args


def buildRequest(args: argparse.Namespace, apiKey: str, geocodeConfig: Dict[str, Any]) -> GeocodeRequest:
    """Build request from parsed arguments, command line wins over config"""
    language = args.language or geocodeConfig.get("language")

    match args.command:
        case "search":
            request = forSearch(apiKey, args.address, args.component)
            request = withBounds(request, args.bounds)
            request = withLanguage(request, language)
            return withRegion(request, args.region or geocodeConfig.get("region"))
        case "reverse":
            return reverseWithLanguage(reverseForLatLng(apiKey, args.latlng), language)
        case "lookup":
            return reverseWithLanguage(reverseForPlaceId(apiKey, args.placeId), language)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def responseToDict(response: GeocodeResponse) -> Dict[str, Any]:
    """Convert response into JSON-friendly dict using wire tokens"""

    def latLng(location) -> Dict[str, Any]:
        return {"lat": location.lat, "lng": location.lng}

    def viewport(box) -> Dict[str, Any]:
        return {"southwest": latLng(box.southwest), "northeast": latLng(box.northeast)}

    results = []
    for result in response.results:
        geometry: Dict[str, Any] = {
            "location": latLng(result.geometry.location),
            "location_type": locationTypeToToken(result.geometry.locationType),
            "viewport": viewport(result.geometry.viewport),
        }
        if result.geometry.bounds is not None:
            geometry["bounds"] = viewport(result.geometry.bounds)

        results.append(
            {
                "formatted_address": result.formattedAddress,
                "place_id": result.placeId,
                "types": [componentTypeToToken(t) for t in result.types],
                "partial_match": result.partialMatch,
                "geometry": geometry,
                "address_components": [
                    {
                        "long_name": component.longName,
                        "short_name": component.shortName,
                        "types": [componentTypeToToken(t) for t in component.types],
                    }
                    for component in result.addressComponents
                ],
            }
        )

    ret: Dict[str, Any] = {"status": str(response.status), "results": results}
    if response.errorMessage is not None:
        ret["error_message"] = response.errorMessage
    return ret


def prettyPrintConfig(config_manager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== Geocode Configuration ===")
    print()
    print(jsonDumps(config_manager.config, indent=2))
    print()
    print("=== Configuration loaded successfully, dood! ===")


async def runRequest(client: GoogleGeocodeClient, request: GeocodeRequest) -> Dict[str, Any]:
    response = await client.geocode(request)
    return responseToDict(response)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    configManager = ConfigManager(args.config, args.config_dir)
    initLogging(configManager.getLoggingConfig())

    if args.print_config:
        prettyPrintConfig(configManager)
        return 0

    geocodeConfig = configManager.getGeocodeConfig()
    request = buildRequest(args, configManager.getApiKey(), geocodeConfig)

    if args.url_only:
        print(buildUrl(request))
        return 0

    client = GoogleGeocodeClient(
        apiKey=request.apiKey,
        requestTimeout=int(geocodeConfig.get("request-timeout", 10)),
    )
    try:
        result = asyncio.run(runRequest(client, request))
    except GeocodeError as e:
        logger.error(f"Geocoding failed: {e}")
        return 1

    print(jsonDumps(result, indent=2, sort_keys=False))
    return 0 if result["status"] in ("OK", "ZERO_RESULTS") else 2


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(130)
