"""
Tests for geocode command line entry point.

Covers argument parsing, request building from arguments and config,
JSON output and exit codes.
"""

import argparse
import json
from unittest.mock import AsyncMock, patch

import pytest

import main
from lib.google_geocode import (
    ENDPOINT,
    AddressAndComponents,
    ComponentsOnly,
    ComponentType,
    GeocodeTransportError,
    ReverseRequest,
    Viewport,
    parseResponse,
)

RESPONSE_BODY = {
    "results": [
        {
            "address_components": [{"long_name": "Spain", "short_name": "ES", "types": ["country", "mystery"]}],
            "formatted_address": "Spain",
            "geometry": {
                "location": {"lat": 40.463667, "lng": -3.74922},
                "location_type": "APPROXIMATE",
                "viewport": {
                    "northeast": {"lat": 45.244, "lng": 5.098},
                    "southwest": {"lat": 35.173, "lng": -12.524},
                },
            },
            "place_id": "ChIJi7xhMnjjQgwR7KNoB5Qs7KY",
            "types": ["country", "political"],
        }
    ],
    "status": "OK",
}


@pytest.fixture
def configDir(tmp_path, monkeypatch):
    """Work in temp dir with minimal config.toml"""
    (tmp_path / "config.toml").write_text('[geocode]\napi-key = "cli_key"\nlanguage = "en"\nregion = "us"\n')
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestArguments:
    """Test command line parsing"""

    def testParseComponent(self):
        assert main.parseComponent("country:Spain") == ("Spain", ComponentType.COUNTRY)
        assert main.parseComponent("locality:Santa Cruz: Tenerife") == ("Santa Cruz: Tenerife", ComponentType.LOCALITY)

    @pytest.mark.parametrize("value", ["Spain", "country:", "galaxy:Milky Way"])
    def testParseComponentInvalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            main.parseComponent(value)

    def testParseBounds(self):
        assert main.parseBounds("34.17,-118.60,34.24,-118.50") == Viewport.fromPairs((34.17, -118.60), (34.24, -118.50))

    def testParseLatLngInvalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            main.parseLatLng("1,2,3")
        with pytest.raises(argparse.ArgumentTypeError):
            main.parseLatLng("north,east")

    def testCommandRequired(self):
        with pytest.raises(SystemExit):
            main.parse_arguments([])

    def testSearchNeedsSubject(self):
        with pytest.raises(SystemExit):
            main.parse_arguments(["search"])


class TestBuildRequest:
    """Test request building from arguments and config"""

    def testSearchWithComponents(self):
        args = main.parse_arguments(["search", "Toledo", "--component", "country:Spain", "--region", "es"])

        request = main.buildRequest(args, "k", {"language": "en", "region": "us"})

        assert request.subject == AddressAndComponents(address="Toledo", components={"Spain": ComponentType.COUNTRY})
        assert request.language == "en"
        assert request.region == "es"

    def testSearchComponentsOnly(self):
        args = main.parse_arguments(["search", "--component", "country:Spain"])

        request = main.buildRequest(args, "k", {})

        assert request.subject == ComponentsOnly(components={"Spain": ComponentType.COUNTRY})

    def testReverseLanguageFromArgs(self):
        args = main.parse_arguments(["--language", "ru", "reverse", "52.5443,103.8882"])

        request = main.buildRequest(args, "k", {"language": "en"})

        assert isinstance(request, ReverseRequest)
        assert request.language == "ru"


def testResponseToDict():
    """Test JSON output uses wire tokens, OTHER becomes empty string"""
    result = main.responseToDict(parseResponse(RESPONSE_BODY))

    assert result["status"] == "OK"
    assert result["results"][0]["types"] == ["country", "political"]
    assert result["results"][0]["address_components"][0]["types"] == ["country", ""]
    assert result["results"][0]["geometry"]["location_type"] == "APPROXIMATE"
    assert "error_message" not in result


def testMainUrlOnly(configDir, capsys):
    """Test --url-only prints URL without sending anything, dood!"""
    exitCode = main.main(["--url-only", "search", "77 Battery St."])

    assert exitCode == 0
    assert capsys.readouterr().out.strip() == f"{ENDPOINT}?key=cli_key&address=77+Battery+St.&language=en&region=us"


def testMainSendsRequest(configDir, capsys):
    with patch.object(
        main.GoogleGeocodeClient, "geocode", new=AsyncMock(return_value=parseResponse(RESPONSE_BODY))
    ) as geocode:
        exitCode = main.main(["lookup", "ChIJi7xhMnjjQgwR7KNoB5Qs7KY"])

    assert exitCode == 0
    geocode.assert_awaited_once()
    output = json.loads(capsys.readouterr().out)
    assert output["results"][0]["place_id"] == "ChIJi7xhMnjjQgwR7KNoB5Qs7KY"


def testMainNonOkStatus(configDir, capsys):
    denied = parseResponse({"status": "REQUEST_DENIED", "results": [], "error_message": "Bad key"})

    with patch.object(main.GoogleGeocodeClient, "geocode", new=AsyncMock(return_value=denied)):
        exitCode = main.main(["search", "Test"])

    assert exitCode == 2
    assert json.loads(capsys.readouterr().out)["error_message"] == "Bad key"


def testMainTransportError(configDir):
    with patch.object(
        main.GoogleGeocodeClient, "geocode", new=AsyncMock(side_effect=GeocodeTransportError("boom", 500))
    ):
        exitCode = main.main(["search", "Test"])

    assert exitCode == 1
