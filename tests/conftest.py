"""Pytest configuration and fixtures."""

import copy
import json

import pytest

from modeltext.model import model_from_dict
from modeltext.text.cache import ScanCache, reset_default_cache

WEATHER_DOCUMENT = {
    "smithy": "2.0",
    "shapes": {
        "example.weather#Weather": {
            "type": "service",
            "traits": {
                "smithy.api#documentation": "Provides weather forecasts.",
                "smithy.api#title": "Weather Service",
            },
        },
        "example.weather#Forecast": {
            "type": "structure",
            "members": {
                "city": {
                    "target": "smithy.api#String",
                    "traits": {"smithy.api#required": {}},
                },
                "chanceOfRain": {
                    "target": "smithy.api#Float",
                    "traits": {"documentation": "Chance of rain, master value."},
                },
            },
            "traits": {
                "smithy.api#references": [
                    {"resource": "example.weather#City", "rel": "forecast"}
                ],
                "example.weather#tags": {"owners": ["blue-team", "red-team"], "tier": 1},
            },
        },
        "example.weather#tags": {
            "type": "structure",
            "traits": {"smithy.api#trait": {}},
        },
        "smithy.api#String": {
            "type": "string",
            "traits": {"smithy.api#documentation": "Prelude string"},
        },
    },
}


@pytest.fixture(autouse=True)
def fresh_default_cache():
    """Never let one test's process-wide cache leak into another."""
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture
def scenario_model():
    """Foo with member bar carrying {"greeting": "hi", "list": ["a", "b"]}."""
    return model_from_dict({
        "shapes": {
            "example#Foo": {
                "type": "structure",
                "members": {
                    "bar": {
                        "target": "smithy.api#String",
                        "traits": {"example#greet": {"greeting": "hi", "list": ["a", "b"]}},
                    }
                },
            }
        }
    })


@pytest.fixture
def weather_document():
    return copy.deepcopy(WEATHER_DOCUMENT)


@pytest.fixture
def weather_model(weather_document):
    return model_from_dict(weather_document)


@pytest.fixture
def cache():
    return ScanCache(max_entries=8)


@pytest.fixture
def write_model(tmp_path):
    """Write a JSON AST document to tmp_path and return its path."""

    def _write(document, name="model.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
