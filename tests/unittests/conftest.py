"""Contains configurations for the test run."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

API = "https://pokeapi.test/api/v2"


def _named(*names: str) -> list[dict[str, str]]:
    return [{"name": name, "url": f"{API}/type/{name}/"} for name in names]


def _type_payload(double: list[str], half: list[str], none: list[str]) -> dict[str, Any]:
    return {
        "damage_relations": {
            "double_damage_from": _named(*double),
            "half_damage_from": _named(*half),
            "no_damage_from": _named(*none),
            "double_damage_to": [],
            "half_damage_to": [],
            "no_damage_to": [],
        }
    }


@pytest.fixture(scope="session")
def project_configs_folder() -> Path:
    """Returns the path to the shipped configs folder."""
    return Path(__file__).parents[2] / "typeanalyzer" / "configs"


@pytest.fixture
def api_base_url() -> str:
    """Base URL the stubbed API answers on."""
    return API


@pytest.fixture
def type_payloads() -> dict[str, dict[str, Any]]:
    """PokeAPI /type responses for the types used in tests."""
    return {
        "fire": _type_payload(
            double=["water", "rock", "ground"],
            half=["fire", "grass", "ice", "bug", "steel", "fairy"],
            none=[],
        ),
        "flying": _type_payload(
            double=["rock", "electric", "ice"],
            half=["fighting", "bug", "grass"],
            none=["ground"],
        ),
        "electric": _type_payload(
            double=["ground"],
            half=["flying", "steel", "electric"],
            none=[],
        ),
    }


@pytest.fixture
def pokemon_payloads() -> dict[str, dict[str, Any]]:
    """PokeAPI /pokemon responses for the Pokemon used in tests."""
    return {
        "charizard": {
            "name": "charizard",
            "sprites": {"front_default": "https://img.test/charizard.png"},
            "types": [
                # Deliberately out of slot order
                {"slot": 2, "type": {"name": "flying", "url": f"{API}/type/flying/"}},
                {"slot": 1, "type": {"name": "fire", "url": f"{API}/type/fire/"}},
            ],
        },
        "pikachu": {
            "name": "pikachu",
            "sprites": {"front_default": None},
            "types": [{"slot": 1, "type": {"name": "electric", "url": f"{API}/type/electric/"}}],
        },
        "missingno": {
            "name": "missingno",
            "sprites": {},
            "types": [{"slot": 1, "type": {"name": "bird", "url": f"{API}/type/bird/"}}],
        },
    }


@pytest.fixture
def mock_api(
    type_payloads: dict[str, dict[str, Any]],
    pokemon_payloads: dict[str, dict[str, Any]],
) -> Callable[..., httpx.AsyncClient]:
    """Factory for an httpx client answering from the payload fixtures.

    Unknown resources return 404. `fail_types` names types that return 500.
    Every requested path is appended to `client.requested`.
    """

    def factory(fail_types: tuple[str, ...] = ()) -> httpx.AsyncClient:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            parts = [part for part in request.url.path.split("/") if part]
            kind, name = parts[-2], parts[-1]
            if kind == "pokemon" and name in pokemon_payloads:
                return httpx.Response(200, json=pokemon_payloads[name])
            if kind == "type" and name in fail_types:
                return httpx.Response(500, text="boom")
            if kind == "type" and name in type_payloads:
                return httpx.Response(200, json=type_payloads[name])
            return httpx.Response(404, text="Not Found")

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.requested = requested  # type: ignore[attr-defined]
        return client

    return factory
