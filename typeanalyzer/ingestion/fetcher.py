"""ABOUTME: Fetches Pokemon and type damage relations from PokeAPI.
ABOUTME: Type lookups run concurrently and fail as a whole if any one fails."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from typeanalyzer.core.effectiveness import DamageRelations
from typeanalyzer.exceptions import CreatureNotFoundError, RelationDataUnavailableError
from typeanalyzer.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeRef:
    """A named link to a type resource."""

    name: str
    url: str


@dataclass(frozen=True)
class CreatureRecord:
    """The parts of a PokeAPI pokemon resource the analyzer needs.

    Attributes:
        name: API name of the Pokemon (e.g., "charizard").
        sprite: URL of the default front sprite, None if the API has none.
        types: Types in slot order.
    """

    name: str
    sprite: str | None
    types: list[TypeRef] = field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        """Type names in slot order."""
        return [type_ref.name for type_ref in self.types]


def create_client() -> httpx.AsyncClient:
    """Create an httpx client configured from settings."""
    return httpx.AsyncClient(follow_redirects=True, timeout=settings.HTTP_TIMEOUT)


def parse_creature(payload: dict[str, Any]) -> CreatureRecord:
    """Parse a /pokemon/{name} response body.

    Args:
        payload: Decoded JSON body.

    Returns:
        Parsed CreatureRecord with types sorted by slot.

    Raises:
        KeyError: If required fields are missing.
    """
    slots = sorted(payload["types"], key=lambda entry: entry.get("slot", 0))
    types = [TypeRef(name=entry["type"]["name"], url=entry["type"]["url"]) for entry in slots]
    sprites = payload.get("sprites") or {}
    return CreatureRecord(name=payload["name"], sprite=sprites.get("front_default"), types=types)


async def fetch_creature(
    identifier: str,
    client: httpx.AsyncClient,
    base_url: str | None = None,
) -> CreatureRecord:
    """Fetch a Pokemon by name or id.

    Args:
        identifier: Normalized (trimmed, lower-case) Pokemon name or id.
        client: httpx client to use.
        base_url: API base URL. Uses settings default if not provided.

    Returns:
        The Pokemon's name, sprite and types.

    Raises:
        CreatureNotFoundError: If the identifier doesn't resolve. Connection
            failures carry the underlying error instead of the spelling hint.
    """
    if base_url is None:
        base_url = settings.API_BASE_URL

    url = f"{base_url.rstrip('/')}/pokemon/{identifier}"
    logger.debug("Fetching pokemon %s", url)

    try:
        response = await client.get(url)
        response.raise_for_status()
        return parse_creature(response.json())
    except httpx.TransportError as e:
        logger.warning("Pokemon source unreachable for '%s': %s", identifier, e)
        raise CreatureNotFoundError(identifier, reason=str(e) or type(e).__name__) from e
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, TypeError) as e:
        logger.warning("Lookup of pokemon '%s' failed: %s", identifier, e)
        raise CreatureNotFoundError(identifier) from e


async def fetch_damage_relations(type_ref: TypeRef, client: httpx.AsyncClient) -> DamageRelations:
    """Fetch the damage relations of a single type.

    Args:
        type_ref: Type name and resource URL, as listed on the Pokemon.
        client: httpx client to use.

    Returns:
        The type's damage relations.

    Raises:
        RelationDataUnavailableError: If the request fails or the body is malformed.
    """
    logger.debug("Fetching type %s", type_ref.url)

    try:
        response = await client.get(type_ref.url)
        response.raise_for_status()
        return DamageRelations.from_api(response.json()["damage_relations"])
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Lookup of type '%s' failed: %s", type_ref.name, e)
        raise RelationDataUnavailableError(type_ref.name, str(e) or type(e).__name__) from e


async def fetch_all_damage_relations(
    type_refs: Sequence[TypeRef],
    client: httpx.AsyncClient,
) -> list[DamageRelations]:
    """Fetch the damage relations of all types concurrently.

    Args:
        type_refs: Types to look up.
        client: httpx client shared by all requests.

    Returns:
        One DamageRelations per type, in the order of `type_refs`.

    Raises:
        RelationDataUnavailableError: If any lookup fails. Remaining lookups are
            cancelled and no partial list is returned.
    """
    tasks = [asyncio.create_task(fetch_damage_relations(type_ref, client)) for type_ref in type_refs]
    try:
        return list(await asyncio.gather(*tasks))
    except RelationDataUnavailableError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
