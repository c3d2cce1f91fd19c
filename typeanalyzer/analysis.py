"""ABOUTME: Runs a full type analysis for one Pokemon name.
ABOUTME: Fetches the Pokemon and its types, then computes the effectiveness report."""

import asyncio
import logging
from dataclasses import dataclass, field

import httpx

from typeanalyzer.core import EffectivenessReport, build_report, compute_effectiveness
from typeanalyzer.ingestion import create_client, fetch_all_damage_relations, fetch_creature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeAnalysis:
    """Everything the display layer shows for one Pokemon.

    Attributes:
        name: API name of the Pokemon.
        sprite: Sprite URL, None if the API has none.
        types: Type names in slot order.
        report: Weaknesses and resistances.
    """

    name: str
    sprite: str | None
    types: list[str] = field(default_factory=list)
    report: EffectivenessReport = field(default_factory=EffectivenessReport)


def normalize_query(text: str | None) -> str | None:
    """Trim and lower-case user input.

    Returns:
        The normalized identifier, or None if nothing was entered.
    """
    if text is None:
        return None
    query = text.strip().lower()
    return query or None


async def analyze_creature(
    query: str,
    client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> TypeAnalysis:
    """Look up a Pokemon and compute its type matchups.

    Args:
        query: Pokemon name as entered by the user.
        client: Optional httpx client for connection reuse.
        base_url: API base URL. Uses settings default if not provided.

    Returns:
        The completed analysis.

    Raises:
        ValueError: If the query is empty.
        CreatureNotFoundError: If the Pokemon doesn't exist.
        RelationDataUnavailableError: If any type lookup fails.
    """
    identifier = normalize_query(query)
    if identifier is None:
        raise ValueError("Query must not be empty")

    should_close_client = client is None
    if client is None:
        client = create_client()

    try:
        creature = await fetch_creature(identifier, client, base_url=base_url)
        relations = await fetch_all_damage_relations(creature.types, client)
    finally:
        if should_close_client:
            await client.aclose()

    report = build_report(compute_effectiveness(relations))
    logger.info(
        "Analyzed %s (%s): %d weaknesses, %d resistances",
        creature.name,
        "/".join(creature.type_names),
        len(report.weaknesses),
        len(report.resistances),
    )
    return TypeAnalysis(name=creature.name, sprite=creature.sprite, types=creature.type_names, report=report)


def run_analysis(query: str, base_url: str | None = None) -> TypeAnalysis:
    """Synchronous wrapper around `analyze_creature` for the CLI and UI."""
    return asyncio.run(analyze_creature(query, base_url=base_url))
