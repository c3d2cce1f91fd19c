"""ABOUTME: Ingestion module for fetching data from PokeAPI.
ABOUTME: Resolves a Pokemon's types and each type's damage relations."""

from typeanalyzer.ingestion.fetcher import (
    CreatureRecord,
    TypeRef,
    create_client,
    fetch_all_damage_relations,
    fetch_creature,
    fetch_damage_relations,
    parse_creature,
)

__all__ = [
    "CreatureRecord",
    "TypeRef",
    "create_client",
    "fetch_all_damage_relations",
    "fetch_creature",
    "fetch_damage_relations",
    "parse_creature",
]
