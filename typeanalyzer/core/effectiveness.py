# ABOUTME: Combines per-type damage relations into one effectiveness map.
# ABOUTME: Multipliers are exact Fractions so 0, 0.25, 0.5, 1, 2, 4 compare exactly.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any

DOUBLE_DAMAGE = Fraction(2)
HALF_DAMAGE = Fraction(1, 2)
NO_DAMAGE = Fraction(0)
NEUTRAL = Fraction(1)

EffectivenessMap = dict[str, Fraction]


@dataclass(frozen=True)
class DamageRelations:
    """How attacking types affect one defending type.

    Attributes:
        double_damage_from: Attacking types dealing 2x against this type.
        half_damage_from: Attacking types dealing 0.5x against this type.
        no_damage_from: Attacking types dealing 0x against this type.
    """

    double_damage_from: frozenset[str] = field(default_factory=frozenset)
    half_damage_from: frozenset[str] = field(default_factory=frozenset)
    no_damage_from: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_api(cls, damage_relations: Mapping[str, Any]) -> "DamageRelations":
        """Build from a PokeAPI `damage_relations` object.

        Only the three `*_damage_from` lists are read; each entry is a
        named resource like `{"name": "water", "url": "..."}`.

        Raises:
            KeyError: If a list entry has no name.
            TypeError: If a list is not iterable.
        """

        def names(key: str) -> frozenset[str]:
            return frozenset(entry["name"] for entry in damage_relations.get(key) or [])

        return cls(
            double_damage_from=names("double_damage_from"),
            half_damage_from=names("half_damage_from"),
            no_damage_from=names("no_damage_from"),
        )


def compute_effectiveness(relations_list: Iterable[DamageRelations]) -> EffectivenessMap:
    """Calculate the combined multiplier of every attacking type that any record mentions.

    Each record multiplies its double/half entries into the running value
    (default 1) and sets its no-damage entries to 0. A 0 stays 0 under any
    later multiplication, so the result does not depend on record order.

    Args:
        relations_list: One DamageRelations per defending type. May be empty.

    Returns:
        Mapping of attacking type to multiplier. Types no record mentions are absent (1x).
    """
    effectiveness: EffectivenessMap = {}

    for relations in relations_list:
        for atk_type in relations.double_damage_from:
            effectiveness[atk_type] = effectiveness.get(atk_type, NEUTRAL) * DOUBLE_DAMAGE
        for atk_type in relations.half_damage_from:
            effectiveness[atk_type] = effectiveness.get(atk_type, NEUTRAL) * HALF_DAMAGE
        for atk_type in relations.no_damage_from:
            effectiveness[atk_type] = NO_DAMAGE

    return effectiveness
