# ABOUTME: Turns an effectiveness map into sorted weakness and resistance lists.
# ABOUTME: Also formats multipliers the way the UI and CLI display them.

from collections.abc import Mapping
from dataclasses import dataclass
from fractions import Fraction

from typeanalyzer.core.effectiveness import NEUTRAL, NO_DAMAGE

TypeMultiplier = tuple[str, Fraction]


@dataclass(frozen=True)
class EffectivenessReport:
    """Weaknesses (>1x, strongest first) and resistances (<1x, immunities first)."""

    weaknesses: tuple[TypeMultiplier, ...] = ()
    resistances: tuple[TypeMultiplier, ...] = ()

    @property
    def immunities(self) -> tuple[str, ...]:
        """Attacking types that deal no damage."""
        return tuple(atk_type for atk_type, multiplier in self.resistances if multiplier == NO_DAMAGE)


def build_report(effectiveness: Mapping[str, Fraction]) -> EffectivenessReport:
    """Partition and sort an effectiveness map.

    Neutral (exactly 1x) entries are dropped. Ties on multiplier are ordered
    by type name so output is reproducible.

    Args:
        effectiveness: Mapping of attacking type to multiplier.

    Returns:
        The report. An empty map gives an empty report.
    """
    weaknesses = sorted(
        ((atk_type, multiplier) for atk_type, multiplier in effectiveness.items() if multiplier > NEUTRAL),
        key=lambda item: (-item[1], item[0]),
    )
    resistances = sorted(
        ((atk_type, multiplier) for atk_type, multiplier in effectiveness.items() if multiplier < NEUTRAL),
        key=lambda item: (item[1], item[0]),
    )
    return EffectivenessReport(weaknesses=tuple(weaknesses), resistances=tuple(resistances))


def format_multiplier(multiplier: Fraction | float) -> str:
    """Format a multiplier for display.

    Returns:
        "Immune" for 0, otherwise e.g. "4x damage", "0.25x damage".
    """
    if multiplier == 0:
        return "Immune"
    value = Fraction(multiplier)
    if value.denominator == 1:
        return f"{value.numerator}x damage"
    # Multipliers are powers of two, so the float repr is exact and shortest.
    return f"{float(value):g}x damage"
