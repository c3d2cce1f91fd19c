# ABOUTME: Core package for the type effectiveness calculation.
# ABOUTME: Pure functions with no I/O: compute the map, then build the report.

from typeanalyzer.core.effectiveness import (
    DamageRelations,
    EffectivenessMap,
    compute_effectiveness,
)
from typeanalyzer.core.report import (
    EffectivenessReport,
    build_report,
    format_multiplier,
)

__all__ = [
    "DamageRelations",
    "EffectivenessMap",
    "EffectivenessReport",
    "build_report",
    "compute_effectiveness",
    "format_multiplier",
]
