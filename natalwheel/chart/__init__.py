"""Birth chart records, catalogues and payload parsing."""

from __future__ import annotations

from .catalog import (
    ASPECT_TYPES,
    CELESTIAL_POINTS,
    HOUSE_MEANINGS,
    PLANET_INFO,
    ZODIAC_SIGNS,
    AspectType,
    ZodiacSign,
    aspect_type,
    canonical_point_key,
    sign_by_name,
    sign_for_longitude,
)
from .model import Aspect, BirthChartData, CelestialPosition, clean_aspects, validate_chart
from .schemas import BirthChartPayload, load_chart, load_chart_file
from .summary import (
    AspectSummary,
    PlanetDetail,
    aspect_summary,
    element_balance,
    modality_balance,
    planet_detail,
)

__all__ = [
    "ASPECT_TYPES",
    "CELESTIAL_POINTS",
    "HOUSE_MEANINGS",
    "PLANET_INFO",
    "ZODIAC_SIGNS",
    "Aspect",
    "AspectSummary",
    "AspectType",
    "BirthChartData",
    "BirthChartPayload",
    "CelestialPosition",
    "PlanetDetail",
    "ZodiacSign",
    "aspect_summary",
    "aspect_type",
    "canonical_point_key",
    "clean_aspects",
    "element_balance",
    "load_chart",
    "load_chart_file",
    "modality_balance",
    "planet_detail",
    "sign_by_name",
    "sign_for_longitude",
    "validate_chart",
]
