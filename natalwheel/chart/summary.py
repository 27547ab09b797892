"""Read-only summaries shown next to the wheel (detail panel, balances)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .catalog import (
    ELEMENTS,
    HOUSE_MEANINGS,
    MODALITIES,
    PLANET_INFO,
    HouseMeaning,
    aspect_type,
)
from .model import Aspect, BirthChartData

__all__ = [
    "AspectSummary",
    "PlanetAspect",
    "PlanetDetail",
    "aspect_summary",
    "element_balance",
    "modality_balance",
    "planet_detail",
]


@dataclass(frozen=True)
class AspectSummary:
    harmonious: int
    challenging: int
    neutral: int

    @property
    def total(self) -> int:
        return self.harmonious + self.challenging + self.neutral


def aspect_summary(aspects: Iterable[Aspect]) -> AspectSummary:
    """Count aspects by nature; unknown aspect types are not counted."""

    counts = {"harmonious": 0, "challenging": 0, "neutral": 0}
    for aspect in aspects:
        definition = aspect_type(aspect.type)
        if definition is not None:
            counts[definition.nature] += 1
    return AspectSummary(**counts)


def element_balance(chart: BirthChartData) -> dict[str, int]:
    balance = {element: 0 for element in ELEMENTS}
    for position in chart.planets.values():
        balance[position.sign.element] += 1
    return balance


def modality_balance(chart: BirthChartData) -> dict[str, int]:
    balance = {modality: 0 for modality in MODALITIES}
    for position in chart.planets.values():
        balance[position.sign.modality] += 1
    return balance


@dataclass(frozen=True)
class PlanetAspect:
    other: str
    type: str
    symbol: str
    nature: str
    orb: float
    applying: bool


@dataclass(frozen=True)
class PlanetDetail:
    key: str
    name: str
    symbol: str
    position_label: str
    sign: str
    sign_degree: float
    retrograde: bool
    house: int | None
    house_meaning: HouseMeaning | None
    aspects: tuple[PlanetAspect, ...]


def planet_detail(chart: BirthChartData, key: str) -> PlanetDetail:
    """Collect what the detail panel shows for the selected body.

    Raises
    ------
    KeyError
        If ``key`` is not present in ``chart.planets``.
    """

    position = chart.planets[key]
    info = PLANET_INFO[key]
    rows: list[PlanetAspect] = []
    for aspect in chart.aspects:
        if not aspect.involves(key):
            continue
        definition = aspect_type(aspect.type)
        if definition is None:
            continue
        rows.append(
            PlanetAspect(
                other=aspect.other(key),
                type=definition.name,
                symbol=definition.symbol,
                nature=definition.nature,
                orb=float(aspect.orb),
                applying=aspect.applying,
            )
        )
    meaning = HOUSE_MEANINGS[position.house - 1] if position.house else None
    return PlanetDetail(
        key=key,
        name=info.name,
        symbol=info.symbol,
        position_label=position.degree_label(),
        sign=position.sign.name,
        sign_degree=position.sign_degree,
        retrograde=bool(position.retrograde),
        house=position.house,
        house_meaning=meaning,
        aspects=tuple(rows),
    )
