"""Static catalogues for signs, celestial points, aspect types and houses.

Everything in this module is immutable and defined once at import.  The
tuples are ordered: :data:`CELESTIAL_POINTS` in particular fixes the
enumeration order used when markers are placed around the wheel.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Literal

__all__ = [
    "ASPECT_TYPES",
    "AspectType",
    "CELESTIAL_POINTS",
    "CELESTIAL_POINT_ALIASES",
    "ELEMENTS",
    "HOUSE_MEANINGS",
    "HouseMeaning",
    "MODALITIES",
    "PLANET_INFO",
    "PlanetInfo",
    "ZODIAC_SIGNS",
    "ZodiacSign",
    "aspect_type",
    "canonical_point_key",
    "sign_by_name",
    "sign_for_longitude",
]

Element = Literal["fire", "earth", "air", "water"]
Modality = Literal["cardinal", "fixed", "mutable"]
Nature = Literal["harmonious", "challenging", "neutral"]

ELEMENTS: Final[tuple[str, ...]] = ("fire", "earth", "air", "water")
MODALITIES: Final[tuple[str, ...]] = ("cardinal", "fixed", "mutable")


@dataclass(frozen=True)
class ZodiacSign:
    """One of the twelve 30° ecliptic segments."""

    name: str
    index: int
    element: Element
    modality: Modality
    symbol: str
    color: str

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def start(self) -> float:
        return 30.0 * self.index

    @property
    def end(self) -> float:
        return 30.0 * (self.index + 1)


ZODIAC_SIGNS: Final[tuple[ZodiacSign, ...]] = (
    ZodiacSign("aries", 0, "fire", "cardinal", "♈", "#FF4136"),
    ZodiacSign("taurus", 1, "earth", "fixed", "♉", "#2ECC40"),
    ZodiacSign("gemini", 2, "air", "mutable", "♊", "#FFDC00"),
    ZodiacSign("cancer", 3, "water", "cardinal", "♋", "#7FDBFF"),
    ZodiacSign("leo", 4, "fire", "fixed", "♌", "#FF851B"),
    ZodiacSign("virgo", 5, "earth", "mutable", "♍", "#3D9970"),
    ZodiacSign("libra", 6, "air", "cardinal", "♎", "#F012BE"),
    ZodiacSign("scorpio", 7, "water", "fixed", "♏", "#85144b"),
    ZodiacSign("sagittarius", 8, "fire", "mutable", "♐", "#B10DC9"),
    ZodiacSign("capricorn", 9, "earth", "cardinal", "♑", "#111111"),
    ZodiacSign("aquarius", 10, "air", "fixed", "♒", "#0074D9"),
    ZodiacSign("pisces", 11, "water", "mutable", "♓", "#39CCCC"),
)

_SIGNS_BY_NAME: Mapping[str, ZodiacSign] = MappingProxyType(
    {sign.name: sign for sign in ZODIAC_SIGNS}
)


def sign_by_name(name: str) -> ZodiacSign:
    """Return the :class:`ZodiacSign` called ``name`` (case-insensitive)."""

    try:
        return _SIGNS_BY_NAME[name.strip().lower()]
    except KeyError as exc:
        raise KeyError(f"Unknown zodiac sign '{name}'") from exc


def sign_for_longitude(longitude: float) -> ZodiacSign:
    """Return the sign owning ``longitude`` (``floor(longitude / 30)``)."""

    return ZODIAC_SIGNS[int((longitude % 360.0) // 30.0) % 12]


# Fixed enumeration order: sun first, chiron last.
CELESTIAL_POINTS: Final[tuple[str, ...]] = (
    "sun",
    "moon",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "pluto",
    "north_node",
    "chiron",
)

CELESTIAL_POINT_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "northnode": "north_node",
        "north node": "north_node",
        "true_node": "north_node",
        "mean_node": "north_node",
    }
)


def canonical_point_key(value: str) -> str | None:
    """Return the canonical point key for ``value`` or ``None`` when unknown."""

    lowered = str(value).strip().lower()
    lowered = CELESTIAL_POINT_ALIASES.get(lowered, lowered)
    return lowered if lowered in CELESTIAL_POINTS else None


@dataclass(frozen=True)
class PlanetInfo:
    name: str
    symbol: str
    color: str


PLANET_INFO: Final[Mapping[str, PlanetInfo]] = MappingProxyType(
    {
        "sun": PlanetInfo("Sun", "☉", "#FFD700"),
        "moon": PlanetInfo("Moon", "☽", "#C0C0C0"),
        "mercury": PlanetInfo("Mercury", "☿", "#B5B5B5"),
        "venus": PlanetInfo("Venus", "♀", "#FFB6C1"),
        "mars": PlanetInfo("Mars", "♂", "#FF4500"),
        "jupiter": PlanetInfo("Jupiter", "♃", "#FFA500"),
        "saturn": PlanetInfo("Saturn", "♄", "#8B8970"),
        "uranus": PlanetInfo("Uranus", "♅", "#40E0D0"),
        "neptune": PlanetInfo("Neptune", "♆", "#1E90FF"),
        "pluto": PlanetInfo("Pluto", "♇", "#8B0000"),
        "north_node": PlanetInfo("North Node", "☊", "#9370DB"),
        "chiron": PlanetInfo("Chiron", "⚷", "#808000"),
    }
)


@dataclass(frozen=True)
class AspectType:
    """Canonical aspect definition with its fixed line style."""

    name: str
    angle: float
    nature: Nature
    symbol: str
    color: str
    label: str
    dash_array: str | None = None

    @property
    def style(self) -> str:
        return "dashed" if self.dash_array else "solid"


ASPECT_TYPES: Final[Mapping[str, AspectType]] = MappingProxyType(
    {
        "conjunction": AspectType("conjunction", 0.0, "neutral", "☌", "#FFD700", "Conjunction"),
        "opposition": AspectType(
            "opposition", 180.0, "challenging", "☍", "#FF4500", "Opposition", "5,5"
        ),
        "trine": AspectType("trine", 120.0, "harmonious", "△", "#32CD32", "Trine"),
        "square": AspectType("square", 90.0, "challenging", "□", "#DC143C", "Square", "3,3"),
        "sextile": AspectType("sextile", 60.0, "harmonious", "⚹", "#4169E1", "Sextile"),
        "quincunx": AspectType("quincunx", 150.0, "challenging", "⚻", "#9370DB", "Quincunx"),
        "semisextile": AspectType(
            "semisextile", 30.0, "neutral", "⚺", "#20B2AA", "Semi-sextile"
        ),
    }
)


def aspect_type(name: str) -> AspectType | None:
    """Return the aspect definition for ``name``; tolerant of ``semi-sextile``."""

    lowered = str(name).strip().lower().replace("-", "").replace("_", "")
    return ASPECT_TYPES.get(lowered)


@dataclass(frozen=True)
class HouseMeaning:
    house: int
    name: str
    keywords: tuple[str, ...]


HOUSE_MEANINGS: Final[tuple[HouseMeaning, ...]] = (
    HouseMeaning(1, "Self", ("identity", "appearance", "first impressions", "new beginnings")),
    HouseMeaning(2, "Resources", ("money", "possessions", "values", "self-worth")),
    HouseMeaning(3, "Communication", ("siblings", "learning", "short trips", "neighbors")),
    HouseMeaning(4, "Home", ("family", "roots", "mother", "private life")),
    HouseMeaning(5, "Creativity", ("romance", "children", "play", "self-expression")),
    HouseMeaning(6, "Health", ("daily routine", "work", "service", "wellness")),
    HouseMeaning(7, "Partnership", ("marriage", "contracts", "open enemies", "cooperation")),
    HouseMeaning(8, "Transformation", ("death", "rebirth", "shared resources", "intimacy")),
    HouseMeaning(9, "Philosophy", ("travel", "higher learning", "beliefs", "expansion")),
    HouseMeaning(10, "Career", ("public image", "achievements", "father", "authority")),
    HouseMeaning(11, "Community", ("friends", "groups", "hopes", "social causes")),
    HouseMeaning(12, "Spirituality", ("subconscious", "secrets", "karma", "endings")),
)
