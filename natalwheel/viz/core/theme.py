"""Colour and stroke tokens for wheel renderers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field

__all__ = ["DARK_THEME", "LIGHT_THEME", "ThemeManager", "WheelTheme", "default_manager"]


@dataclass(frozen=True)
class WheelTheme:
    """Named palette used when drawing a :class:`RenderModel`.

    Body, sign and aspect colours come from the chart catalogue; the theme
    only covers the chrome around them.
    """

    identifier: str
    name: str
    colors: Mapping[str, str] = field(default_factory=dict)
    strokes: Mapping[str, float] = field(default_factory=dict)
    sizes: Mapping[str, float] = field(default_factory=dict)

    def color(self, role: str, default: str = "#888888") -> str:
        return self.colors.get(role, default)

    def stroke(self, token: str, default: float = 1.0) -> float:
        return float(self.strokes.get(token, default))

    def size(self, token: str, default: float = 12.0) -> float:
        return float(self.sizes.get(token, default))

    def to_payload(self) -> dict[str, object]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "colors": dict(self.colors),
            "strokes": dict(self.strokes),
            "sizes": dict(self.sizes),
        }


class ThemeManager:
    """Registry of :class:`WheelTheme` instances keyed by identifier."""

    def __init__(self, themes: Iterable[WheelTheme] | None = None) -> None:
        self._themes: MutableMapping[str, WheelTheme] = {}
        for theme in themes or ():
            self.register(theme)

    def register(self, theme: WheelTheme) -> None:
        if theme.identifier in self._themes:
            raise ValueError(f"Theme '{theme.identifier}' already registered")
        self._themes[theme.identifier] = theme

    def get(self, identifier: str) -> WheelTheme:
        try:
            return self._themes[identifier]
        except KeyError as exc:
            raise KeyError(f"Unknown theme '{identifier}'") from exc

    def load_from_payload(self, payload: Mapping[str, object]) -> WheelTheme:
        identifier = str(payload.get("identifier"))
        theme = WheelTheme(
            identifier=identifier,
            name=str(payload.get("name", identifier)),
            colors={str(k): str(v) for k, v in _section(payload, "colors").items()},
            strokes={str(k): float(v) for k, v in _section(payload, "strokes").items()},  # type: ignore[arg-type]
            sizes={str(k): float(v) for k, v in _section(payload, "sizes").items()},  # type: ignore[arg-type]
        )
        self._themes[identifier] = theme
        return theme

    def list_themes(self) -> list[str]:
        return sorted(self._themes)


def _section(payload: Mapping[str, object], name: str) -> Mapping[str, object]:
    value = payload.get(name)
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    raise TypeError(f"theme section '{name}' must be a mapping")


_STROKES = {"ring": 2.0, "wedge": 1.0, "house": 1.0, "house_heavy": 2.0, "marker": 2.0}
_SIZES = {
    "sign_glyph": 16.0,
    "planet_glyph": 14.0,
    "planet_glyph_emphasis": 16.0,
    "house_label": 10.0,
    "center_title": 14.0,
    "center_subtitle": 11.0,
    "retrograde": 10.0,
}

DARK_THEME = WheelTheme(
    identifier="dark",
    name="Dark",
    colors={
        "background": "#0d1117",
        "rim": "#30363d",
        "foreground": "#f0f6fc",
        "muted": "#8b949e",
        "marker_fill": "#161b22",
        "retrograde": "#FF6B6B",
    },
    strokes=_STROKES,
    sizes=_SIZES,
)

LIGHT_THEME = WheelTheme(
    identifier="light",
    name="Light",
    colors={
        "background": "#ffffff",
        "rim": "#d0d7de",
        "foreground": "#1f2328",
        "muted": "#656d76",
        "marker_fill": "#f6f8fa",
        "retrograde": "#cf222e",
    },
    strokes=_STROKES,
    sizes=_SIZES,
)


def default_manager() -> ThemeManager:
    return ThemeManager((DARK_THEME, LIGHT_THEME))
