"""Top-level wheel controller producing drawable render models.

The controller owns one :class:`SelectionStateMachine` and a placement
cache.  Marker placement depends on chart data only, so it is recomputed
when the planets change and reused while the user clicks and hovers;
aspect filtering runs again for every render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..chart.catalog import PLANET_INFO, sign_by_name
from ..chart.model import Aspect, BirthChartData, clean_aspects, validate_chart
from ..config.settings import Settings, default_settings
from ..errors import InvalidChartData
from ..viz.aspects import AspectLine, build_aspect_lines
from ..viz.layout import WheelLayout
from ..viz.placement import CollisionPlacer, PlacedMarker
from ..viz.rings import HouseWedge, ZodiacWedge, build_house_ring, build_zodiac_ring
from .state import InteractionState, SelectionStateMachine

LOG = logging.getLogger(__name__)

__all__ = ["CenterLabel", "InteractionController", "MarkerView", "RenderModel"]


@dataclass(frozen=True)
class MarkerView:
    key: str
    name: str
    symbol: str
    color: str
    x: float
    y: float
    longitude: float
    adjusted_longitude: float
    retrograde: bool
    emphasized: bool
    selected: bool
    hovered: bool
    degree_label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "symbol": self.symbol,
            "color": self.color,
            "x": self.x,
            "y": self.y,
            "longitude": self.longitude,
            "adjusted_longitude": self.adjusted_longitude,
            "retrograde": self.retrograde,
            "emphasized": self.emphasized,
            "selected": self.selected,
            "hovered": self.hovered,
            "degree_label": self.degree_label,
        }


@dataclass(frozen=True)
class CenterLabel:
    text: str
    subtitle: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "subtitle": self.subtitle}


@dataclass(frozen=True)
class RenderModel:
    """Everything a drawing surface needs for one frame."""

    markers: tuple[MarkerView, ...]
    zodiac_wedges: tuple[ZodiacWedge, ...]
    house_wedges: tuple[HouseWedge, ...] | None
    aspect_lines: tuple[AspectLine, ...]
    center_label: CenterLabel
    layout: WheelLayout = field(default_factory=WheelLayout)
    selected: str | None = None
    hovered: str | None = None

    def marker(self, key: str) -> MarkerView:
        for marker in self.markers:
            if marker.key == key:
                return marker
        raise KeyError(key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "layout": self.layout.to_dict(),
            "selected": self.selected,
            "hovered": self.hovered,
            "markers": [marker.to_dict() for marker in self.markers],
            "zodiac_wedges": [
                {
                    "sign": wedge.sign,
                    "symbol": wedge.symbol,
                    "start": wedge.start,
                    "end": wedge.end,
                    "path_points": [list(point) for point in wedge.path_points],
                    "path": wedge.path,
                    "label_pos": list(wedge.label_pos),
                }
                for wedge in self.zodiac_wedges
            ],
            "house_wedges": None
            if self.house_wedges is None
            else [
                {
                    "house_number": wedge.house_number,
                    "cusp": wedge.cusp,
                    "line": [list(point) for point in wedge.line],
                    "label_pos": list(wedge.label_pos),
                    "heavy": wedge.heavy,
                }
                for wedge in self.house_wedges
            ],
            "aspect_lines": [line.to_dict() for line in self.aspect_lines],
            "center_label": self.center_label.to_dict(),
        }


def center_label_for(chart: BirthChartData) -> CenterLabel:
    sun = sign_by_name(chart.sun_sign)
    subtitle = None
    if chart.rising_sign:
        subtitle = f"Rising: {sign_by_name(chart.rising_sign).symbol}"
    return CenterLabel(text=f"{sun.symbol} {sun.label}", subtitle=subtitle)


class InteractionController:
    """Own interaction state and turn chart data into :class:`RenderModel`."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        layout: WheelLayout | None = None,
    ) -> None:
        self.settings = settings or default_settings()
        self.layout = layout or WheelLayout.from_settings(self.settings)
        self.selection = SelectionStateMachine()
        self.chart: BirthChartData | None = None
        self.show_aspects = self.settings.rendering.show_aspects
        self.show_houses = self.settings.rendering.show_houses
        self.placement_runs = 0
        self._placer = CollisionPlacer(
            self.layout.planet_radius,
            self.layout.center,
            min_separation=self.settings.placement.min_separation,
            step=self.settings.placement.step,
        )
        self._planets_ref: object | None = None
        self._placement_key: tuple[tuple[str, float], ...] | None = None
        self._markers: tuple[PlacedMarker, ...] = ()
        self._aspects_ref: object | None = None
        self._aspects: tuple[Aspect, ...] = ()
        self._model: RenderModel | None = None

    # State ---------------------------------------------------------------
    @property
    def state(self) -> InteractionState:
        return self.selection.state

    # Cached derivations --------------------------------------------------
    def placements(self, chart: BirthChartData) -> tuple[PlacedMarker, ...]:
        """Return placed markers, recomputing only when the planets changed."""

        if chart.planets is self._planets_ref:
            return self._markers
        ordered = tuple((key, float(pos.longitude)) for key, pos in chart.ordered_planets())
        if ordered != self._placement_key:
            self._markers = self._placer.place(ordered)
            self._placement_key = ordered
            self.placement_runs += 1
        self._planets_ref = chart.planets
        return self._markers

    def _clean_aspects(self, chart: BirthChartData) -> tuple[Aspect, ...]:
        if chart.aspects is not self._aspects_ref:
            self._aspects = clean_aspects(chart.aspects)
            self._aspects_ref = chart.aspects
        return self._aspects

    # Rendering -----------------------------------------------------------
    def render(
        self,
        chart: BirthChartData,
        show_aspects: bool = True,
        show_houses: bool = True,
    ) -> RenderModel:
        """Build the render model for ``chart`` under the current state.

        Raises
        ------
        InvalidChartData
            If the chart fails boundary validation; nothing is drawn.
        """

        validate_chart(chart)
        placed = self.placements(chart)
        by_key = {marker.key: marker for marker in placed}
        state = self.selection.state
        markers = tuple(self._marker_view(chart, marker, state) for marker in placed)
        zodiac = build_zodiac_ring(self.layout, chart.ascendant_deg)
        houses = build_house_ring(self.layout, chart.houses) if show_houses else None
        lines = build_aspect_lines(
            self._clean_aspects(chart),
            by_key,
            self.layout,
            selected=state.selected,
            hovered=state.hovered,
            show_aspects=show_aspects,
        )
        return RenderModel(
            markers=markers,
            zodiac_wedges=zodiac,
            house_wedges=houses,
            aspect_lines=lines,
            center_label=center_label_for(chart),
            layout=self.layout,
            selected=state.selected,
            hovered=state.hovered,
        )

    def _marker_view(
        self, chart: BirthChartData, marker: PlacedMarker, state: InteractionState
    ) -> MarkerView:
        position = chart.planets[marker.key]
        info = PLANET_INFO[marker.key]
        selected = state.selected == marker.key
        hovered = state.hovered == marker.key
        return MarkerView(
            key=marker.key,
            name=info.name,
            symbol=info.symbol,
            color=info.color,
            x=marker.x,
            y=marker.y,
            longitude=marker.longitude,
            adjusted_longitude=marker.adjusted_longitude,
            retrograde=bool(position.retrograde),
            emphasized=selected or hovered,
            selected=selected,
            hovered=hovered,
            degree_label=position.degree_label() if hovered else None,
        )

    def current(self) -> RenderModel:
        """Render the stored chart with the stored toggles."""

        if self.chart is None:
            raise InvalidChartData("no chart loaded", field="chart")
        if self._model is None:
            self._model = self.render(self.chart, self.show_aspects, self.show_houses)
        return self._model

    # Events --------------------------------------------------------------
    def on_chart_data_changed(self, chart: BirthChartData) -> None:
        validate_chart(chart)
        self.chart = chart
        self.placements(chart)
        self._model = None
        LOG.debug("chart data changed; %d placement run(s) so far", self.placement_runs)

    def on_planet_click(self, key: str) -> InteractionState:
        self._model = None
        return self.selection.on_marker_click(key)

    def on_planet_hover_enter(self, key: str) -> InteractionState:
        self._model = None
        return self.selection.on_marker_hover_enter(key)

    def on_planet_hover_exit(self, key: str) -> InteractionState:
        self._model = None
        return self.selection.on_marker_hover_exit(key)

    def on_toggle_aspects(self, enabled: bool) -> None:
        self.show_aspects = bool(enabled)
        self._model = None

    def on_toggle_houses(self, enabled: bool) -> None:
        self.show_houses = bool(enabled)
        self._model = None

    def aspects_for(self, key: str) -> tuple[Aspect, ...]:
        """Aspects touching ``key`` in the stored chart (detail panel)."""

        if self.chart is None:
            return ()
        return tuple(a for a in self._clean_aspects(self.chart) if a.involves(key))
