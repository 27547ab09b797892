"""``render`` and ``layout`` subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ..chart.catalog import canonical_point_key
from ..chart.model import BirthChartData
from ..chart.schemas import load_chart, load_chart_file
from ..config.settings import Settings, load_settings
from ..errors import InvalidChartData, PlacementError
from ..interaction.controller import InteractionController, RenderModel
from ..visual.wheel import export_wheel

LOG = logging.getLogger(__name__)


def _add_chart_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("chart", help="Birth chart JSON file (use '-' for stdin)")
    parser.add_argument("--config", help="Settings YAML file (default: NATALWHEEL_HOME/config.yaml)")
    parser.add_argument("--select", metavar="KEY", help="Celestial point to select")
    parser.add_argument("--hover", metavar="KEY", help="Celestial point to hover")
    parser.add_argument(
        "--no-aspects", dest="show_aspects", action="store_false", help="Hide aspect lines"
    )
    parser.add_argument(
        "--no-houses", dest="show_houses", action="store_false", help="Hide the house ring"
    )


def add_subparsers(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``render`` and ``layout`` subcommands."""

    render = sub.add_parser(
        "render",
        help="Draw a chart wheel to SVG or PNG",
        description="Lay out a birth chart and write the drawn wheel to a file.",
    )
    _add_chart_arguments(render)
    render.add_argument("--out", required=True, help="Destination file")
    render.add_argument(
        "--format",
        choices=("svg", "png"),
        help="Output format (default: inferred from --out, else svg)",
    )
    render.add_argument("--theme", choices=("dark", "light"), help="Override the configured theme")
    render.set_defaults(func=run_render)

    layout = sub.add_parser(
        "layout",
        help="Print the computed render model as JSON",
        description="Lay out a birth chart and print marker, ring and aspect geometry.",
    )
    _add_chart_arguments(layout)
    layout.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    layout.set_defaults(func=run_layout)


def _settings(args: argparse.Namespace) -> Settings:
    return load_settings(Path(args.config) if args.config else None)


def _load(path: str) -> BirthChartData:
    if path == "-":
        return load_chart(json.loads(sys.stdin.read()))
    return load_chart_file(path)


def _point(value: str | None, flag: str) -> str | None:
    if value is None:
        return None
    key = canonical_point_key(value)
    if key is None:
        raise InvalidChartData(f"unknown celestial point '{value}' for {flag}", field=flag)
    return key


def build_model(args: argparse.Namespace, settings: Settings) -> RenderModel:
    chart = _load(args.chart)
    controller = InteractionController(settings)
    controller.on_chart_data_changed(chart)
    selected = _point(args.select, "--select")
    hovered = _point(args.hover, "--hover")
    if selected:
        controller.on_planet_click(selected)
    if hovered:
        controller.on_planet_hover_enter(hovered)
    controller.on_toggle_aspects(args.show_aspects)
    controller.on_toggle_houses(args.show_houses)
    LOG.debug("laying out chart from %s (selected=%s, hovered=%s)", args.chart, selected, hovered)
    return controller.current()


def _format_for(args: argparse.Namespace) -> str:
    if args.format:
        return args.format
    suffix = Path(args.out).suffix.lower().lstrip(".")
    return suffix if suffix in {"svg", "png"} else "svg"


def run_render(args: argparse.Namespace) -> int:
    """Execute the render subcommand."""

    try:
        settings = _settings(args)
        model = build_model(args, settings)
        payload = export_wheel(model, _format_for(args), theme=args.theme, settings=settings)
    except (InvalidChartData, PlacementError, OSError, ValueError) as exc:
        print(f"render failed: {exc}", file=sys.stderr)
        return 1
    Path(args.out).write_bytes(payload)
    print(f"rendered {len(model.markers)} markers to {args.out}")
    return 0


def run_layout(args: argparse.Namespace) -> int:
    """Execute the layout subcommand."""

    try:
        model = build_model(args, _settings(args))
    except (InvalidChartData, PlacementError, OSError, ValueError) as exc:
        print(f"layout failed: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(model.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0
