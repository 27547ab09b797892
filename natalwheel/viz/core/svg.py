"""Minimal deterministic SVG scene graph.

Attributes are stored as strings and serialised in sorted order, children
in insertion order, so the same scene always yields byte-identical output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

__all__ = ["SVG_NS", "SvgDocument", "SvgElement"]

SVG_NS = "http://www.w3.org/2000/svg"


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Fixed precision keeps exports stable across platforms.
        text = f"{value:.4f}".rstrip("0").rstrip(".")
        return "0" if text in {"", "-0"} else text
    return str(value)


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


@dataclass
class SvgElement:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["SvgElement"] = field(default_factory=list)
    text: str | None = None

    def set(self, **attrs: object) -> "SvgElement":
        """Assign attributes; ``None`` values are skipped, ``_`` becomes ``-``."""

        for key, value in attrs.items():
            if value is None:
                continue
            self.attributes[key.replace("_", "-")] = _format(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        attrs = "".join(
            f' {name}="{_escape(value)}"' for name, value in sorted(self.attributes.items())
        )
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"
        if self.text is not None and not self.children:
            return f"{pad}<{self.tag}{attrs}>{_escape(self.text)}</{self.tag}>"
        joiner = "\n" if pretty else ""
        parts = [f"{pad}<{self.tag}{attrs}>"]
        if self.text is not None:
            parts.append(("  " * (indent + 1) if pretty else "") + _escape(self.text))
        parts.extend(child.to_string(indent + 1, pretty=pretty) for child in self.children)
        parts.append(f"{pad}</{self.tag}>")
        return joiner.join(parts)


@dataclass
class SvgDocument:
    """Square or rectangular scene that serialises to standalone SVG."""

    width: float
    height: float
    background: str | None = None
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        self.root = SvgElement("svg").set(
            xmlns=SVG_NS,
            width=self.width,
            height=self.height,
            viewBox=f"0 0 {_format(self.width)} {_format(self.height)}",
        )
        if self.background:
            self.root.add(
                SvgElement("rect").set(
                    x=0, y=0, width=self.width, height=self.height, fill=self.background
                )
            )

    # Element factories -------------------------------------------------
    def _attach(self, element: SvgElement, parent: SvgElement | None) -> SvgElement:
        (parent or self.root).add(element)
        return element

    def group(self, parent: SvgElement | None = None, **attrs: object) -> SvgElement:
        return self._attach(SvgElement("g").set(**attrs), parent)

    def circle(
        self, cx: float, cy: float, r: float, parent: SvgElement | None = None, **attrs: object
    ) -> SvgElement:
        return self._attach(SvgElement("circle").set(cx=cx, cy=cy, r=r, **attrs), parent)

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        parent: SvgElement | None = None,
        **attrs: object,
    ) -> SvgElement:
        return self._attach(
            SvgElement("line").set(x1=x1, y1=y1, x2=x2, y2=y2, **attrs), parent
        )

    def path(self, d: str, parent: SvgElement | None = None, **attrs: object) -> SvgElement:
        return self._attach(SvgElement("path").set(d=d, **attrs), parent)

    def text(
        self, x: float, y: float, value: str, parent: SvgElement | None = None, **attrs: object
    ) -> SvgElement:
        return self._attach(SvgElement("text", text=value).set(x=x, y=y, **attrs), parent)

    def extend(self, elements: Iterable[SvgElement]) -> None:
        self.root.add(*elements)

    def to_string(self, pretty: bool = True) -> str:
        return self.root.to_string(indent=0, pretty=pretty)

    def to_bytes(self, pretty: bool = True) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")
