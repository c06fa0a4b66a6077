"""Renderer-independent description of a chart as draw commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterable, Union

Segment = tuple


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str = "black"
    stroke: str | None = None
    stroke_width: float = 1.0
    kind: str = field(default="rect", init=False)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "black"
    stroke_width: float = 1.0
    kind: str = field(default="line", init=False)


@dataclass(frozen=True)
class Text:
    """
    A text label anchored at ``(x, y)``.

    ``anchor`` is start/middle/end, ``baseline`` is alphabetic/middle/hanging,
    and ``rotate`` is in degrees clockwise about the anchor point.
    """

    x: float
    y: float
    text: str
    anchor: str = "start"
    baseline: str = "alphabetic"
    rotate: float = 0.0
    font_size: float = 10.0
    fill: str = "black"
    kind: str = field(default="text", init=False)


@dataclass(frozen=True)
class Path:
    """A polyline or cubic Bézier path made of M/L/C segments."""

    segments: tuple[Segment, ...]
    stroke: str = "black"
    stroke_width: float = 1.0
    fill: str | None = None
    kind: str = field(default="path", init=False)

    @property
    def d(self) -> str:
        parts = []
        for command, *coords in self.segments:
            pairs = [f"{coords[i]:g},{coords[i + 1]:g}" for i in range(0, len(coords), 2)]
            parts.append(command + ",".join(pairs))
        return "".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        payload["segments"] = [list(segment) for segment in self.segments]
        payload["d"] = self.d
        return payload


DrawCommand = Union[Rect, Line, Text, Path]


@dataclass
class Scene:
    """Ordered draw commands over a ``width`` x ``height`` pixel canvas."""

    width: float
    height: float
    background: str | None = None
    commands: list[DrawCommand] = field(default_factory=list)

    def add(self, command: DrawCommand) -> DrawCommand:
        self.commands.append(command)
        return command

    def extend(self, commands: Iterable[DrawCommand]) -> None:
        self.commands.extend(commands)

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [command for command in self.commands if command.kind == kind]

    def to_dict(self) -> dict[str, object]:
        return {
            "width": self.width,
            "height": self.height,
            "background": self.background,
            "commands": [
                command.to_dict() if isinstance(command, Path) else asdict(command)
                for command in self.commands
            ],
        }
