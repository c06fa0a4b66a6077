"""Matplotlib renderer for :class:`~socialcharts.scene.Scene` objects."""

from __future__ import annotations

import logging
from pathlib import Path

from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import PathPatch, Rectangle
from matplotlib.path import Path as MplPath

from socialcharts.scene import Line, Path as ScenePath, Rect, Scene, Text

LOGGER = logging.getLogger("socialcharts.render")
logging.getLogger("matplotlib").setLevel(logging.WARNING)

DEFAULT_DPI = 100
SUPPORTED_SUFFIXES = (".png", ".svg")

H_ALIGN = {"start": "left", "middle": "center", "end": "right"}
V_ALIGN = {"alphabetic": "baseline", "middle": "center", "hanging": "top"}
PATH_CODES = {"M": (MplPath.MOVETO,), "L": (MplPath.LINETO,), "C": (MplPath.CURVE4,) * 3}


def _px_to_pt(value: float, dpi: float) -> float:
    return value * 72.0 / dpi


def _path_vertices(path: ScenePath) -> tuple[list[tuple[float, float]], list[int]]:
    vertices: list[tuple[float, float]] = []
    codes: list[int] = []
    for command, *coords in path.segments:
        if command not in PATH_CODES:
            raise ValueError(f"Unsupported path command: {command}")
        codes.extend(PATH_CODES[command])
        vertices.extend(zip(coords[0::2], coords[1::2]))
    return vertices, codes


def draw_scene(scene: Scene, *, dpi: float = DEFAULT_DPI) -> Figure:
    """
    Build a figure whose data coordinates are the scene's pixel coordinates.
    """

    fig = Figure(figsize=(scene.width / dpi, scene.height / dpi), dpi=dpi)
    if scene.background:
        fig.patch.set_facecolor(scene.background)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, scene.width)
    ax.set_ylim(scene.height, 0)
    ax.set_axis_off()
    ax.patch.set_alpha(0.0)

    for command in scene.commands:
        if isinstance(command, Rect):
            ax.add_patch(
                Rectangle(
                    (command.x, command.y),
                    command.width,
                    command.height,
                    facecolor=command.fill,
                    edgecolor=command.stroke or "none",
                    linewidth=_px_to_pt(command.stroke_width, dpi) if command.stroke else 0.0,
                )
            )
        elif isinstance(command, Line):
            ax.add_line(
                Line2D(
                    [command.x1, command.x2],
                    [command.y1, command.y2],
                    color=command.stroke,
                    linewidth=_px_to_pt(command.stroke_width, dpi),
                    solid_capstyle="butt",
                )
            )
        elif isinstance(command, Text):
            ax.text(
                command.x,
                command.y,
                command.text,
                ha=H_ALIGN.get(command.anchor, "left"),
                va=V_ALIGN.get(command.baseline, "baseline"),
                rotation=-command.rotate,
                rotation_mode="anchor",
                fontsize=_px_to_pt(command.font_size, dpi),
                color=command.fill,
            )
        elif isinstance(command, ScenePath):
            vertices, codes = _path_vertices(command)
            if not vertices:
                continue
            ax.add_patch(
                PathPatch(
                    MplPath(vertices, codes),
                    facecolor=command.fill or "none",
                    edgecolor=command.stroke,
                    linewidth=_px_to_pt(command.stroke_width, dpi),
                )
            )
        else:
            raise TypeError(f"Unknown draw command: {command!r}")
    return fig


def render_scene(scene: Scene, out_path: Path, *, dpi: float = DEFAULT_DPI) -> Path:
    """Render ``scene`` to a PNG or SVG file chosen by the file suffix."""

    out_path = Path(out_path)
    suffix = out_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported output format: {out_path.suffix or '(none)'}")
    fig = draw_scene(scene, dpi=dpi)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=dpi, format=suffix[1:], facecolor=fig.get_facecolor())
    LOGGER.info("Saved chart to %s", out_path)
    return out_path
