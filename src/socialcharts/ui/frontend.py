"""Simple frontend helpers for socialcharts."""

from __future__ import annotations

from typing import Mapping

from socialcharts.scene import Scene


def summarize_scene(scene: Scene) -> Mapping[str, object]:
    """
    Prepare a compact summary of a scene for JSON serialization.
    """

    counts: dict[str, int] = {}
    for command in scene.commands:
        counts[command.kind] = counts.get(command.kind, 0) + 1
    return {
        "width": scene.width,
        "height": scene.height,
        "commands": len(scene.commands),
        "command_breakdown": counts,
    }


def render_index(chart_files: Mapping[str, str]) -> str:
    """Return an HTML page showing each chart image."""

    if not chart_files:
        body = "<p>No charts have been rendered yet.</p>"
    else:
        body = "\n".join(
            f'<section id="{name}"><h2>{name}</h2><img src="/charts/{filename}" alt="{name}"></section>'
            for name, filename in chart_files.items()
        )
    return (
        "<!DOCTYPE html>\n<html><head><meta charset=\"utf-8\"><title>Social media charts</title></head>\n"
        f"<body>\n<h1>Social media charts</h1>\n{body}\n</body></html>\n"
    )
