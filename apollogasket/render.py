"""Headless matplotlib rendering of a gasket snapshot.

The renderer only consumes ``Circle`` values (center + radius); it never
touches the driver. Coordinates are canvas pixels with y pointing down, the
same orientation as the interactive viewer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib
import matplotlib.patches as patches
import numpy as np
from matplotlib.figure import Figure

from . import settings
from .core.circle import Circle


def draw_packing(
    ax,
    circles: Sequence[Circle],
    *,
    canvas_size: float = settings.CANVAS_SIZE,
    color_by_depth: bool = False,
    linewidth: float = settings.STROKE_WIDTH,
) -> int:
    """Add one outline patch per circle to ``ax``; returns the patch count."""
    ax.set_aspect("equal")
    ax.set_xlim(0.0, canvas_size)
    ax.set_ylim(canvas_size, 0.0)
    ax.set_axis_off()

    colors = None
    if color_by_depth and circles:
        max_depth = max(c.depth for c in circles)
        colors = matplotlib.colormaps["viridis"](np.linspace(0, 1, max_depth + 1))

    for circle in circles:
        if colors is not None and not circle.is_outer:
            color = colors[circle.depth]
        else:
            color = settings.STROKE_COLOR
        ax.add_patch(
            patches.Circle(circle.center, circle.radius, fill=False, edgecolor=color, linewidth=linewidth)
        )
    return len(circles)


def save_packing(
    circles: Sequence[Circle],
    output_path: Union[str, Path],
    *,
    canvas_size: float = settings.CANVAS_SIZE,
    dpi: int = 100,
    color_by_depth: bool = False,
    title: Optional[str] = None,
) -> Path:
    """Render ``circles`` to an image file sized to the canvas."""
    inches = canvas_size / dpi
    fig = Figure(figsize=(inches, inches), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    fig.patch.set_facecolor(settings.BACKGROUND_COLOR)
    draw_packing(ax, circles, canvas_size=canvas_size, color_by_depth=color_by_depth)
    if title:
        ax.set_title(title)
    path = Path(output_path)
    fig.savefig(path, dpi=dpi, facecolor=fig.get_facecolor())
    return path


__all__ = ["draw_packing", "save_packing"]
