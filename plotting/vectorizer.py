import io
import math
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import Point, Polygon, box
from PIL import Image

from shapes import Shape


DEFAULT_RGB = np.array([0.2, 0.45, 0.95])


def triangle_vertices(a: float, b: float, c: float) -> np.ndarray:
    """
    Place a triangle with side c on the x axis from the origin; b joins the origin to the apex.
    """
    x = (b * b + c * c - a * a) / (2.0 * c)
    y = math.sqrt(max(b * b - x * x, 0.0))
    return np.array([[0.0, 0.0], [c, 0.0], [x, y]], dtype=float)


def shape_to_shapely(
    shape: Shape,
    quad_segs: int = 64
) -> Polygon:
    """
    Canonical outline of a measured shape. Only used for drawing; the shape itself has no position.
    """
    dims = shape.dims
    if shape.kind == "circle":
        return Point(0, 0).buffer(float(dims.radius), quad_segs=quad_segs)
    if shape.kind == "rectangle":
        return box(0.0, 0.0, float(dims.length), float(dims.breadth))
    if shape.kind == "triangle":
        a, b, c = (float(s) for s in dims.sides)
        return Polygon(triangle_vertices(a, b, c))
    raise ValueError(f"Unknown kind {shape.kind}")


def draw_shape_on_axis(
    ax: plt.Axes,
    shape: Shape,
    rgb: Sequence[float] = DEFAULT_RGB,
    margin: float = 0.1,
    title: Optional[str] = None,
) -> None:
    """
    Fills the shape outline on a Matplotlib axis, framed in a square box around its bounds.
    """
    geom = shape_to_shapely(shape)
    minx, miny, maxx, maxy = geom.bounds

    half_side = max(maxx - minx, maxy - miny) / 2 * (1.0 + margin)
    center_x = (minx + maxx) / 2
    center_y = (miny + maxy) / 2

    ax.set_aspect('equal')
    ax.set_xlim(center_x - half_side, center_x + half_side)
    ax.set_ylim(center_y - half_side, center_y + half_side)
    ax.axis('off')

    rgba = np.append(np.asarray(rgb, dtype=float).flatten()[:3], 1.0)
    x, y = geom.exterior.xy
    ax.fill(x, y, fc=rgba, ec='black', linewidth=1.0, joinstyle='round')
    if title:
        ax.set_title(title, fontsize=10)


def save_shape_as_svg(
    shape: Shape,
    filename: str
) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    draw_shape_on_axis(ax, shape)
    fig.savefig(
        filename,
        format='svg',
        bbox_inches='tight',
        pad_inches=0
    )
    plt.close(fig)


def save_shape_as_png(
    shape: Shape,
    filename: Optional[str] = None,
    resolution: int = 128
) -> Optional[Image.Image]:
    """
    Saves the shape outline as a PNG, or returns the PIL Image if filename is None.
    """
    dpi = resolution / 3.0

    fig, ax = plt.subplots(figsize=(3, 3))
    draw_shape_on_axis(ax, shape)

    target = io.BytesIO() if filename is None else filename
    fig.savefig(
        target,
        format='png',
        dpi=dpi,
        bbox_inches='tight',
        pad_inches=0,
        transparent=False,
        facecolor='white'
    )
    plt.close(fig)
    if filename is None:
        target.seek(0)
        return Image.open(target)
    return None
