from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple
import os
import numpy as np
import matplotlib.pyplot as plt

from shapes import Shape

from plotting.table import metrics_rows
from plotting.vectorizer import draw_shape_on_axis


@dataclass(frozen=True)
class GalleryConfig:
    cols: int = 3
    figsize_per_cell: Tuple[float, float] = (3.0, 3.0)
    dpi: int = 200
    precision: int = 2


def _ensure_parent_dir(out_path: str) -> None:
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _format_for(out_path: str) -> str:
    return "svg" if out_path.endswith(".svg") else "png"


def render_shape_gallery(
    shapes: Sequence[Shape],
    out_path: str,
    cfg: GalleryConfig = GalleryConfig(),
) -> None:
    """
    Renders a grid of shape outlines, each titled with its index, area and perimeter.
    """
    n = len(shapes)
    if n == 0:
        raise ValueError("No shapes provided")
    cols = max(1, min(cfg.cols, n))
    rows = (n + cols - 1) // cols
    fig_w = cfg.figsize_per_cell[0] * cols
    fig_h = cfg.figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor('white')

    colors = plt.cm.viridis(np.linspace(0.15, 0.85, n))
    for idx, (shape, (label, area, perimeter)) in enumerate(zip(shapes, metrics_rows(shapes))):
        ax = axes[idx // cols, idx % cols]
        title = f"{label}: {shape.kind}\nA={area:.{cfg.precision}f}  P={perimeter:.{cfg.precision}f}"
        draw_shape_on_axis(ax, shape, rgb=colors[idx], title=title)

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    _ensure_parent_dir(out_path)
    fig.savefig(out_path, dpi=cfg.dpi, format=_format_for(out_path), transparent=False, facecolor='white')
    plt.close(fig)


def render_metrics_chart(
    shapes: Sequence[Shape],
    out_path: str,
    figsize: Tuple[float, float] = (7.0, 4.0),
    dpi: int = 200,
) -> None:
    """
    Grouped bar chart of area and perimeter per shape.
    """
    if not shapes:
        raise ValueError("No shapes provided")
    rows = metrics_rows(shapes)
    x = np.arange(len(rows))
    areas = [r[1] for r in rows]
    perimeters = [r[2] for r in rows]
    width = 0.4

    fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    ax.bar(x - width / 2, areas, width, label="Area")
    ax.bar(x + width / 2, perimeters, width, label="Perimeter")
    ax.set_xticks(x)
    ax.set_xticklabels([f"{r[0]}\n{s.kind}" for r, s in zip(rows, shapes)])
    ax.set_xlabel("Shape #")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.2, linestyle="--")

    _ensure_parent_dir(out_path)
    fig.savefig(out_path, dpi=dpi, format=_format_for(out_path))
    plt.close(fig)
