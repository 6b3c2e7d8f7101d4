from __future__ import annotations

import argparse
import logging
from typing import List

import numpy as np

from shapes import Shape, ShapeFactory
from plotting import TableConfig, format_table, render_shape_gallery, render_metrics_chart

DTYPES = {
    "float32": np.float32,
    "float64": np.float64,
    "longdouble": np.longdouble,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the reference shapes and list their area and perimeter.")
    p.add_argument("--dtype", choices=sorted(DTYPES), default="float64", help="float type for all dimensions (default: float64)")
    p.add_argument("--precision", type=int, default=4, help="decimals in the table (default: 4)")
    p.add_argument("--gallery", type=str, default=None, help="optional output path for a grid of shape outlines")
    p.add_argument("--chart", type=str, default=None, help="optional output path for an area/perimeter bar chart")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING", help="logging level (default: WARNING)")
    args = p.parse_args(argv)
    if args.precision < 0:
        p.error("--precision must be non-negative")
    return args


def build_reference_shapes(dtype=np.float64) -> List[Shape]:
    return [
        ShapeFactory.create_circle(3.5, dtype=dtype),
        ShapeFactory.create_rectangle(4.0, 2.5, dtype=dtype),
        ShapeFactory.create_square(5.0, dtype=dtype),
        ShapeFactory.create_triangle(3.0, 4.0, 5.0, dtype=dtype),
        ShapeFactory.create_isosceles_triangle(6.0, 4.0, dtype=dtype),
        ShapeFactory.create_equilateral_triangle(2.5, dtype=dtype),
    ]


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    shapes = build_reference_shapes(DTYPES[args.dtype])
    print(format_table(shapes, TableConfig(precision=args.precision)))
    if args.gallery:
        render_shape_gallery(shapes, args.gallery)
        print(f"Saved gallery -> {args.gallery}")
    if args.chart:
        render_metrics_chart(shapes, args.chart)
        print(f"Saved chart -> {args.chart}")


if __name__ == "__main__":
    main()
