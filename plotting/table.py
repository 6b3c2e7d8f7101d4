from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from shapes import Shape


@dataclass(frozen=True)
class TableConfig:
    precision: int = 4
    index_base: int = 1
    index_header: str = "Shape #"
    area_header: str = "Area"
    perimeter_header: str = "Perimeter"


def metrics_rows(shapes: Sequence[Shape], index_base: int = 1) -> List[Tuple[int, float, float]]:
    return [(i + index_base, float(s.area()), float(s.perimeter())) for i, s in enumerate(shapes)]


def format_table(shapes: Sequence[Shape], cfg: TableConfig = TableConfig()) -> str:
    """
    Tab-separated (index, area, perimeter) listing with fixed decimals.
    """
    if cfg.precision < 0:
        raise ValueError("precision must be non-negative")
    headers = (cfg.index_header, cfg.area_header, cfg.perimeter_header)
    lines = [
        "{}\t{}\t\t{}".format(*headers),
        "{}\t{}\t\t{}".format(*("-" * len(h) for h in headers)),
    ]
    for idx, area, perimeter in metrics_rows(shapes, cfg.index_base):
        lines.append(f"{idx}\t{area:.{cfg.precision}f}\t\t{perimeter:.{cfg.precision}f}")
    return "\n".join(lines)
