from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import CircleDims, Dims, Metrics, RectangleDims, ShapeKind, TriangleDims
from .policy import policy_for


@dataclass(frozen=True)
class Shape:
    """
    A measured shape. Metrics come from the kind's policy at construction, so a Shape is never uncomputed.
    """
    dims: Dims
    metrics: Metrics = field(init=False)

    def __post_init__(self):
        if not isinstance(self.dims, (CircleDims, RectangleDims, TriangleDims)):
            raise TypeError(f"dims must be a dimension variant, got {type(self.dims).__name__}")
        object.__setattr__(self, "metrics", policy_for(self.dims.kind).derive(self.dims))

    @property
    def kind(self) -> ShapeKind:
        return self.dims.kind

    @property
    def dtype(self) -> type:
        return self.dims.dtype

    def area(self) -> float:
        return self.metrics.area

    def perimeter(self) -> float:
        return self.metrics.perimeter
