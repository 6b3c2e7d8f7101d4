"""Errors raised while building and measuring shapes."""

from __future__ import annotations

from typing import Tuple


class ShapeError(ValueError):
    """Base class for invalid shape input."""

    pass


class InvalidParameter(ShapeError):
    """A dimension was not a positive, finite number."""

    def __init__(self, field: str, value: float):
        super().__init__(f"{field} must be positive and finite, got: {value!r}")
        self.field = field
        self.value = value


class InvalidGeometry(ShapeError):
    """Three sides that cannot close a triangle."""

    def __init__(self, sides: Tuple[float, float, float]):
        a, b, c = sides
        super().__init__(
            f"Triangle sides ({a}, {b}, {c}) do not satisfy the triangle inequality"
        )
        self.sides = sides


class IncompleteShape(ShapeError):
    """compute() was called before every required dimension was set."""

    def __init__(self, kind: str, missing: Tuple[str, ...]):
        super().__init__(f"{kind} is missing required dimension(s): {', '.join(missing)}")
        self.kind = kind
        self.missing = missing


class MeasurementOverflow(ShapeError):
    """Valid dimensions whose area or perimeter is not representable in the float type."""

    def __init__(self, dims, area: float, perimeter: float):
        super().__init__(
            f"{dims.kind} metrics overflow {dims.dtype.__name__}: area={area}, perimeter={perimeter}"
        )
        self.dims = dims
        self.area = area
        self.perimeter = perimeter
