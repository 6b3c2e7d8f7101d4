from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import ClassVar, Literal, Tuple, Union
import numbers
import numpy as np

from .errors import InvalidGeometry, InvalidParameter, MeasurementOverflow


ShapeKind = Literal["circle", "rectangle", "triangle"]


# ---- Float types ----
def resolve_dtype(dtype) -> type:
    """
    Normalize a float type (np.float32, "float64", np.dtype(...)) to its numpy scalar type.
    """
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as e:
        raise TypeError(f"unsupported float type: {dtype!r}") from e
    if not issubclass(scalar_type, np.floating):
        raise TypeError(f"float type must be a numpy floating type, got {scalar_type.__name__}")
    return scalar_type


@lru_cache(maxsize=None)
def _pi(scalar_type: type) -> np.floating:
    return np.arctan2(scalar_type(0), scalar_type(-1))


def pi_for(dtype=np.float64) -> np.floating:
    """
    Pi in the precision of the given float type, computed once per type.
    """
    return _pi(resolve_dtype(dtype))


def as_dimension(name: str, value, dtype=np.float64) -> np.floating:
    """
    Coerce a raw dimension to the float type, rejecting anything not strictly positive and finite.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    scalar_type = resolve_dtype(dtype)
    try:
        with np.errstate(over="ignore"):
            x = scalar_type(value)
    except OverflowError:
        # Python ints beyond the float range raise instead of rounding to inf
        raise InvalidParameter(name, value) from None
    if not np.isfinite(x) or x <= 0:
        raise InvalidParameter(name, value)
    return x


# ---- Dimension variants ----
@dataclass(frozen=True)
class CircleDims:
    kind: ClassVar[ShapeKind] = "circle"
    fields: ClassVar[Tuple[str, ...]] = ("radius",)

    radius: float
    dtype: type = np.float64

    def __post_init__(self):
        dtype = resolve_dtype(self.dtype)
        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "radius", as_dimension("radius", self.radius, dtype))


@dataclass(frozen=True)
class RectangleDims:
    kind: ClassVar[ShapeKind] = "rectangle"
    fields: ClassVar[Tuple[str, ...]] = ("length", "breadth")

    length: float
    breadth: float
    dtype: type = np.float64

    def __post_init__(self):
        dtype = resolve_dtype(self.dtype)
        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "length", as_dimension("length", self.length, dtype))
        object.__setattr__(self, "breadth", as_dimension("breadth", self.breadth, dtype))

    @property
    def is_square(self) -> bool:
        return bool(self.length == self.breadth)


@dataclass(frozen=True)
class TriangleDims:
    """
    Three side lengths. Sides must satisfy the strict triangle inequality.
    """
    kind: ClassVar[ShapeKind] = "triangle"
    fields: ClassVar[Tuple[str, ...]] = ("a", "b", "c")

    a: float
    b: float
    c: float
    dtype: type = np.float64

    def __post_init__(self):
        dtype = resolve_dtype(self.dtype)
        object.__setattr__(self, "dtype", dtype)
        for name in self.fields:
            object.__setattr__(self, name, as_dimension(name, getattr(self, name), dtype))
        a, b, c = self.a, self.b, self.c
        if a + b <= c or a + c <= b or b + c <= a:
            raise InvalidGeometry((a, b, c))

    @property
    def sides(self) -> Tuple[float, float, float]:
        return self.a, self.b, self.c

    @property
    def is_equilateral(self) -> bool:
        return bool(self.a == self.b == self.c)

    @property
    def is_isosceles(self) -> bool:
        return bool(self.a == self.b or self.b == self.c or self.a == self.c)


Dims = Union[CircleDims, RectangleDims, TriangleDims]


# ---- Measurement ----
@dataclass(frozen=True)
class Metrics:
    area: float
    perimeter: float


def heron_area(a: np.floating, b: np.floating, c: np.floating) -> np.floating:
    """
    Triangle area from its sides via the semi-perimeter s: sqrt(s(s-a)(s-b)(s-c)).

    Precision note: for needle-like triangles (one side close to the sum of the
    other two) the factor s - c suffers cancellation, so the relative error of the
    area grows well beyond machine epsilon. Results for such inputs, especially in
    float16/float32, should be treated as approximate.

    The sides are scaled by a power of two near the longest side before the
    product is formed, so it does not overflow while the area itself fits. Power
    of two scaling is exact, so results for ordinary inputs are unchanged.
    """
    scalar_type = type(a)
    _, exp = np.frexp(max(a, b, c))
    exp = int(exp)
    a, b, c = (np.ldexp(x, -exp) for x in (a, b, c))
    s = (a + b + c) / scalar_type(2)
    product = s * (s - a) * (s - b) * (s - c)
    # Rounding can push a valid near-degenerate product just below zero
    if product < 0:
        product = scalar_type(0)
    return np.ldexp(np.sqrt(product), 2 * exp)


def measure(dims: Dims) -> Metrics:
    """
    Derive area and perimeter for any dimension variant, dispatching on its kind tag.

    Raises MeasurementOverflow when a metric is not finite in the variant's float type.
    """
    two = dims.dtype(2)
    with np.errstate(over="ignore"):
        if dims.kind == "circle":
            pi = pi_for(dims.dtype)
            r = dims.radius
            metrics = Metrics(area=pi * r * r, perimeter=two * pi * r)
        elif dims.kind == "rectangle":
            l, b = dims.length, dims.breadth
            metrics = Metrics(area=l * b, perimeter=two * (l + b))
        elif dims.kind == "triangle":
            a, b, c = dims.sides
            metrics = Metrics(area=heron_area(a, b, c), perimeter=a + b + c)
        else:
            raise ValueError(f"unknown shape kind: {dims.kind}")
    if not (np.isfinite(metrics.area) and np.isfinite(metrics.perimeter)):
        raise MeasurementOverflow(dims, metrics.area, metrics.perimeter)
    return metrics
