from __future__ import annotations

from typing import Dict, Optional
import logging
import numpy as np

from .errors import ShapeError
from .geometry import resolve_dtype
from .policy import CIRCLE, RECTANGLE, TRIANGLE, Err, Ok, Result, ShapePolicy, unwrap
from .shape import Shape

logger = logging.getLogger(__name__)


class ShapeBuilder:
    """
    Accumulates raw dimensions for one shape kind, then measures them.

    Setters validate their own field immediately and raise InvalidParameter.
    Cross-field checks (completeness, triangle inequality) run in compute().
    """
    policy: ShapePolicy

    def __init__(self, dtype=np.float64):
        self.dtype = resolve_dtype(dtype)
        self._raw: Dict[str, Optional[np.floating]] = {name: None for name in self.policy.fields}

    def _assign(self, name: str, value) -> Result[np.floating]:
        result = self.policy.check_field(name, value, self.dtype)
        if isinstance(result, Ok):
            self._raw[name] = result.value
        return result

    def _set(self, name: str, value) -> "ShapeBuilder":
        unwrap(self._assign(name, value))
        return self

    @property
    def values(self) -> Dict[str, Optional[np.floating]]:
        return dict(self._raw)

    def try_compute(self) -> Result[Shape]:
        result = self.policy.validate(self._raw, self.dtype)
        if not isinstance(result, Ok):
            logger.debug("%s rejected: %s", self.policy.kind, result.error)
            return result
        try:
            shape = Shape(result.value)
        except ShapeError as e:
            logger.debug("%s not measurable: %s", self.policy.kind, e)
            return Err(e)
        logger.debug("Measured %s: area=%s perimeter=%s", shape.kind, shape.area(), shape.perimeter())
        return Ok(shape)

    def compute(self) -> Shape:
        """
        Measure the stored dimensions. Each call derives a fresh Shape from the current fields.
        """
        return unwrap(self.try_compute())

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self._raw.items())
        return f"{type(self).__name__}({fields}, dtype={self.dtype.__name__})"


class CircleBuilder(ShapeBuilder):
    policy = CIRCLE

    def set_radius(self, r) -> "CircleBuilder":
        return self._set("radius", r)


class RectangleBuilder(ShapeBuilder):
    policy = RECTANGLE

    def set_length(self, l) -> "RectangleBuilder":
        return self._set("length", l)

    def set_breadth(self, b) -> "RectangleBuilder":
        return self._set("breadth", b)


class TriangleBuilder(ShapeBuilder):
    """
    Area comes from Heron's formula, see geometry.heron_area for its precision limits.
    """
    policy = TRIANGLE

    def set_side_a(self, x) -> "TriangleBuilder":
        return self._set("a", x)

    def set_side_b(self, x) -> "TriangleBuilder":
        return self._set("b", x)

    def set_side_c(self, x) -> "TriangleBuilder":
        return self._set("c", x)
